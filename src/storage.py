"""Persistence helpers (load/save) for the task file.

The file holds one JSON array of task objects. A missing file is an empty
store; anything that does not decode to a list of valid tasks is reported as
CorruptStoreError and never rewritten on its own.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from models import Task

logger = logging.getLogger(__name__)


class CorruptStoreError(Exception):
    """The task file exists but its content is not a valid task list."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Task file {path} is corrupt: {reason}")
        self.path = path
        self.reason = reason


class Storage:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> List[Task]:
        """Load every task from disk, in stored order.

        Missing file -> empty list. Unreadable file -> OSError.
        """
        if not self.path.exists():
            logger.debug("No task file at %s; starting empty", self.path)
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                text = f.read()
        except UnicodeDecodeError as exc:
            raise CorruptStoreError(self.path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CorruptStoreError(self.path, f"invalid JSON ({exc})") from exc
        if not isinstance(data, list):
            raise CorruptStoreError(self.path, "expected a JSON array of tasks")
        tasks: List[Task] = []
        for index, raw in enumerate(data):
            if not isinstance(raw, dict):
                raise CorruptStoreError(self.path, f"entry {index} is not an object")
            try:
                tasks.append(Task.from_dict(raw))
            except ValueError as exc:
                raise CorruptStoreError(self.path, f"entry {index}: {exc}") from exc
        logger.debug("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """Replace the task file with the given list (pretty-printed).

        Writes a sibling temp file first and renames it over the target.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
                f.write('\n')
            os.replace(tmp_name, self.path)
        except BaseException:
            # leave the previous file untouched on failure
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
