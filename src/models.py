"""Data models for the tazu task tracker.

Only exposes the Task dataclass. Python attributes are snake_case while the
persisted JSON keys keep the camelCase names of the on-disk format
("createdAt"), so existing task files stay readable.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

JSON_KEYS = ("id", "createdAt", "description", "priority", "link", "done")


@dataclass
class Task:
    """A single task record.

    Fields:
        id: Positive integer, unique among the tasks of one store.
        created_at: Milliseconds since epoch, set once at creation.
        description: Non-empty free text.
        priority: Integer in [1, 10].
        link: Optional free text (URL or anything else), not validated.
        done: Completion flag; only ever flips from False to True.
    """
    id: int
    created_at: int
    description: str
    priority: int = 1
    link: Optional[str] = None
    done: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "description": self.description,
            "priority": self.priority,
            "link": self.link,
            "done": self.done,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        """Build a Task from one decoded JSON object.

        Raises ValueError naming the offending key when a field is missing
        or has the wrong type. "link" and "done" may be absent.
        """
        task_id = _require_int(raw, "id")
        if task_id < 1:
            raise ValueError(f"'id' must be positive, got {task_id}")
        description = raw.get("description")
        if not isinstance(description, str):
            raise ValueError("'description' must be a string")
        link = raw.get("link")
        if link is not None and not isinstance(link, str):
            raise ValueError("'link' must be a string or null")
        done = raw.get("done", False)
        if not isinstance(done, bool):
            raise ValueError("'done' must be a boolean")
        return cls(
            id=task_id,
            created_at=_require_int(raw, "createdAt"),
            description=description,
            priority=_require_int(raw, "priority"),
            link=link,
            done=done,
        )


def _require_int(raw: Mapping[str, Any], key: str) -> int:
    if key not in raw:
        raise ValueError(f"missing '{key}'")
    value = raw[key]
    # bool is an int subclass; true/false in the file is still corruption
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer")
    return value
