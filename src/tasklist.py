"""Task operations: list, add, delete and mark-done over a Storage handle.

Every call is a full read-modify-write cycle: load the whole file, change the
in-memory list, write the whole file back. Nothing is cached between calls.
"""
import logging
import time
from typing import Callable, List, Optional

from models import Task
from storage import Storage

logger = logging.getLogger(__name__)

PRIORITY_MIN = 1
PRIORITY_MAX = 10


class InvalidPriorityError(ValueError):
    def __init__(self, priority: int):
        super().__init__(f"Priority must be between {PRIORITY_MIN} and {PRIORITY_MAX}.")
        self.priority = priority


class InvalidDescriptionError(ValueError):
    pass


def now_ms() -> int:
    return int(time.time() * 1000)


class TaskList:
    def __init__(self, storage: Storage, clock: Optional[Callable[[], int]] = None):
        self.storage = storage
        self.clock = clock or now_ms

    # -------------------- queries --------------------
    def list(self) -> List[Task]:
        return self.storage.load()

    def get(self, task_id: int) -> Optional[Task]:
        for task in self.storage.load():
            if task.id == task_id:
                return task
        return None

    # -------------------- id management --------------------
    @staticmethod
    def _next_id(tasks: List[Task]) -> int:
        """One past the highest id in use, so live ids never collide."""
        if not tasks:
            return 1
        return max(t.id for t in tasks) + 1

    # -------------------- task operations --------------------
    def add(self, description: str, priority: int = 1, link: Optional[str] = None) -> Task:
        """Append a new pending task and persist it.

        Validation happens before the store is read, so a rejected call
        never touches the file.
        """
        # bool is an int subclass; floats would not load back as priorities
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidPriorityError(priority)
        if not PRIORITY_MIN <= priority <= PRIORITY_MAX:
            raise InvalidPriorityError(priority)
        if not description or not description.strip():
            raise InvalidDescriptionError("Description must not be empty.")
        tasks = self.storage.load()
        task = Task(
            id=self._next_id(tasks),
            created_at=self.clock(),
            description=description,
            priority=priority,
            link=link or None,
            done=False,
        )
        tasks.append(task)
        self.storage.save(tasks)
        logger.info("Added task %d (priority %d)", task.id, task.priority)
        return task

    def delete(self, task_id: int) -> bool:
        tasks = self.storage.load()
        remaining = [t for t in tasks if t.id != task_id]
        if len(remaining) == len(tasks):
            logger.debug("Delete: task id %d not found", task_id)
            return False
        self.storage.save(remaining)
        logger.info("Deleted task %d", task_id)
        return True

    def mark_done(self, task_id: int) -> bool:
        tasks = self.storage.load()
        for task in tasks:
            if task.id == task_id:
                task.done = True
                self.storage.save(tasks)
                logger.info("Marked task %d as done", task_id)
                return True
        logger.debug("Done: task id %d not found", task_id)
        return False
