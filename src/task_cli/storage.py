"""Storage layer for the task CLI using two flat text files.

``task.txt`` holds one pending task per line as ``<priority> <text>``.
``completed.txt`` holds the text of each completed task, one per line, in
completion order. Both files are rewritten in full on every change.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from .config import ConfigModel
from .parser import parse_task_line
from .task import Task

logger = logging.getLogger(__name__)


def _read_lines(path: Path) -> List[str]:
    """Return the non-blank lines of ``path``, or nothing if it can't be read."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        logger.debug(f"{path} does not exist, treating as empty")
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}, treating as empty: {e}")
        return []

    return [line for line in content.split("\n") if line.strip()]


def _render(lines: List[str]) -> str:
    content = "\n".join(lines)
    return content + ("\n" if content else "")


class TaskStore:
    """File-backed repository for pending and completed tasks.

    One store is built per invocation. Files are read on first access and
    written only when a list is replaced.
    """

    def __init__(self, config: ConfigModel):
        self.config = config
        self.task_path = config.get_task_path()
        self.completed_path = config.get_completed_path()
        self._tasks: Optional[List[Task]] = None
        self._completed: Optional[List[str]] = None

    def read_tasks(self) -> List[Task]:
        """Return pending tasks in file order.

        Lines that don't look like ``<priority> <text>`` are dropped.
        """
        if self._tasks is None:
            tasks = []
            for line in _read_lines(self.task_path):
                parsed, error = parse_task_line(line)
                if error:
                    level = logging.WARNING if self.config.warn_on_malformed_lines else logging.DEBUG
                    logger.log(level, f"Dropping malformed line in {self.task_path}: {line!r} ({error.message})")
                    continue
                tasks.append(Task(priority=parsed.priority, text=parsed.text, seq=len(tasks)))
            self._tasks = tasks
        return list(self._tasks)

    def read_completed_tasks(self) -> List[str]:
        """Return completed task texts in completion order."""
        if self._completed is None:
            self._completed = _read_lines(self.completed_path)
        return list(self._completed)

    def write_tasks(self, tasks: List[Task]) -> None:
        """Overwrite the pending file with ``tasks``."""
        self._write(self.task_path, _render([task.to_line() for task in tasks]))
        self._tasks = list(tasks)

    def write_completed_tasks(self, completed: List[str]) -> None:
        """Overwrite the completed file with ``completed``."""
        self._write(self.completed_path, _render(completed))
        self._completed = list(completed)

    def next_seq(self) -> int:
        """Get the next unused record identifier."""
        tasks = self.read_tasks()
        if not tasks:
            return 0
        return max(task.seq for task in tasks) + 1

    def add_task(self, task: Task) -> Task:
        """Append ``task`` to the pending list and persist it."""
        task.seq = self.next_seq()
        tasks = self.read_tasks()
        tasks.append(task)
        self.write_tasks(tasks)
        return task

    def remove_task(self, task: Task) -> None:
        """Remove the pending record ``task`` refers to and persist the rest."""
        tasks = self.read_tasks()
        remaining = [t for t in tasks if t.seq != task.seq]
        if len(remaining) == len(tasks):
            raise KeyError(f"No pending record with seq {task.seq}")
        self.write_tasks(remaining)

    def append_completed(self, text: str) -> None:
        """Record ``text`` as the most recently completed task."""
        completed = self.read_completed_tasks()
        completed.append(text)
        self.write_completed_tasks(completed)

    def _write(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self.config.atomic_writes:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
            logger.debug(f"Wrote {path}")
            return

        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", delete=False, dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        ) as tf:
            tf.write(content)
            temp_name = tf.name
        try:
            os.replace(temp_name, path)
        except OSError:
            os.unlink(temp_name)
            raise
        logger.debug(f"Atomically replaced {path}")
