"""Task commands: add, list, delete, complete, report and usage."""

import logging
from typing import List, Sequence

from rich.console import Console

from .errors import DuplicatePriorityError, MissingIndexError, MissingTaskTextError, TaskIndexError
from .parser import parse_index, parse_task_line, strip_quotes
from .storage import TaskStore
from .task import Task, sort_by_priority

logger = logging.getLogger(__name__)

USAGE = """Usage :-
$ ./task add 2 hello world    # Add a new item with priority 2 and text "hello world" to the list
$ ./task ls                   # Show incomplete priority list items sorted by priority in ascending order
$ ./task del INDEX            # Delete the incomplete item with the given index
$ ./task done INDEX           # Mark the incomplete item with the given index as complete
$ ./task help                 # Show usage
$ ./task report               # Statistics"""


class TaskOperations:
    """Runs task commands against a store and prints to a console."""

    def __init__(self, store: TaskStore, console: Console):
        self.store = store
        self.console = console

    def _print(self, text: str = "") -> None:
        # Task text is written byte-for-byte, not rendered.
        self.console.file.write(text + "\n")

    def _print_listing(self, tasks: List[Task]) -> None:
        for rank, task in enumerate(sort_by_priority(tasks), start=1):
            self._print(task.display(rank))

    def _resolve(self, args: Sequence[str], purpose: str, out_of_range: str) -> Task:
        """Map a 1-based display index onto the pending record it names."""
        if not args:
            raise MissingIndexError(purpose)

        index = parse_index(args[0])
        ranked = sort_by_priority(self.store.read_tasks())
        if index is None or index < 1 or index > len(ranked):
            shown = index
            if index is None:
                shown = args[0] if args[0].strip() else repr(args[0])
            raise TaskIndexError(shown, out_of_range.format(index=shown))
        return ranked[index - 1]

    def add(self, args: Sequence[str]) -> Task:
        """Add a task from ``<priority> <text...>`` arguments."""
        if not args:
            raise MissingTaskTextError()

        parsed, error = parse_task_line(" ".join(args))
        if error:
            logger.debug(f"Rejected add arguments {args!r}: {error.message}")
            raise MissingTaskTextError()

        text = strip_quotes(parsed.text)
        if not text.strip():
            raise MissingTaskTextError()

        if any(task.priority == parsed.priority for task in self.store.read_tasks()):
            raise DuplicatePriorityError(parsed.priority)

        task = self.store.add_task(Task(priority=parsed.priority, text=text))
        self._print(f'Added task: "{task.text}" with priority {task.priority}')
        return task

    def list(self) -> None:
        """Print pending tasks sorted by priority."""
        tasks = self.store.read_tasks()
        if not tasks:
            self._print("There are no pending tasks!")
            return
        self._print_listing(tasks)

    def delete(self, args: Sequence[str]) -> Task:
        """Delete the pending task at a display index."""
        task = self._resolve(
            args, "deleting tasks", "Error: task with index #{index} does not exist. Nothing deleted."
        )
        self.store.remove_task(task)
        self._print(f"Deleted task #{parse_index(args[0])}")
        return task

    def done(self, args: Sequence[str]) -> Task:
        """Move the pending task at a display index to the completed list."""
        task = self._resolve(
            args, "marking tasks as done", "Error: no incomplete item with index #{index} exists."
        )
        # The completed list is always written before the pending list.
        self.store.append_completed(task.text)
        self.store.remove_task(task)
        self._print("Marked item as done.")
        return task

    def report(self) -> None:
        """Print pending and completed statistics."""
        tasks = self.store.read_tasks()
        completed = self.store.read_completed_tasks()

        self._print(f"Pending : {len(tasks)}")
        self._print_listing(tasks)

        self._print()
        self._print(f"Completed : {len(completed)}")
        for rank, text in enumerate(completed, start=1):
            self._print(f"{rank}. {text}")

    def usage(self) -> None:
        """Print the supported command forms."""
        self._print(USAGE)
