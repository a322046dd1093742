"""Task data model for the task CLI."""

from dataclasses import dataclass, field
from typing import Iterable, List


@dataclass
class Task:
    """A pending task.

    ``seq`` identifies the stored record within one invocation. It is never
    shown to the user and does not take part in equality.
    """

    priority: int
    text: str
    seq: int = field(default=0, compare=False)

    def to_line(self) -> str:
        """Serialize the task as a pending-file line."""
        return f"{self.priority} {self.text}"

    def display(self, rank: int) -> str:
        """Format the task for listing at the given 1-based rank."""
        return f"{rank}. {self.text} [{self.priority}]"


def sort_by_priority(tasks: Iterable[Task]) -> List[Task]:
    """Return tasks in ascending priority order.

    Python's sort is stable, so tasks sharing a priority keep their file order
    and display ranks stay reproducible across listings.
    """
    return sorted(tasks, key=lambda task: task.priority)
