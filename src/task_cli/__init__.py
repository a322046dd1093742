"""Task CLI - a small priority-ordered to-do list for the command line."""

__version__ = "0.1.0"

from .task import Task, sort_by_priority
from .storage import TaskStore
from .operations import TaskOperations

__all__ = ["Task", "TaskStore", "TaskOperations", "sort_by_priority", "__version__"]
