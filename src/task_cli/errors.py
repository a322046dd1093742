"""Exceptions raised by task operations and configuration loading."""


class TaskError(Exception):
    """Base class for user-facing task errors.

    The message is printed verbatim by the command-line interface.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingTaskTextError(TaskError):
    """Raised when ``add`` gets no priority or no task text."""

    def __init__(self):
        super().__init__("Error: Missing tasks string. Nothing added!")


class DuplicatePriorityError(TaskError):
    """Raised when a pending task already uses the requested priority."""

    def __init__(self, priority: int):
        self.priority = priority
        super().__init__(f"Error: priority {priority} already exists. Nothing added!")


class MissingIndexError(TaskError):
    """Raised when ``del`` or ``done`` is called without an index."""

    def __init__(self, purpose: str):
        self.purpose = purpose
        super().__init__(f"Error: Missing NUMBER for {purpose}.")


class TaskIndexError(TaskError):
    """Raised when a display index does not point at a pending task."""

    def __init__(self, index, message: str):
        self.index = index
        super().__init__(message)


class ConfigError(Exception):
    """Raised when a configuration file exists but cannot be loaded."""

    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message)
