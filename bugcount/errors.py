# bugcount/errors.py

"""
Exception hierarchy for bugcount.

Missing attributes and unknown bug types are not errors: the counter skips
those records. Everything here aborts the operation that raised it.
"""

from typing import Optional


class BugCountError(Exception):
    """Base class for all bugcount errors."""


class MalformedInputError(BugCountError):
    """The bug collection is not well-formed XML."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class InvalidPriorityValue(BugCountError, ValueError):
    """A BugInstance carries a priority attribute that is not an integer."""

    def __init__(self, value: str, bug_type: Optional[str] = None):
        self.value = value
        self.bug_type = bug_type
        where = f" on {bug_type}" if bug_type else ""
        super().__init__(f"Invalid priority value {value!r}{where}")


class CounterStateError(BugCountError):
    """A counter was reconfigured or executed after its pass had started."""


class ConfigError(BugCountError):
    """A configuration file could not be read or has an ill-typed value."""


class UsageError(BugCountError):
    """Bad command-line arguments."""
