"""Custom exceptions for termplan."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Task


class TermplanError(Exception):
    """Base exception for all termplan errors."""

    pass


class ValidationError(TermplanError):
    """Raised when validation fails."""

    pass


class CircularDependencyError(ValidationError):
    """Raised when a circular prerequisite chain is detected."""

    pass


class MissingReferenceError(ValidationError):
    """Raised when a referenced course or task does not exist."""

    pass


class UnsatisfiablePrerequisitesError(ValidationError):
    """Raised when some tasks can never be placed in any semester."""

    def __init__(self, tasks: Sequence[Task], message: str | None = None):
        self.tasks = list(tasks)
        if message is None:
            names = ", ".join(task.name for task in self.tasks)
            message = f"Unable to place {len(self.tasks)} task(s): {names}"
        super().__init__(message)


class ParseError(TermplanError):
    """Raised when YAML parsing fails."""

    pass
