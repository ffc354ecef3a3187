"""termplan - balance course prerequisites into semesters."""

from .exceptions import (
    CircularDependencyError,
    MissingReferenceError,
    ParseError,
    TermplanError,
    UnsatisfiablePrerequisitesError,
    ValidationError,
)
from .graph import TaskGraph
from .models import Task
from .scheduler import (
    BalanceConfig,
    Batch,
    ScheduleResult,
    UnsatisfiableMode,
    WorkloadBalancer,
    balance,
)

__version__ = "0.1.0"

__all__ = [
    "BalanceConfig",
    "Batch",
    "CircularDependencyError",
    "MissingReferenceError",
    "ParseError",
    "ScheduleResult",
    "Task",
    "TaskGraph",
    "TermplanError",
    "UnsatisfiableMode",
    "UnsatisfiablePrerequisitesError",
    "ValidationError",
    "WorkloadBalancer",
    "balance",
]
