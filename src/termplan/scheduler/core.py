"""Core dataclasses for the balancing result."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from termplan.models import Task


class StrandReason(str, Enum):
    """Why a course was left out of every semester."""

    OVERSIZED = "oversized"  # Alone exceeds max credits or max hours
    CYCLIC = "cyclic"  # Sits on a prerequisite cycle
    BLOCKED = "blocked"  # Depends on an oversized or cyclic course


def _default_task_list() -> list[Task]:
    return []


def _default_str_list() -> list[str]:
    return []


def _default_reasons() -> dict[int, StrandReason]:
    return {}


@dataclass
class Batch:
    """Courses taken together in one semester, in placement order."""

    tasks: list[Task] = field(default_factory=_default_task_list)

    @property
    def total_credits(self) -> int:
        return sum(task.credits for task in self.tasks)

    @property
    def total_hours(self) -> int:
        return sum(task.hours for task in self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __getitem__(self, idx: int) -> Task:
        return self.tasks[idx]


@dataclass
class ScheduleResult:
    """Semesters in order, plus what could not be placed.

    Iterating a result yields its batches, so it can be used directly as a
    sequence of sequences of tasks.
    """

    batches: list[Batch]
    placed: frozenset[int]  # Indices placed before or during the run
    unplaced: list[Task] = field(default_factory=_default_task_list)
    reasons: dict[int, StrandReason] = field(default_factory=_default_reasons)
    warnings: list[str] = field(default_factory=_default_str_list)

    def __iter__(self) -> Iterator[Batch]:
        return iter(self.batches)

    def __len__(self) -> int:
        return len(self.batches)

    def __getitem__(self, idx: int) -> Batch:
        return self.batches[idx]

    def as_names(self) -> list[list[str]]:
        """Task names per semester."""
        return [[task.name for task in batch] for batch in self.batches]

    def semester_of(self, task: Task) -> int | None:
        """0-based semester a task was placed in during this run, if any."""
        for i, batch in enumerate(self.batches):
            if any(t is task for t in batch):
                return i
        return None

    @property
    def total_credits(self) -> int:
        return sum(batch.total_credits for batch in self.batches)
