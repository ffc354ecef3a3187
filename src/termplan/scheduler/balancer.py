"""Greedy semester balancer.

Each round collects the courses whose prerequisites are all placed, orders
them by credits (heaviest first, insertion order on ties) and admits them
one by one while both the credit and the hours ceilings hold. A semester is
closed as soon as it reaches the target credit load. A round that admits
nothing ends the run.
"""

from collections.abc import Iterable, Sequence

from termplan.exceptions import UnsatisfiablePrerequisitesError
from termplan.graph import TaskGraph
from termplan.logger import debug_enabled, get_logger
from termplan.models import Task

from .config import BalanceConfig, UnsatisfiableMode
from .core import Batch, ScheduleResult, StrandReason

logger = get_logger()


def balance(  # noqa: PLR0913 - keyword-only options after the three limits
    graph: TaskGraph,
    target_credits: int,
    max_credits: int,
    max_hours: int,
    *,
    placed: Iterable[int] | None = None,
    on_unsatisfiable: UnsatisfiableMode = UnsatisfiableMode.IGNORE,
) -> ScheduleResult:
    """Split every task of ``graph`` into semesters.

    Args:
        graph: Tasks and prerequisite edges
        target_credits: Close a semester once it holds at least this many credits
        max_credits: Credit ceiling per semester
        max_hours: Weekly-hours ceiling per semester
        placed: Indices of tasks already completed; they count as satisfied
            prerequisites and are not scheduled again
        on_unsatisfiable: Policy for tasks that can never be placed

    Returns:
        ScheduleResult with the semesters in order. The graph is not modified,
        so the same graph can be balanced again with other limits.

    Raises:
        UnsatisfiablePrerequisitesError: only with UnsatisfiableMode.ERROR
    """
    tasks = graph.all_tasks()
    done: set[int] = set(placed or ())
    batches: list[Batch] = []

    while True:
        semester = len(batches) + 1
        available = sorted(_available_tasks(tasks, done), key=_priority)
        if debug_enabled():
            logger.debug(
                f"Semester {semester}: eligible "
                f"[{', '.join(f'{t.name}({t.credits})' for t in available)}]"
            )

        batch = _fill_batch(available, semester, target_credits, max_credits, max_hours)
        if not batch.tasks:
            logger.debug(f"Semester {semester}: nothing fits, stopping")
            break

        done.update(task.index for task in batch)
        batches.append(batch)
        logger.changes(
            f"Semester {semester}: {len(batch)} course(s), "
            f"{batch.total_credits} credits, {batch.total_hours} hours/week"
        )

    unplaced = [task for task in tasks if task.index not in done]
    result = ScheduleResult(batches=batches, placed=frozenset(done), unplaced=unplaced)
    if unplaced:
        _report_stranded(graph, result, max_credits, max_hours, on_unsatisfiable)
    return result


class WorkloadBalancer:
    """Runs balance() with the limits from a BalanceConfig.

    This is what the CLI and catalogue loaders use; call balance() directly
    for one-off runs with explicit numbers.
    """

    def __init__(
        self,
        graph: TaskGraph,
        config: BalanceConfig | None = None,
        *,
        completed: Iterable[int] | None = None,
    ):
        """Initialize the balancer.

        Args:
            graph: Tasks to place
            config: Limits and stranded-course policy, defaults if omitted
            completed: Indices of tasks already taken
        """
        self.graph = graph
        self.config = config or BalanceConfig()
        self.completed = frozenset(completed or ())

    def schedule(self) -> ScheduleResult:
        return balance(
            self.graph,
            self.config.target_credits,
            self.config.max_credits,
            self.config.max_hours,
            placed=self.completed,
            on_unsatisfiable=self.config.on_unsatisfiable,
        )


def _available_tasks(tasks: Sequence[Task], done: set[int]) -> list[Task]:
    """Unplaced tasks whose prerequisites are all placed."""
    return [
        task
        for task in tasks
        if task.index not in done and all(p in done for p in task.prerequisites)
    ]


def _priority(task: Task) -> tuple[int, int]:
    return (-task.credits, task.index)


def _fill_batch(
    available: list[Task],
    semester: int,
    target_credits: int,
    max_credits: int,
    max_hours: int,
) -> Batch:
    """Admit courses in order while both ceilings hold; skipped ones wait a round."""
    batch = Batch()
    credits = 0
    hours = 0

    for task in available:
        logger.checks(f"  Considering {task.name} ({task.credits} credits, {task.hours} hours)")
        if credits + task.credits > max_credits:
            logger.checks(
                f"    Skipping {task.name}: {credits}+{task.credits} credits exceeds {max_credits}"
            )
            continue
        if hours + task.hours > max_hours:
            logger.checks(
                f"    Skipping {task.name}: {hours}+{task.hours} hours exceeds {max_hours}"
            )
            continue

        batch.tasks.append(task)
        credits += task.credits
        hours += task.hours
        logger.changes(f"  Placed {task.name} in semester {semester}")

        if credits >= target_credits:
            logger.checks(f"    Reached target of {target_credits} credits")
            break

    return batch


def _report_stranded(
    graph: TaskGraph,
    result: ScheduleResult,
    max_credits: int,
    max_hours: int,
    mode: UnsatisfiableMode,
) -> None:
    """Classify unplaced tasks, then warn or raise according to ``mode``."""
    unplaced_ids = {task.index for task in result.unplaced}

    for task in result.unplaced:
        if task.credits > max_credits or task.hours > max_hours:
            reason = StrandReason.OVERSIZED
            message = (
                f"{task.name} needs {task.credits} credits and {task.hours} hours/week, "
                f"over the semester limit of {max_credits} credits / {max_hours} hours"
            )
        elif _on_cycle(graph, task, unplaced_ids):
            reason = StrandReason.CYCLIC
            message = f"{task.name} is part of a prerequisite cycle"
        else:
            reason = StrandReason.BLOCKED
            waiting = ", ".join(
                p.name for p in graph.prerequisites_of(task) if p.index in unplaced_ids
            )
            message = f"{task.name} waits on prerequisites that cannot be placed: {waiting}"

        result.reasons[task.index] = reason
        if mode != UnsatisfiableMode.IGNORE:
            result.warnings.append(message)

    if mode == UnsatisfiableMode.ERROR:
        raise UnsatisfiablePrerequisitesError(
            result.unplaced,
            f"Unable to place {len(result.unplaced)} course(s): " + "; ".join(result.warnings),
        )
    if mode == UnsatisfiableMode.WARN:
        for message in result.warnings:
            logger.warning(message)


def _on_cycle(graph: TaskGraph, task: Task, candidates: set[int]) -> bool:
    """True if ``task`` can reach itself through unplaced prerequisites."""
    stack = [p for p in task.prerequisites if p in candidates]
    seen: set[int] = set()
    while stack:
        current = stack.pop()
        if current == task.index:
            return True
        if current in seen:
            continue
        seen.add(current)
        stack.extend(p for p in graph.get(current).prerequisites if p in candidates)
    return False
