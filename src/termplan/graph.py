"""Task graph: courses and the prerequisite edges between them."""

from __future__ import annotations

from collections.abc import Iterator

from .exceptions import CircularDependencyError, MissingReferenceError, ValidationError
from .models import Task


class TaskGraph:
    """All tasks of one planning problem, in insertion order.

    Insertion order matters: it breaks ties between courses with equal
    credits when semesters are filled.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._by_key: dict[str, Task] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def insert_task(self, name: str, credits: int, hours: int, *, key: str | None = None) -> Task:
        """Append a new task with no edges and return its handle.

        Names may repeat; keys (catalogue ids) must be unique when given.
        """
        if key is not None and key in self._by_key:
            raise ValidationError(f"Duplicate course id: {key}")

        task = Task(index=len(self._tasks), name=name, credits=credits, hours=hours, key=key)
        self._tasks.append(task)
        if key is not None:
            self._by_key[key] = task
        return task

    def add_prerequisite(self, task: Task, prerequisite: Task) -> None:
        """Record that ``task`` requires ``prerequisite``.

        No cycle check happens here; see validate().
        """
        self._check_owned(task)
        self._check_owned(prerequisite)
        task.prerequisites.append(prerequisite.index)
        prerequisite.dependents.append(task.index)

    def all_tasks(self) -> tuple[Task, ...]:
        """All tasks in insertion order."""
        return tuple(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[index]

    def find(self, key: str) -> Task | None:
        """Look up a task by catalogue id."""
        return self._by_key.get(key)

    def prerequisites_of(self, task: Task) -> list[Task]:
        return [self._tasks[i] for i in task.prerequisites]

    def dependents_of(self, task: Task) -> list[Task]:
        return [self._tasks[i] for i in task.dependents]

    def find_cycle(self) -> list[Task] | None:
        """Find a prerequisite cycle.

        Returns:
            The cycle as a closed path (first task repeated at the end), or
            None if the graph is acyclic.
        """
        done: set[int] = set()
        for task in self._tasks:
            path: list[int] = []
            cycle = self._walk(task.index, done, path, set())
            if cycle is not None:
                return [self._tasks[i] for i in cycle]
        return None

    def validate(self) -> None:
        """Raise CircularDependencyError if any prerequisite chain loops."""
        cycle = self.find_cycle()
        if cycle:
            chain = " -> ".join(task.label for task in cycle)
            raise CircularDependencyError(f"Circular prerequisite detected: {chain}")

    def _walk(
        self, index: int, done: set[int], path: list[int], on_path: set[int]
    ) -> list[int] | None:
        """Depth-first search along prerequisite edges."""
        if index in on_path:
            return path[path.index(index) :] + [index]
        if index in done:
            return None

        path.append(index)
        on_path.add(index)
        for prereq in self._tasks[index].prerequisites:
            cycle = self._walk(prereq, done, path, on_path)
            if cycle is not None:
                return cycle
        path.pop()
        on_path.discard(index)
        done.add(index)
        return None

    def _check_owned(self, task: Task) -> None:
        owned = 0 <= task.index < len(self._tasks) and self._tasks[task.index] is task
        if not owned:
            raise MissingReferenceError(f"Task {task.name!r} does not belong to this graph")
