"""Pytest configuration and fixtures for termplan tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from termplan.context import reset_context
from termplan.graph import TaskGraph
from termplan.logger import reset_logger
from termplan.models import Task
from termplan.scheduler import ScheduleResult

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
SAMPLE_CATALOG = EXAMPLES_DIR / "cs_degree.yaml"


@pytest.fixture(autouse=True)
def clean_global_state() -> Iterator[None]:
    """Reset the logger and CLI context around every test."""
    reset_logger()
    reset_context()
    yield
    reset_logger()
    reset_context()


@pytest.fixture
def abc_graph() -> tuple[TaskGraph, Task, Task, Task]:
    """A (4 cr, 10 h) with two dependents B (4, 8) and C (3, 5)."""
    graph = TaskGraph()
    a = graph.insert_task("A", 4, 10)
    b = graph.insert_task("B", 4, 8)
    c = graph.insert_task("C", 3, 5)
    graph.add_prerequisite(b, a)
    graph.add_prerequisite(c, a)
    return graph, a, b, c


def make_graph(
    *courses: tuple[str, int, int], requires: dict[str, list[str]] | None = None
) -> TaskGraph:
    """Build a graph from (name, credits, hours) tuples and a name -> prerequisites map."""
    graph = TaskGraph()
    for name, credits, hours in courses:
        graph.insert_task(name, credits, hours, key=name)
    for name, prereqs in (requires or {}).items():
        task = graph.find(name)
        assert task is not None
        for prereq in prereqs:
            prereq_task = graph.find(prereq)
            assert prereq_task is not None
            graph.add_prerequisite(task, prereq_task)
    return graph


def write_catalog(path: Path, content: str) -> Path:
    """Write a catalogue YAML string to ``path`` and return it."""
    path.write_text(content, encoding="utf-8")
    return path


def assert_valid_plan(
    result: ScheduleResult,
    graph: TaskGraph,
    *,
    max_credits: int,
    max_hours: int,
    check_all_placed: bool = True,
    already_placed: set[int] | None = None,
) -> None:
    """Assert the invariants every plan must satisfy, whatever its exact shape."""
    semester_of: dict[int, int] = {}
    for i, batch in enumerate(result):
        assert batch.tasks, f"Semester {i + 1} is empty"
        assert batch.total_credits <= max_credits, f"Semester {i + 1} over credit limit"
        assert batch.total_hours <= max_hours, f"Semester {i + 1} over hours limit"
        for task in batch:
            assert task.index not in semester_of, f"{task.name} placed twice"
            semester_of[task.index] = i

    before = already_placed or set()
    for index, semester in semester_of.items():
        for prereq in graph.get(index).prerequisites:
            if prereq in before:
                continue
            assert prereq in semester_of, f"{graph.get(prereq).name} missing before use"
            assert semester_of[prereq] < semester, (
                f"{graph.get(index).name} in semester {semester + 1} but prerequisite "
                f"{graph.get(prereq).name} in semester {semester_of[prereq] + 1}"
            )

    if check_all_placed:
        missing = [t.name for t in graph if t.index not in semester_of and t.index not in before]
        assert not missing, f"Courses not placed: {missing}"
