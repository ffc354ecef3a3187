"""Tests for DOT graph generation."""

from termplan.dot import DotGenerator
from termplan.graph import TaskGraph
from termplan.models import Task
from termplan.scheduler import balance
from tests.conftest import make_graph


class TestDotGenerator:
    """Test the DotGenerator."""

    def test_all_courses_and_edges(self, abc_graph: tuple[TaskGraph, Task, Task, Task]) -> None:
        graph, *_ = abc_graph

        dot = DotGenerator(graph).generate()

        assert dot.startswith("digraph Prerequisites {")
        assert 't0 [label="A\\n4 cr / 10 h"' in dot
        assert "t0 -> t1;" in dot
        assert "t0 -> t2;" in dot
        assert "subgraph" not in dot
        assert dot.endswith("}")

    def test_semester_clusters(self, abc_graph: tuple[TaskGraph, Task, Task, Task]) -> None:
        graph, *_ = abc_graph
        result = balance(graph, 8, 18, 40)

        dot = DotGenerator(graph).generate(result)

        assert "digraph SemesterPlan" in dot
        assert 'label="Semester 1 (4 credits)";' in dot
        assert 'label="Semester 2 (7 credits)";' in dot
        assert "Unplaced" not in dot

    def test_unplaced_cluster(self) -> None:
        graph = make_graph(("ok", 3, 3), ("huge", 30, 3))
        result = balance(graph, 15, 18, 40)

        dot = DotGenerator(graph).generate(result)

        assert 'label="Unplaced";' in dot
        assert "style=dashed;" in dot

    def test_completed_courses_drawn_outside_clusters(self) -> None:
        graph = make_graph(("done", 3, 3), ("next", 3, 3), requires={"next": ["done"]})
        result = balance(graph, 15, 18, 40, placed={0})

        dot = DotGenerator(graph, completed={0}).generate(result)

        assert 'fillcolor="white", fontcolor="gray40"' in dot
        assert "t0 -> t1;" in dot
        assert dot.count("t0 [") == 1

    def test_label_escaping(self) -> None:
        graph = TaskGraph()
        graph.insert_task('The "Hard" One', 3, 3)

        dot = DotGenerator(graph).generate()

        assert 'label="The \\"Hard\\" One\\n3 cr / 3 h"' in dot

    def test_trailing_backslash_keeps_line_break(self) -> None:
        graph = TaskGraph()
        graph.insert_task("a\\", 1, 1)

        dot = DotGenerator(graph).generate()

        # DOT source: a\\ then the \n separator
        assert 'label="a\\\\\\n1 cr / 1 h"' in dot
