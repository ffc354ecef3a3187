"""Tests for plan rendering."""

import csv
import io

from termplan.graph import TaskGraph
from termplan.models import Task
from termplan.render import format_csv, format_markdown, format_text, render
from termplan.scheduler import UnsatisfiableMode, balance
from termplan.unified_config import OutputFormat
from tests.conftest import make_graph


class TestTextFormat:
    """Test the plain-text semester listing."""

    def test_semester_blocks(self, abc_graph: tuple[TaskGraph, Task, Task, Task]) -> None:
        graph, *_ = abc_graph
        result = balance(graph, 8, 18, 40)

        assert format_text(result) == (
            "Semester 1:\n"
            "  A (4 credits, 10 hours/week)\n"
            "  Total credits: 4\n"
            "  Total hours: 10\n"
            "\n"
            "Semester 2:\n"
            "  B (4 credits, 8 hours/week)\n"
            "  C (3 credits, 5 hours/week)\n"
            "  Total credits: 7\n"
            "  Total hours: 13\n"
        )

    def test_unplaced_section(self) -> None:
        graph = make_graph(("ok", 3, 3), ("huge", 30, 3))
        result = balance(graph, 15, 18, 40)

        text = format_text(result)

        assert "Unplaced courses:\n  huge [oversized]" in text
        assert "Unplaced" not in format_text(result, show_unplaced=False)

    def test_empty_plan(self) -> None:
        assert format_text(balance(TaskGraph(), 15, 18, 40)) == ""


class TestMarkdownFormat:
    """Test the Markdown tables."""

    def test_tables(self, abc_graph: tuple[TaskGraph, Task, Task, Task]) -> None:
        graph, *_ = abc_graph
        result = balance(graph, 8, 18, 40)

        md = format_markdown(result, "My Plan")

        assert md.startswith("# My Plan\n")
        assert "## Semester 2" in md
        assert "| Course | Credits | Hours/week |" in md
        assert "| B | 4 | 8 |" in md
        assert "| **Total** | **7** | **13** |" in md

    def test_default_title_and_escaping(self) -> None:
        graph = make_graph(
            ("a|b", 3, 3), ("x", 3, 3), ("y", 3, 3), requires={"x": ["y"], "y": ["x"]}
        )
        result = balance(graph, 15, 18, 40)

        md = format_markdown(result)

        assert md.startswith("# Semester Plan\n")
        assert "| a\\|b | 3 | 3 |" in md
        assert "## Unplaced" in md
        assert "- x (cyclic)" in md


class TestCsvFormat:
    """Test CSV export."""

    def test_rows(self) -> None:
        graph = make_graph(("a", 4, 10), ("b", 3, 5), ("huge", 30, 1), requires={"b": ["a"]})
        result = balance(graph, 15, 18, 40, on_unsatisfiable=UnsatisfiableMode.IGNORE)

        rows = list(csv.reader(io.StringIO(format_csv(result))))

        assert rows == [
            ["semester", "course_id", "course_name", "credits", "hours"],
            ["1", "a", "a", "4", "10"],
            ["2", "b", "b", "3", "5"],
            ["", "huge", "huge", "30", "1"],
        ]

    def test_unplaced_rows_hidden(self) -> None:
        graph = make_graph(("a", 4, 10), ("huge", 30, 1))
        result = balance(graph, 15, 18, 40)

        text = render(result, OutputFormat.CSV, show_unplaced=False)

        assert list(csv.reader(io.StringIO(text))) == [
            ["semester", "course_id", "course_name", "credits", "hours"],
            ["1", "a", "a", "4", "10"],
        ]


class TestRenderDispatch:
    """Test render() format selection."""

    def test_each_format(self, abc_graph: tuple[TaskGraph, Task, Task, Task]) -> None:
        graph, *_ = abc_graph
        result = balance(graph, 8, 18, 40)

        assert render(result, OutputFormat.TEXT) == format_text(result)
        assert render(result, OutputFormat.MARKDOWN, title="T") == format_markdown(result, "T")
        assert render(result, OutputFormat.CSV) == format_csv(result)
