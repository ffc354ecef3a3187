"""Graph generation in Graphviz DOT format."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .graph import TaskGraph
    from .models import Task
    from .scheduler import ScheduleResult


class DotGenerator:
    """Render a TaskGraph as a DOT digraph, edges pointing prerequisite -> course."""

    def __init__(self, graph: TaskGraph, completed: set[int] | None = None):
        """Initialize with a graph.

        Args:
            graph: The graph to draw
            completed: Indices of courses already taken, drawn greyed out
        """
        self.graph = graph
        self.completed = completed or set()

    def generate(self, result: ScheduleResult | None = None) -> str:
        """Generate the DOT source.

        With a ScheduleResult, courses are grouped into one cluster per
        semester plus an "Unplaced" cluster for stranded courses.
        """
        if result is None:
            return self._generate_all()
        return self._generate_semesters(result)

    def _generate_all(self) -> str:
        lines = ["digraph Prerequisites {"]
        lines.append("  rankdir=LR;")
        lines.append("  node [shape=box];")
        lines.append("")

        for task in self.graph:
            lines.append(f"  {self._format_node(task)}")
        lines.append("")

        lines.extend(self._format_edges())
        lines.append("}")
        return "\n".join(lines)

    def _generate_semesters(self, result: ScheduleResult) -> str:
        lines = ["digraph SemesterPlan {"]
        lines.append("  rankdir=LR;")
        lines.append("  node [shape=box];")
        lines.append("")

        grouped: set[int] = set()
        for i, batch in enumerate(result.batches):
            lines.append(f"  subgraph cluster_{i} {{")
            lines.append(f'    label="Semester {i + 1} ({batch.total_credits} credits)";')
            lines.append("    style=filled;")
            lines.append("    fillcolor=lightgrey;")
            lines.append("")
            for task in batch:
                lines.append(f"    {self._format_node(task)}")
                grouped.add(task.index)
            lines.append("  }")
            lines.append("")

        if result.unplaced:
            lines.append(f"  subgraph cluster_{len(result.batches)} {{")
            lines.append('    label="Unplaced";')
            lines.append("    style=dashed;")
            lines.append("")
            for task in result.unplaced:
                lines.append(f"    {self._format_node(task)}")
                grouped.add(task.index)
            lines.append("  }")
            lines.append("")

        # Courses completed before the run
        for task in self.graph:
            if task.index not in grouped:
                lines.append(f"  {self._format_node(task)}")

        lines.extend(self._format_edges())
        lines.append("}")
        return "\n".join(lines)

    def _format_edges(self) -> list[str]:
        lines = ["  // Prerequisites"]
        for task in self.graph:
            for prereq in task.prerequisites:
                lines.append(f"  {self._node_id(prereq)} -> {self._node_id(task.index)};")
        return lines

    def _format_node(self, task: Task) -> str:
        label = self._escape_label(f"{task.name}\n{task.credits} cr / {task.hours} h")
        fill = "white" if task.index in self.completed else "lightblue"
        attrs = [f'label="{label}"', "style=filled", f'fillcolor="{fill}"']
        if task.index in self.completed:
            attrs.append('fontcolor="gray40"')
        return f"{self._node_id(task.index)} [{', '.join(attrs)}];"

    @staticmethod
    def _node_id(index: int) -> str:
        return f"t{index}"

    @staticmethod
    def _escape_label(label: str) -> str:
        # Backslashes first so the escapes added below are not doubled
        return label.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
