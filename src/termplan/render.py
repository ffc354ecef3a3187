"""Plain-text, Markdown and CSV renderings of a semester plan."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

from .unified_config import OutputFormat

if TYPE_CHECKING:
    from .scheduler import ScheduleResult


def format_text(result: ScheduleResult, *, show_unplaced: bool = True) -> str:
    """One block per semester with its courses and totals."""
    lines: list[str] = []
    for i, batch in enumerate(result.batches, start=1):
        lines.append(f"Semester {i}:")
        for task in batch:
            lines.append(f"  {task.name} ({task.credits} credits, {task.hours} hours/week)")
        lines.append(f"  Total credits: {batch.total_credits}")
        lines.append(f"  Total hours: {batch.total_hours}")
        lines.append("")

    if show_unplaced and result.unplaced:
        lines.append("Unplaced courses:")
        for task in result.unplaced:
            reason = result.reasons.get(task.index)
            suffix = f" [{reason.value}]" if reason else ""
            lines.append(f"  {task.name}{suffix}")
        lines.append("")

    return "\n".join(lines)


def _md_cell(text: str) -> str:
    return text.replace("|", "\\|")


def format_markdown(
    result: ScheduleResult, title: str | None = None, *, show_unplaced: bool = True
) -> str:
    """A heading and table per semester."""
    lines = [f"# {title or 'Semester Plan'}", ""]
    for i, batch in enumerate(result.batches, start=1):
        lines.append(f"## Semester {i}")
        lines.append("")
        lines.append("| Course | Credits | Hours/week |")
        lines.append("|---|---:|---:|")
        for task in batch:
            lines.append(f"| {_md_cell(task.name)} | {task.credits} | {task.hours} |")
        lines.append(f"| **Total** | **{batch.total_credits}** | **{batch.total_hours}** |")
        lines.append("")

    if show_unplaced and result.unplaced:
        lines.append("## Unplaced")
        lines.append("")
        for task in result.unplaced:
            reason = result.reasons.get(task.index)
            lines.append(f"- {_md_cell(task.name)}" + (f" ({reason.value})" if reason else ""))
        lines.append("")

    return "\n".join(lines)


def format_csv(result: ScheduleResult, *, show_unplaced: bool = True) -> str:
    """Rows of semester, course id, name, credits, hours.

    Unplaced courses are written with an empty semester column unless
    ``show_unplaced`` is false.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["semester", "course_id", "course_name", "credits", "hours"])
    for i, batch in enumerate(result.batches, start=1):
        for task in batch:
            writer.writerow([i, task.key or "", task.name, task.credits, task.hours])
    if show_unplaced:
        for task in result.unplaced:
            writer.writerow(["", task.key or "", task.name, task.credits, task.hours])
    return buffer.getvalue()


def render(
    result: ScheduleResult,
    fmt: OutputFormat,
    *,
    title: str | None = None,
    show_unplaced: bool = True,
) -> str:
    """Render ``result`` in the requested format."""
    if fmt == OutputFormat.TEXT:
        return format_text(result, show_unplaced=show_unplaced)
    if fmt == OutputFormat.MARKDOWN:
        return format_markdown(result, title, show_unplaced=show_unplaced)
    if fmt == OutputFormat.CSV:
        return format_csv(result, show_unplaced=show_unplaced)
    raise ValueError(f"Unknown output format: {fmt}")
