"""Command-line interface for termplan."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import context
from .dot import DotGenerator
from .exceptions import TermplanError
from .loader import discover_config, load_catalog
from .logger import setup_logger
from .models import Catalog
from .render import render
from .scheduler import ScheduleResult, UnsatisfiableMode, WorkloadBalancer
from .unified_config import OutputFormat, UnifiedConfig

app = typer.Typer(
    name="termplan",
    help="Balance a course catalogue with prerequisites into semesters",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=warnings only (default), 1=placements, 2=checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: termplan_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for termplan commands."""
    setup_logger(verbose)
    context.set_context(config_path=config)


def _fail(error: TermplanError) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(1)


def _load_config(  # noqa: PLR0913 - one override per CLI option
    catalog_path: Path,
    *,
    target: int | None = None,
    max_credits: int | None = None,
    max_hours: int | None = None,
    strict: bool = False,
) -> UnifiedConfig:
    """Discovered config with CLI overrides applied."""
    config = discover_config(catalog_path) or UnifiedConfig()
    overrides: dict[str, object] = {}
    if target is not None:
        overrides["target_credits"] = target
    if max_credits is not None:
        overrides["max_credits"] = max_credits
    if max_hours is not None:
        overrides["max_hours"] = max_hours
    if strict:
        overrides["on_unsatisfiable"] = UnsatisfiableMode.ERROR
    if overrides:
        config.scheduler = config.scheduler.model_copy(update=overrides)
    return config


def _run(catalog: Catalog, config: UnifiedConfig, completed: list[str] | None) -> ScheduleResult:
    done = catalog.completed | catalog.resolve(completed or [])
    return WorkloadBalancer(catalog.graph, config.scheduler, completed=done).schedule()


def _write_output(text: str, output: Path | None, what: str) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"{what} written to {output}")
    else:
        typer.echo(text)


@app.command()
def schedule(  # noqa: PLR0913 - CLI command needs multiple options
    file: Annotated[Path, typer.Argument(help="Path to the course catalogue YAML file")] = Path(
        "catalog.yaml"
    ),
    *,
    target: Annotated[
        int | None,
        typer.Option("--target", "-t", min=0, help="Target credits per semester"),
    ] = None,
    max_credits: Annotated[
        int | None,
        typer.Option("--max-credits", min=0, help="Maximum credits per semester"),
    ] = None,
    max_hours: Annotated[
        int | None,
        typer.Option("--max-hours", min=0, help="Maximum weekly hours per semester"),
    ] = None,
    fmt: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format (default from config: text)"),
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
    completed: Annotated[
        list[str] | None,
        typer.Option("--completed", help="Course id already taken (repeatable)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail if any course cannot be placed"),
    ] = False,
    allow_cycles: Annotated[
        bool,
        typer.Option(
            "--allow-cycles",
            help="Do not reject prerequisite cycles; courses on a cycle are left unplaced",
        ),
    ] = False,
) -> None:
    """Split the catalogue into semesters and print the plan."""
    try:
        config = _load_config(
            file, target=target, max_credits=max_credits, max_hours=max_hours, strict=strict
        )
        catalog = load_catalog(file, validate=not allow_cycles)
        result = _run(catalog, config, completed)
    except TermplanError as e:
        raise _fail(e) from e

    text = render(
        result,
        fmt or config.output.format,
        title=catalog.metadata.title,
        show_unplaced=config.output.show_unplaced,
    )
    _write_output(text, output, "Schedule")


@app.command()
def graph(
    file: Annotated[Path, typer.Argument(help="Path to the course catalogue YAML file")] = Path(
        "catalog.yaml"
    ),
    *,
    semesters: Annotated[
        bool,
        typer.Option("--semesters", help="Group courses by computed semester"),
    ] = False,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Generate the prerequisite graph in DOT format."""
    try:
        catalog = load_catalog(file, validate=False)
        result = None
        if semesters:
            result = _run(catalog, _load_config(file), None)
    except TermplanError as e:
        raise _fail(e) from e

    dot_output = DotGenerator(catalog.graph, catalog.completed).generate(result)
    _write_output(dot_output, output, "Graph")


@app.command()
def check(
    file: Annotated[Path, typer.Argument(help="Path to the course catalogue YAML file")] = Path(
        "catalog.yaml"
    ),
) -> None:
    """Validate references and cycles, and that every course fits in a semester."""
    try:
        config = _load_config(file, strict=True)
        catalog = load_catalog(file)
        result = _run(catalog, config, None)
    except TermplanError as e:
        raise _fail(e) from e

    typer.echo(
        f"OK: {len(catalog.graph)} courses fit in {len(result)} semester(s) "
        f"({config.scheduler.target_credits}/{config.scheduler.max_credits} credits, "
        f"{config.scheduler.max_hours} hours)"
    )


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
