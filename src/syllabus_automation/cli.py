"""Console script for syllabus_automation."""

import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config.loader import ConfigLoader, LoadResult
from .config.models import CourseConfig
from .issues import ConfigError
from .main import BuildError, SyllabusBuild
from .rendering import format_credits, format_date_range, format_semester_display
from .utils.logging import setup_logging

load_dotenv()

app = typer.Typer(help="Validate course configurations and render syllabus fragments.")
console = Console()
err_console = Console(stderr=True)

BASE_DIR_OPTION = typer.Option(
    None,
    "--base-dir",
    "-b",
    envvar="SYLLABUS_BASE_DIR",
    help="Directory relative data paths resolve against (default: current directory)",
)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="SYLLABUS_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also log to this file"),
):
    """Syllabus automation tools."""
    # stdout carries rendered fragments, so log records go to stderr
    setup_logging(level=log_level, log_file=log_file, stream=sys.stderr)


def _print_result(result: LoadResult) -> None:
    for message in result.messages:
        if message.is_error:
            console.print(f"[red]{escape(str(message))}[/red]")
        else:
            console.print(f"[green]{escape(str(message))}[/green]")
    for warning in result.warnings:
        console.print(f"[yellow]{escape(str(warning))}[/yellow]")


def _load_or_exit(config_file: Path, base_dir: Path | None, strict: bool) -> LoadResult:
    try:
        return ConfigLoader(base_dir=base_dir, strict=strict).load(config_file)
    except ConfigError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command()
def validate(
    config_file: Path = typer.Argument(..., help="Course configuration YAML file"),
    strict: bool = typer.Option(False, "--strict", help="Stop at the first hard failure"),
    base_dir: Optional[Path] = BASE_DIR_OPTION,
):
    """Validate a course configuration and its data files."""
    console.rule("Loading Configuration")
    result = _load_or_exit(config_file, base_dir, strict)
    _print_result(result)
    console.rule()

    if not result.success:
        console.print(f"[red]Validation failed with {len(result.errors)} error(s)[/red]")
        raise typer.Exit(code=1)

    code = result.config.course.code if result.config else config_file
    console.print(f"[green]Configuration loaded successfully: {code}[/green]")


def print_config_summary(config: CourseConfig) -> None:
    """Print course, instructor and meeting details as a table."""
    table = Table(title="Configuration Summary", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    course = config.course
    table.add_section()
    table.add_row("COURSE INFORMATION", "")
    table.add_row("Code", course.code or "")
    table.add_row("Title", course.title or "")
    table.add_row("Section", course.section or "")
    table.add_row("Credits", format_credits(course.credits))
    table.add_row("Semester", format_semester_display(course.semester))
    table.add_row("Dates", format_date_range(course.start_date, course.end_date))

    instructor = config.instructor
    table.add_section()
    table.add_row("INSTRUCTOR INFORMATION", "")
    table.add_row("Name", instructor.name or "")
    table.add_row("Email", instructor.email or "")
    table.add_row("Office", instructor.office or "TBA")

    meeting = config.meeting
    table.add_section()
    table.add_row("MEETING INFORMATION", "")
    table.add_row("Location", meeting.location or "")
    table.add_row("Days", meeting.days or "")
    table.add_row("Time", meeting.time or "")
    table.add_row("Format", meeting.format)

    console.print(table)


@app.command()
def summary(
    config_file: Path = typer.Argument(..., help="Course configuration YAML file"),
    base_dir: Optional[Path] = BASE_DIR_OPTION,
):
    """Print a summary of a course configuration."""
    result = _load_or_exit(config_file, base_dir, strict=False)
    if result.config is None:
        _print_result(result)
        raise typer.Exit(code=1)
    print_config_summary(result.config)


@app.command()
def render(
    config_file: Path = typer.Argument(..., help="Course configuration YAML file"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write one markdown file per fragment into this directory"
    ),
    max_rows: Optional[int] = typer.Option(
        None, "--max-rows", min=1, help="Limit schedule and assignment tables (preview)"
    ),
    strict: bool = typer.Option(False, "--strict", help="Abort on schema or date failures"),
    base_dir: Optional[Path] = BASE_DIR_OPTION,
):
    """Render syllabus fragments from a course configuration."""
    build = SyllabusBuild(config_file, base_dir=base_dir, strict=strict, max_rows=max_rows)
    try:
        fragments = build.run()
    except (ConfigError, BuildError) as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if build.result is not None and build.result.warnings:
        for warning in build.result.warnings:
            err_console.print(f"[yellow]{escape(str(warning))}[/yellow]")

    if output is None:
        console.print("\n\n".join(fragments.values()), markup=False, highlight=False)
        return

    written = build.write(output, fragments)
    console.print(f"[green]Wrote {len(written)} fragments to {output}[/green]")


if __name__ == "__main__":
    app()
