# src/mockgen/cli/app.py
"""The `mockgen` command.

Handlers parse options, call into mockgen.commands and render the returned
result objects with Rich. `--plain` switches to uncoloured line output.
"""

from __future__ import annotations

import logging
import os

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.panel import Panel
    from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install mockgen[cli]"
    ) from e

from mockgen import __version__
from mockgen.commands import (
    ProgressUpdate,
    config_cmd,
    generate,
    sessions,
    submit,
)
from mockgen.commands.base import GenerateResult
from mockgen.config import load_env_file

app = typer.Typer(
    name="mockgen",
    help="mockgen - LLM-generated multiple-choice mock tests for competitive exams.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

LOG_LEVEL_ENV = "MOCKGEN_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    """Route mockgen log records through Rich.

    --verbose selects DEBUG; otherwise MOCKGEN_LOG_LEVEL or WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("mockgen")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.propagate = False


def version_callback(value: bool) -> None:
    if value:
        console.print(f"mockgen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """mockgen - LLM-generated mock tests."""
    load_env_file()
    configure_logging(verbose)


def _split_values(values: list[str]) -> list[str]:
    """Flatten repeated and comma-separated option values."""
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


def parse_answers(values: list[str]) -> dict[str, str | None]:
    """Parse answers like "1=A", "2=c" or "1=A,2=B" into a mapping.

    An empty letter ("3=") marks the question as unanswered.

    Raises:
        typer.BadParameter: If a value has no "=".
    """
    answers: dict[str, str | None] = {}
    for item in _split_values(values):
        key, sep, letter = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected QUESTION=LETTER, got '{item}'")
        answers[key.strip()] = letter.strip() or None
    return answers


@app.command(name="generate")
def generate_cmd(
    exam_type: str = typer.Argument(..., help="Exam to generate questions for"),
    topics: list[str] = typer.Option(
        ...,
        "--topic",
        "-t",
        help="Topic (repeat or comma-separate for several)",
    ),
    num_questions: int = typer.Option(
        10,
        "--num",
        "-n",
        help="Number of questions (1-100)",
    ),
    difficulty: str = typer.Option(
        "mixed",
        "--difficulty",
        help="easy, medium, hard or mixed",
    ),
    session_type: str = typer.Option(
        "practice",
        "--session-type",
        help="practice, pyq or mock",
    ),
    medium: str = typer.Option(
        None,
        "--medium",
        "-m",
        help="Language of the questions (default: from settings)",
    ),
    duration: int = typer.Option(
        60,
        "--duration",
        help="Time limit in minutes stored with the session",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Generate a new mock test session."""
    kwargs = {
        "exam_type": exam_type,
        "topics": _split_values(topics),
        "num_questions": num_questions,
        "difficulty": difficulty,
        "session_type": session_type,
        "medium": medium,
        "duration_minutes": duration,
        "data_dir": data_dir,
        "config_path": config_file,
    }

    if not plain and console.is_terminal:
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.fields[stage]:>12}", justify="right"),
            BarColumn(bar_width=20),
            TextColumn("{task.fields[progress_text]}", style="cyan"),
            TextColumn("{task.description}", style="dim"),
            console=console,
        ) as progress:
            task = progress.add_task("", total=None, stage="Starting", progress_text="")

            def on_progress(update: ProgressUpdate) -> None:
                progress.update(
                    task,
                    stage=update.stage.value,
                    total=update.total or None,
                    completed=update.current,
                    progress_text=f"{update.current}/{update.total}" if update.total else "",
                    description=update.message or "",
                )

            result = generate.generate(on_progress=on_progress, **kwargs)
    else:
        result = generate.generate(**kwargs)

    _render_generate_result(result, plain)


def _render_generate_result(result: GenerateResult, plain: bool) -> None:
    """Render generate result to console."""
    if not result.success:
        if plain:
            console.print(f"Error: {result.error}")
        else:
            console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if plain:
        console.print(f"Session: {result.session_id}")
        console.print(f"Generated {result.generated}/{result.requested} questions")
        if result.shortfall:
            console.print(f"Short by {result.shortfall} questions")
        return

    console.print(
        f"[green]Generated {result.generated}/{result.requested} "
        f"{result.exam_type} questions[/green]"
    )
    if result.shortfall:
        console.print(
            f"[yellow]Short by {result.shortfall} questions after "
            f"{result.fill_iterations} fill iterations[/yellow]"
        )
    console.print(f"Session: [cyan]{result.session_id}[/cyan]")
    console.print(f"[dim]Run 'mockgen show {result.session_id}' to view the questions.[/dim]")


@app.command(name="sessions")
def sessions_cmd(
    limit: int = typer.Option(
        None,
        "--limit",
        "-l",
        help="Show at most this many sessions",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """List stored sessions, newest first."""
    result = sessions.list_sessions(data_dir=data_dir, config_path=config_file, limit=limit)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.sessions:
        if plain:
            console.print("No sessions found.")
        else:
            console.print("[dim]No sessions found. Run 'mockgen generate' first.[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print(f"Sessions ({result.total}):")
        for s in result.sessions:
            console.print(
                f"  {s.session_id} {s.exam_type} {s.num_questions}/{s.requested_questions} "
                f"{s.difficulty} {s.created_at:%Y-%m-%d %H:%M}"
            )
        return

    table = Table(title=f"Sessions ({result.total})")
    table.add_column("ID", style="cyan")
    table.add_column("Exam")
    table.add_column("Questions", justify="right")
    table.add_column("Difficulty")
    table.add_column("Type")
    table.add_column("Medium")
    table.add_column("Answered", justify="right")
    table.add_column("Created", style="dim")
    for s in result.sessions:
        table.add_row(
            s.session_id,
            s.exam_type,
            f"{s.num_questions}/{s.requested_questions}",
            s.difficulty,
            s.session_type,
            s.medium,
            str(s.answered),
            f"{s.created_at:%Y-%m-%d %H:%M}",
        )
    console.print(table)


@app.command(name="show")
def show_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    answers: bool = typer.Option(
        False,
        "--answers",
        "-a",
        help="Reveal correct answers and explanations",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Show the questions of a session."""
    result = sessions.show_session(session_id, data_dir=data_dir, config_path=config_file)

    if not result.success or result.session is None:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    session = result.session
    header = (
        f"{session.exam_type} | {session.num_questions} questions | "
        f"{session.difficulty} | {session.medium} | {session.duration_minutes} min"
    )
    if plain:
        console.print(header)
    else:
        console.print(Panel(header, title=session.session_id, border_style="cyan"))

    for q in result.questions:
        console.print()
        if plain:
            console.print(q.text)
        else:
            console.print(f"[bold]{q.text}[/bold] [dim]({q.topic})[/dim]", highlight=False)
        for letter, text in q.options.items():
            marker = "*" if answers and letter == q.correct_option else " "
            console.print(f" {marker} {letter}) {text}", markup=False, highlight=False)
        if q.selected_option:
            console.print(f"   Your answer: {q.selected_option}", markup=False)
        if answers:
            console.print(f"   Correct: {q.correct_option}", markup=False)
            if q.explanation:
                console.print(f"   Explanation: {q.explanation}", markup=False)


@app.command(name="submit")
def submit_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    answers: list[str] = typer.Argument(
        ...,
        help="Answers as QUESTION=LETTER, e.g. 1=A 2=C (question number or ID)",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Score answers for a session."""
    result = submit.submit(
        session_id,
        parse_answers(answers),
        data_dir=data_dir,
        config_path=config_file,
    )

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    summary = (
        f"Score: {result.correct}/{result.total} ({result.score_percent}%), "
        f"{result.attempted} attempted"
    )
    if plain:
        console.print(summary)
        if result.ignored:
            console.print(f"Ignored: {', '.join(result.ignored)}")
    else:
        console.print(f"[green]{summary}[/green]")
        if result.ignored:
            ignored = ", ".join(result.ignored)
            console.print(f"[yellow]Ignored unknown questions: {ignored}[/yellow]")


@app.command(name="config")
def config_cmd_handler(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    origin = "yaml" if result.config_path else "default"
    table = Table(title="Effective configuration")
    for heading, style in (("Key", "cyan"), ("Value", "green"), ("From", "dim")):
        table.add_column(heading, style=style)

    table.add_row("provider", result.provider, origin)
    table.add_row("llm_model", result.llm_model or "(not set)", "")
    table.add_row("data_dir", result.data_dir, origin, end_section=True)
    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.config_path:
        console.print(f"\n[dim]Read {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No mockgen.yaml found; using env vars and defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > preset > default[/dim]")
