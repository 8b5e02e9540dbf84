"""Command-line interface for forsyth."""

from collections import Counter
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from forsyth import __version__
from forsyth.core.configs import ForsythConfig, LoggingConfig, load_forsyth_config
from forsyth.core.notation import FenPosition, InvalidFenError, ValidationResult, Validator
from forsyth.core.utils.logging import setup_logging_from_config

app = typer.Typer(
    name="forsyth",
    help="Forsyth: validate and inspect chess FEN strings",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(None, "--log-level", help="Minimum log level"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Validate and inspect chess positions in Forsyth-Edwards Notation."""
    ctx.obj = {"log_level": log_level, "log_file": log_file}


def _configure(
    ctx: typer.Context,
    config_path: Path | None = None,
    overrides: list[str] | None = None,
) -> ForsythConfig:
    """Load the configuration and set up logging; CLI options win over the file."""
    options = ctx.obj or {}
    from_options = bool(options.get("log_level") or options.get("log_file"))

    try:
        config = load_forsyth_config(config_path, overrides)
        if from_options:
            config.logging = LoggingConfig(
                level=options.get("log_level") or config.logging.level,
                log_file=options.get("log_file") or config.logging.log_file,
                rotation=config.logging.rotation,
                retention=config.logging.retention,
            )
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=2) from e

    if from_options or config_path is not None:
        setup_logging_from_config(config.logging)
    return config


def _format_result(result: ValidationResult) -> str:
    if result.is_valid:
        return "[green]VALID[/green]"
    return f"[red]{result.name}[/red] - {result.description}"


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]forsyth[/bold blue] v{__version__}")


@app.command()
def validate(
    ctx: typer.Context,
    fens: list[str] = typer.Argument(..., help="FEN strings to validate (quote each one)"),
) -> None:
    """Validate one or more FEN strings."""
    _configure(ctx)
    validator = Validator()

    invalid = 0
    for fen in fens:
        result = validator.validate(fen)
        if not result.is_valid:
            invalid += 1
        console.print(f"{escape(fen)}: {_format_result(result)}")

    if invalid:
        raise typer.Exit(code=1)


@app.command()
def show(
    ctx: typer.Context,
    fen: str = typer.Argument(..., help="FEN string to decode"),
) -> None:
    """Decode a FEN string and print its fields."""
    _configure(ctx)

    try:
        position = FenPosition(fen)
    except InvalidFenError as e:
        console.print(f"[bold red]Invalid FEN:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    table = Table(title="Position", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for index, row in enumerate(position.rows):
        table.add_row(f"Rank {8 - index}", escape(row))
    table.add_row("Turn", "white" if position.is_whites_turn() else "black")
    table.add_row("Castling", position.castling.serialize() or "none")
    table.add_row("En passant", position.en_passant_target or "none")
    table.add_row("Half-move clock", str(position.half_move_clock))
    table.add_row("Full-move number", str(position.full_move_number))
    console.print(table)

    console.print(f"FEN: {escape(position.serialize())}")
    console.print(f"EPD: {escape(position.serialize_epd())}")


@app.command()
def check(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Text file with one FEN string per line"),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML config file"),
    override: list[str] | None = typer.Option(
        None, "--override", "-o", help="Config override, e.g. check.fail_fast=true"
    ),
) -> None:
    """Validate every FEN string in a file and print a summary."""
    settings = _configure(ctx, config, override).check

    if not file.is_file():
        console.print(f"[bold red]File not found:[/bold red] {escape(str(file))}")
        raise typer.Exit(code=2)

    validator = Validator()
    counts: Counter[ValidationResult] = Counter()

    for number, line in enumerate(file.read_text(encoding="utf-8").splitlines(), start=1):
        if settings.skip_blank_lines and not line.strip():
            continue
        if settings.comment_prefix and line.startswith(settings.comment_prefix):
            continue

        result = validator.validate(line)
        counts[result] += 1
        if not result.is_valid or settings.show_valid:
            console.print(f"line {number}: {_format_result(result)}")
        if not result.is_valid and settings.fail_fast:
            logger.info(f"Stopping at line {number} of {file}")
            break

    table = Table(title="Summary")
    table.add_column("Result", style="cyan")
    table.add_column("Count", justify="right")
    for result, count in sorted(counts.items(), key=lambda item: item[0].value):
        table.add_row(result.name, str(count))
    console.print(table)

    total = sum(counts.values())
    invalid = total - counts[ValidationResult.VALID]
    console.print(f"Checked {total} lines: {total - invalid} valid, {invalid} invalid")

    if invalid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
