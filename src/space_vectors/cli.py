"""Click CLI entry point for the space-vectors calculator."""

from __future__ import annotations

import warnings
from pathlib import Path

import click

from space_vectors import __version__
from space_vectors.config import CalculatorConfig, load_config
from space_vectors.errors import SpaceVectorsError
from space_vectors.formatter import render
from space_vectors.logging_config import setup_logging
from space_vectors.parser import evaluate
from space_vectors.warning_policy import WarningPolicy, apply_policy, parse_code_list


def _build_warning_policy(
    warn_as_error: str | None, suppress_warning: str | None
) -> WarningPolicy | None:
    """Parse CLI warning options into a WarningPolicy, or None if unset."""
    if warn_as_error is None and suppress_warning is None:
        return None
    try:
        wae = parse_code_list(warn_as_error) if warn_as_error else frozenset()
        sup = parse_code_list(suppress_warning) if suppress_warning else frozenset()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return WarningPolicy(warn_as_error=wae, suppress=sup)


def _build_config(
    config_file: Path | None, precision: int | None, log_level: str | None
) -> CalculatorConfig:
    """Load the config file, if any, and apply command-line overrides."""
    try:
        config = load_config(config_file) if config_file is not None else CalculatorConfig()
    except SpaceVectorsError as e:
        raise click.ClickException(str(e)) from e
    overrides: dict[str, object] = {}
    if precision is not None:
        overrides["max_fraction_digits"] = precision
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def evaluate_to_text(
    text: str, config: CalculatorConfig, policy: WarningPolicy | None = None
) -> tuple[str, list[str]]:
    """Evaluate one expression and render it, collecting degeneracy warnings.

    Raises:
        SpaceVectorsError: On syntax errors, dispatch misses, or warnings the
            policy promotes to errors.
    """
    with warnings.catch_warnings(record=True) as recorded:
        warnings.simplefilter("always")
        result = evaluate(text)
    notes = apply_policy(recorded, policy)
    return render(result, config.max_fraction_digits, config.grouping), notes


_common_options = [
    click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="YAML configuration file.",
    ),
    click.option(
        "--precision",
        type=click.IntRange(0, 15),
        default=None,
        help="Maximum number of fraction digits to print.",
    ),
    click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
        default=None,
        help="Logging level (overrides the config file).",
    ),
    click.option(
        "--log-file",
        type=click.Path(dir_okay=False),
        default=None,
        help="Also write log records to this file.",
    ),
    click.option(
        "--warn-as-error",
        "warn_as_error",
        type=str,
        default=None,
        help="Comma-separated W-codes to treat as errors (e.g. W01,W02).",
    ),
    click.option(
        "--suppress-warning",
        "suppress_warning",
        type=str,
        default=None,
        help="Comma-separated W-codes to suppress (e.g. W01).",
    ),
]


def common_options(func):
    for option in reversed(_common_options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="space-vectors")
def main() -> None:
    """space-vectors: a calculator for points, vectors, lines and planes in 3-D."""


@main.command(name="eval")
@click.argument("expression")
@common_options
def eval_command(
    expression: str,
    config_file: Path | None = None,
    precision: int | None = None,
    log_level: str | None = None,
    log_file: str | None = None,
    warn_as_error: str | None = None,
    suppress_warning: str | None = None,
) -> None:
    """Evaluate a single EXPRESSION and print the result.

    Operands are separated by spaces or commas. A plain run of numbers can
    split into operands in more than one way (for example
    "angle 1 2 3, 4 5 6 7"); bracket vectors to choose the split.
    """
    policy = _build_warning_policy(warn_as_error, suppress_warning)
    config = _build_config(config_file, precision, log_level)
    setup_logging(config.log_level, log_file)

    try:
        output, notes = evaluate_to_text(expression, config, policy)
    except SpaceVectorsError as e:
        raise click.ClickException(f"Wrong input: {e}")
    for note in notes:
        click.echo(f"Warning: {note}", err=True)
    click.echo(output)


@main.command()
@common_options
def repl(
    config_file: Path | None = None,
    precision: int | None = None,
    log_level: str | None = None,
    log_file: str | None = None,
    warn_as_error: str | None = None,
    suppress_warning: str | None = None,
) -> None:
    """Read expressions line by line and print their values.

    The loop ends on one of the configured exit commands or at end of input.
    Errors are printed and the next line is read.
    Bracket vectors when a plain run of numbers could be split into
    operands in more than one way.
    """
    policy = _build_warning_policy(warn_as_error, suppress_warning)
    config = _build_config(config_file, precision, log_level)
    setup_logging(config.log_level, log_file)

    stdin = click.get_text_stream("stdin")
    while True:
        click.echo(config.prompt, nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break
        text = line.strip()
        if text in config.exit_commands:
            break
        if not text:
            continue
        try:
            output, notes = evaluate_to_text(text, config, policy)
        except SpaceVectorsError as e:
            click.echo(f"Wrong input: {e}")
            continue
        for note in notes:
            click.echo(f"Warning: {note}", err=True)
        click.echo(output)
