"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
run summaries, and sentence listings.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .grammar import Text
from .pipeline import SpliceResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_run_summary(result: SpliceResult) -> None:
    """Print sentence counters for a finished run to stderr."""

    typer.echo(
        f"Sentences: {result.sentence_count} (edited: {result.edited_sentence_count})",
        err=True,
    )


def echo_sentence_list(text: Text) -> None:
    """Print 1-based sentence rows without their leading spaces."""

    for index, sentence in enumerate(text, start=1):
        typer.echo(f"{index}. {sentence.render().rstrip()}")
