"""Command-line interface for textsplice.

Responsibilities:
- Expose user-facing commands for span removal and sentence inspection.
- Convert CLI arguments into `SpliceConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_run_summary, echo_sentence_list, exit_with_command_error
from .config import ConfigLoader, SpliceConfig
from .errors import PipelineStageError
from .parsing import parse_single_letter
from .pipeline import SplicePipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="textsplice",
    no_args_is_help=True,
    help="Remove the longest letter-bounded span from every sentence of a text.",
)


def _load_base_config(config_path: Path | None) -> SpliceConfig:
    """Load YAML config when requested, else environment defaults, as stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `TEXTSPLICE_*` environment variables.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    input_path: Path | None,
    start: str | None = None,
    end: str | None = None,
    ignore_case: bool | None = None,
) -> SpliceConfig:
    """Resolve effective config from YAML or environment defaults and CLI overrides."""

    base = _load_base_config(config_file)
    try:
        return replace(
            base,
            start_letter=(
                parse_single_letter(start, "--start") if start is not None else base.start_letter
            ),
            end_letter=parse_single_letter(end, "--end") if end is not None else base.end_letter,
            ignore_case=ignore_case if ignore_case is not None else base.ignore_case,
            input_path=input_path if input_path is not None else base.input_path,
        )
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Pass exactly one letter, e.g. `--start в --end т`.",
        ) from exc


InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a UTF-8 text file. Defaults to the built-in sample text."),
]
TextOption = Annotated[
    str | None,
    typer.Option("--text", help="Process this text instead of reading a file."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]


@app.command("run")
def run_command(
    input_path: InputArgument = None,
    text: TextOption = None,
    start: Annotated[
        str | None, typer.Option("--start", help="Letter opening the removed span.")
    ] = None,
    end: Annotated[
        str | None, typer.Option("--end", help="Letter closing the removed span.")
    ] = None,
    ignore_case: Annotated[
        bool | None,
        typer.Option(
            "--ignore-case/--case-sensitive",
            help="Match boundary letters case-insensitively (default) or exactly.",
        ),
    ] = None,
    config_file: ConfigOption = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress stage logs and the run summary."),
    ] = False,
) -> None:
    """Remove the longest span between two letters from every sentence."""

    try:
        config = _resolve_command_config(
            config_file=config_file,
            input_path=input_path,
            start=start,
            end=end,
            ignore_case=ignore_case,
        )
        pipeline = SplicePipeline(run_logger=None if quiet else RunLogger())
        result = pipeline.run(config, raw_text=text)
    except Exception as exc:
        exit_with_command_error("run", exc)

    typer.echo(result.output_text)
    if not quiet:
        echo_run_summary(result)


@app.command("sentences")
def sentences_command(
    input_path: InputArgument = None,
    text: TextOption = None,
    config_file: ConfigOption = None,
) -> None:
    """List parsed sentences, numbered from 1."""

    try:
        config = _resolve_command_config(config_file=config_file, input_path=input_path)
        parsed = SplicePipeline().parse(config, raw_text=text)
    except Exception as exc:
        exit_with_command_error("sentences", exc)

    echo_sentence_list(parsed)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
