"""Run orchestration for textsplice.

Responsibilities:
- Define the stage order for one run: read, parse, edit, render.
- Map core validation and I/O failures to stage-scoped errors.
- Emit stage telemetry and progress callbacks.

Key types:
- `SplicePipeline`: orchestration facade.
- `SpliceResult`: immutable record of one run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from .config import SpliceConfig
from .editing import LongestSpanRemoval
from .errors import PipelineStageError, TextValidationError
from .grammar import Text, parse_text
from .samples import SAMPLE_TEXT
from .telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")


@dataclass(frozen=True, slots=True)
class SpliceResult:
    """Outcome of one run.

    Attributes:
        source_text: Raw text that was processed.
        output_text: Rendered text after editing every sentence.
        sentence_count: Number of parsed sentences.
        edited_sentence_count: Sentences whose rendering changed.
    """

    source_text: str
    output_text: str
    sentence_count: int
    edited_sentence_count: int


class SplicePipeline:
    """Coordinate all stages for a single run."""

    _PHASE_SEQUENCE = ("read", "parse", "edit", "render")

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
    ) -> None:
        """Initialize optional runtime logging and progress reporting hooks."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback

    def run(self, config: SpliceConfig, raw_text: str | None = None) -> SpliceResult:
        """Read, parse, edit, and render text according to `config`.

        `raw_text` takes precedence over `config.input_path`; with neither, the
        built-in sample text is processed.
        """

        self._validate_config(config)
        source_text = self._run_stage("read", lambda: self._read(config, raw_text))
        text = self._run_stage(
            "parse",
            lambda: self._parse(source_text),
            summarize=lambda parsed: {"sentence_count": len(parsed)},
        )
        edited = self._run_stage(
            "edit",
            lambda: self._edit(text, config),
            summarize=lambda count: {
                "sentence_count": len(text),
                "edited_sentence_count": count,
            },
        )
        output_text = self._run_stage("render", text.render)

        return SpliceResult(
            source_text=source_text,
            output_text=output_text,
            sentence_count=len(text),
            edited_sentence_count=edited,
        )

    def parse(self, config: SpliceConfig, raw_text: str | None = None) -> Text:
        """Run only the read and parse stages."""

        source_text = self._run_stage("read", lambda: self._read(config, raw_text))
        return self._run_stage("parse", lambda: self._parse(source_text))

    def _validate_config(self, config: SpliceConfig) -> None:
        try:
            config.validate()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=str(exc),
                hint="Pass single letters via `--start` and `--end`.",
            ) from exc

    def _read(self, config: SpliceConfig, raw_text: str | None) -> str:
        if raw_text is not None:
            return raw_text
        if config.input_path is None:
            return SAMPLE_TEXT
        try:
            content = config.input_path.read_text(encoding=config.encoding)
        except FileNotFoundError as exc:
            raise PipelineStageError(
                stage="read",
                detail=f"Input file not found: `{config.input_path}`.",
                hint="Provide an existing text file path.",
            ) from exc
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise PipelineStageError(
                stage="read",
                detail=f"Failed to read input file `{config.input_path}`: {exc}",
                hint=f"Verify file permissions and that it is encoded as `{config.encoding}`.",
            ) from exc
        # Files usually end with a newline after the final terminator.
        return content.rstrip("\r\n")

    def _parse(self, source_text: str) -> Text:
        try:
            return parse_text(source_text)
        except TextValidationError as exc:
            raise PipelineStageError(
                stage="parse",
                detail=f"Invalid text: {exc.detail}.",
                hint=(
                    "Text must start with an uppercase letter, end with `.`, `!` or `?`, "
                    "and contain only letters, punctuation, and whitespace."
                ),
            ) from exc

    def _edit(self, text: Text, config: SpliceConfig) -> int:
        """Apply the span removal to every sentence and count changed sentences."""

        before = [sentence.render() for sentence in text]
        text.apply_to_each_sentence(LongestSpanRemoval.from_config(config))
        return sum(
            1 for original, sentence in zip(before, text) if original != sentence.render()
        )

    def _stage_position(self, stage_name: str) -> tuple[int, int] | None:
        """Return 1-based stage index and total stage count for known stages."""

        try:
            index = self._PHASE_SEQUENCE.index(stage_name) + 1
        except ValueError:
            return None
        return index, len(self._PHASE_SEQUENCE)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        summarize: Callable[[_StageResult], dict[str, object]] | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events.

        `summarize` maps the stage result to counters attached to the complete event.
        """

        stage_position = self._stage_position(stage_name)
        if stage_position and self._stage_progress_callback is not None:
            self._stage_progress_callback(stage_name, stage_position[0], stage_position[1])
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            context = summarize(result) if summarize is not None else {}
            self._run_logger.log_stage_complete(stage_name, **context)
        return result
