"""Request-scoped preview state."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from source_preview_core.preview.normalize import normalize_record

logger = structlog.get_logger()

SAMPLE_SIZE = 10


class CompletionReason(str, Enum):
    """How an extraction finished."""

    CAPPED = "capped"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass
class StepOutcome:
    """Result-or-error of one extraction step."""

    step: str
    ok: bool
    error: str | None = None


@dataclass
class PreviewAccumulator:
    """Fields and sample records collected for a single preview.

    ``results`` stays ``None`` until an extractor starts, so an unknown
    source is distinguishable from an empty one. ``completion`` is a one-shot
    latch: the cap path and the natural end-of-stream path both call
    :meth:`settle`, and only the first call is recorded.
    """

    cap: int = SAMPLE_SIZE
    merge_fields: bool = False
    fields: list[str] | None = None
    results: list[dict[str, Any]] | None = None
    steps: list[StepOutcome] = field(default_factory=list)
    completion: CompletionReason | None = None

    def start(self) -> None:
        if self.results is None:
            self.results = []

    @property
    def full(self) -> bool:
        return self.results is not None and len(self.results) >= self.cap

    def add(self, record: Any, *, observe_fields: bool = True) -> bool:
        """Append a record unless the cap is reached; return True once full."""
        self.start()
        if self.full:
            return True
        record = normalize_record(record)
        if observe_fields:
            self._observe(list(record))
        self.results.append(record)
        return self.full

    def set_fields(self, names: list[str]) -> None:
        self.fields = [str(n) for n in names]

    def _observe(self, keys: list[str]) -> None:
        if self.merge_fields and self.fields:
            self.fields = self.fields + [k for k in keys if k not in self.fields]
        else:
            self.fields = keys

    def record_success(self, step: str) -> None:
        self.steps.append(StepOutcome(step=step, ok=True))

    def record_failure(self, step: str, error: BaseException) -> None:
        message = str(error) or type(error).__name__
        self.steps.append(StepOutcome(step=step, ok=False, error=message))

    @property
    def failed(self) -> bool:
        return any(not s.ok for s in self.steps)

    def settle(self, reason: CompletionReason) -> bool:
        """Record how extraction finished. Later calls are ignored."""
        if self.completion is not None:
            logger.debug(
                "completion_already_settled",
                completion=self.completion.value,
                ignored=reason.value,
            )
            return False
        self.completion = reason
        return True
