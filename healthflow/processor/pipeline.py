import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from healthflow.classification.models import ClassificationVerdict
from healthflow.processor.models import UploadedDocument


class PipelineState(str, Enum):
    START = "start"
    EXTRACTING = "extracting"
    VALIDATING = "validating"
    CONTENT_LENGTH_CHECK = "content_length_check"
    ANALYZING = "analyzing"
    DONE = "done"
    FAILED = "failed"


class RequestBudget:
    """Time allowance shared by every AI call made for one request."""

    def __init__(
        self,
        total_seconds: float,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._monotonic = monotonic
        self._deadline = monotonic() + total_seconds

    def remaining_seconds(self) -> float:
        return max(0.0, self._deadline - self._monotonic())


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    state: PipelineState = PipelineState.START
    extracted_text: str = ""
    verdict: ClassificationVerdict | None = None
    analysis_narrative: str = ""
    error_message: str = ""
    budget: RequestBudget | None = None

    def remaining_seconds(self) -> float | None:
        if self.budget is None:
            return None
        return self.budget.remaining_seconds()


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
