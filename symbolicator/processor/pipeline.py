from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from symbolicator.processor.models import SymbolicationOutcome
from symbolicator.report.models import ProcessInfo, StackFrameCandidate


@dataclass(slots=True)
class PipelineContext:
    report_text: str
    process_info: ProcessInfo | None = None
    candidates: list[StackFrameCandidate] = field(default_factory=list)
    outcomes: list[SymbolicationOutcome] = field(default_factory=list)
    output_text: str = ""
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
