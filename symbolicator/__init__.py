from symbolicator.processor.models import (
    OutcomeStatus,
    SymbolicationOutcome,
    SymbolicationResult,
)
from symbolicator.processor.processor import Processor, build_processor
from symbolicator.report.exceptions import MissingFieldError, SymbolicationError

__all__ = [
    "MissingFieldError",
    "OutcomeStatus",
    "Processor",
    "SymbolicationError",
    "SymbolicationOutcome",
    "SymbolicationResult",
    "build_processor",
]
