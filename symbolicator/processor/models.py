from dataclasses import dataclass, field
from enum import Enum

from symbolicator.report.models import StackFrameCandidate


class OutcomeStatus(str, Enum):
    RESOLVED = "resolved"
    NO_SYMBOL = "no_symbol"
    MISSING_BASE_ADDRESS = "missing_base_address"
    MISSING_SYMBOLS = "missing_symbols"
    RESOLVER_FAILED = "resolver_failed"


@dataclass(frozen=True)
class SymbolicationOutcome:
    """Result of resolving one stack frame candidate."""

    candidate: StackFrameCandidate
    status: OutcomeStatus
    symbol: str = ""
    reason: str = ""  # human readable failure description, empty when resolved

    @property
    def resolved(self) -> bool:
        return self.status is OutcomeStatus.RESOLVED and bool(self.symbol)


@dataclass
class SymbolicationResult:
    """Patched report text plus per-frame outcomes of one run."""

    text: str
    outcomes: list[SymbolicationOutcome] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def resolved(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.resolved)

    @property
    def failed(self) -> int:
        return self.attempted - self.resolved
