from dataclasses import dataclass


def normalize_architecture(architecture: str) -> str:
    """Convert a crash report code type (e.g. "X86-64") to resolver form ("x86_64")."""
    return architecture.lower().replace("-", "_")


@dataclass(frozen=True)
class ProcessInfo:
    """Header metadata of the crashed process."""

    name: str
    identifier: str
    version: str
    build: str
    architecture: str  # as written in the report, e.g. "ARM-64"


@dataclass(frozen=True)
class StackFrameCandidate:
    """A stack frame line whose symbol column still holds a raw address."""

    raw_line: str
    binary: str
    address: str
    trailing_offset: int  # index of the symbol/offset column within raw_line

    def replacement(self, symbol: str) -> str:
        """Return raw_line with the trailing column swapped for symbol."""
        return f"{self.raw_line[:self.trailing_offset]}{symbol}"


@dataclass(frozen=True)
class BinaryImage:
    """Entry of the report's binary image listing."""

    identifier: str
    base_address: str
