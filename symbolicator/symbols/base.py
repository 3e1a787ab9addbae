from abc import ABC, abstractmethod
from pathlib import Path


class BaseDebugSymbolProvider(ABC):
    """Contract for all debug-symbol lookup adapters."""

    @abstractmethod
    def locate(self, identifier: str, version: str, build: str) -> Path | None:
        """Find the debug-symbol file for one binary.

        Args:
            identifier: Binary name as written in the stack frame.
            version: Marketing version from the report header.
            build: Build number from the report header.

        Returns:
            Path to the DWARF file inside a dSYM bundle, or None if missing.
        """


def dwarf_file_in(dsym_bundle: Path, identifier: str) -> Path | None:
    """Return <bundle>/Contents/Resources/DWARF/<identifier> if it is a file."""
    candidate = dsym_bundle / "Contents" / "Resources" / "DWARF" / identifier
    return candidate if candidate.is_file() else None
