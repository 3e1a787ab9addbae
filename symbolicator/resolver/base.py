from abc import ABC, abstractmethod
from pathlib import Path


class BaseSymbolResolver(ABC):
    """Contract for address-to-symbol translation adapters."""

    @abstractmethod
    def resolve(
        self,
        base_address: str,
        architecture: str,
        symbol_path: Path,
        addresses: list[str],
    ) -> list[str]:
        """Translate addresses of one binary into symbol strings.

        Args:
            base_address: Load address of the binary, e.g. "0x100000000".
            architecture: Code type as written in the report; adapters normalize it.
            symbol_path: Debug-symbol file for the binary.
            addresses: Addresses to translate, in request order.

        Returns:
            One string per address, aligned by position. An empty string
            means no symbol was produced for that address.

        Raises:
            SymbolResolverError: if the translation process failed as a whole.
        """
