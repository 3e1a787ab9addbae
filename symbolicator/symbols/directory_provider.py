from pathlib import Path

from symbolicator.logging.logger import Log
from symbolicator.symbols.base import BaseDebugSymbolProvider, dwarf_file_in


def versioned_symbols_dir(root: Path, identifier: str, version: str, build: str) -> Path:
    """Build path to a versioned symbols folder: {root}/{identifier}/{version}/{build}"""
    return root / identifier / version / build


class DirectorySymbolProvider(BaseDebugSymbolProvider):
    """Finds dSYM bundles in a plain folder, preferring a versioned subfolder."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def locate(self, identifier: str, version: str, build: str) -> Path | None:
        search_dirs = [
            versioned_symbols_dir(self._root, identifier, version, build),
            self._root,
        ]
        for directory in search_dirs:
            if not directory.is_dir():
                continue
            for dsym in sorted(directory.glob("*.dSYM")):
                dwarf = dwarf_file_in(dsym, identifier)
                if dwarf is not None:
                    Log.debug(f"Using {dwarf} for {identifier} {version} ({build})")
                    return dwarf
        return None
