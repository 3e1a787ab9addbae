"""Debug-symbol lookup in Xcode archives.

An ``.xcarchive`` bundle records the version and build it was produced from in
its ``Info.plist``; the matching dSYM bundles live under ``dSYMs/``.
"""

import plistlib
from pathlib import Path
from xml.parsers.expat import ExpatError

from symbolicator.logging.logger import Log
from symbolicator.symbols.base import BaseDebugSymbolProvider, dwarf_file_in


class ArchiveSymbolProvider(BaseDebugSymbolProvider):
    """Finds dSYM files inside ``*.xcarchive`` bundles matching version and build."""

    def __init__(self, archives_root: Path) -> None:
        self._archives_root = archives_root

    def locate(self, identifier: str, version: str, build: str) -> Path | None:
        if not self._archives_root.is_dir():
            Log.warning(f"Archives folder {self._archives_root} does not exist")
            return None
        for archive in sorted(self._archives_root.rglob("*.xcarchive")):
            if not self._matches(archive, version, build):
                continue
            for dsym in sorted((archive / "dSYMs").glob("*.dSYM")):
                dwarf = dwarf_file_in(dsym, identifier)
                if dwarf is not None:
                    Log.debug(f"Using {dwarf} for {identifier} {version} ({build})")
                    return dwarf
        return None

    @staticmethod
    def _matches(archive: Path, version: str, build: str) -> bool:
        info_path = archive / "Info.plist"
        try:
            with info_path.open("rb") as fh:
                info = plistlib.load(fh)
        except (OSError, ValueError, ExpatError) as exc:
            Log.debug(f"Skipping {archive}: {exc}")
            return False
        if not isinstance(info, dict):
            return False
        properties = info.get("ApplicationProperties") or {}
        return (
            properties.get("CFBundleShortVersionString") == version
            and properties.get("CFBundleVersion") == build
        )
