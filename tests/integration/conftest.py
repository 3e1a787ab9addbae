import stat
import sys
from pathlib import Path

import pytest

FAKE_ATOS = """#!/bin/sh
# Stand-in for atos: -arch ARCH -o FILE -l LOAD_ADDRESS ADDRESS...
if [ "$2" != "x86_64" ]; then
    echo "atos: unsupported architecture $2" >&2
    exit 1
fi
echo "loaded $4 at $6" >&2
shift 6
for addr in "$@"; do
    case "$addr" in
        0x000000010000a2f4) printf '%s\\n' "-[AppDelegate main] (AppDelegate.m:42)" ;;
        0x000000010000b100) printf '%s\\n' "main (main.m:7)" ;;
        *) printf '%s\\n' "$addr" ;;
    esac
done
"""


@pytest.fixture()
def fake_atos(tmp_path: Path) -> Path:
    """Executable shell script answering like atos for the sample report."""
    if sys.platform == "win32" or not Path("/bin/sh").exists():
        pytest.skip("Shell scripts cannot be executed on this platform")
    script = tmp_path / "fake-atos"
    script.write_text(FAKE_ATOS)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture()
def symbols_root(tmp_path: Path) -> Path:
    """Symbols folder holding a dSYM for MyApp 1.2 (345) only."""
    root = tmp_path / "symbols"
    dwarf = root / "MyApp" / "1.2" / "345" / "MyApp.app.dSYM" / "Contents" / "Resources" / "DWARF" / "MyApp"
    dwarf.parent.mkdir(parents=True)
    dwarf.write_bytes(b"\xcf\xfa\xed\xfe")
    return root
