"""Address-to-symbol translation through ``atos``.

All addresses of one binary go to a single process invocation::

    xcrun atos -arch arm64 -o <dwarf file> -l <load address> <addr> [<addr> ...]

``atos`` prints one line per requested address, in request order.
"""

import subprocess
from pathlib import Path

from symbolicator.logging.logger import Log
from symbolicator.report.models import normalize_architecture
from symbolicator.resolver.base import BaseSymbolResolver
from symbolicator.resolver.exceptions import SymbolResolverError


def format_command(command: list[str]) -> str:
    """Render a command line for copy-pasting, quoting arguments with whitespace."""
    return " ".join(
        f'"{arg}"' if any(ch.isspace() for ch in arg) else arg for arg in command
    )


class AtosSymbolResolver(BaseSymbolResolver):
    """Runs atos as a blocking child process and splits its stdout per address."""

    def __init__(
        self,
        *,
        executable: str = "/usr/bin/xcrun",
        tool: str = "atos",
        timeout_seconds: int = 60,
        verbose: bool = False,
    ) -> None:
        self._executable = executable
        self._tool = tool
        self._timeout_seconds = timeout_seconds
        self._verbose = verbose

    def build_command(
        self,
        base_address: str,
        architecture: str,
        symbol_path: Path,
        addresses: list[str],
    ) -> list[str]:
        command = [self._executable]
        if self._tool:
            command.append(self._tool)
        command.extend([
            "-arch",
            normalize_architecture(architecture),
            "-o",
            str(symbol_path),
            "-l",
            base_address,
        ])
        command.extend(addresses)
        return command

    def resolve(
        self,
        base_address: str,
        architecture: str,
        symbol_path: Path,
        addresses: list[str],
    ) -> list[str]:
        if not addresses:
            return []

        command = self.build_command(base_address, architecture, symbol_path, addresses)
        if self._verbose:
            Log.info(format_command(command))

        try:
            proc = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self._timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise SymbolResolverError(
                f"{command[0]} timed out after {self._timeout_seconds}s"
            ) from exc
        except OSError as exc:
            raise SymbolResolverError(f"Failed to run {command[0]}: {exc}") from exc

        error_text = proc.stderr.decode("utf-8", errors="replace").strip()
        if error_text:
            Log.warning(error_text)

        if proc.returncode != 0:
            raise SymbolResolverError(
                f"{command[0]} exited with code {proc.returncode} for {symbol_path}"
            )

        try:
            output = proc.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SymbolResolverError(f"Unreadable output for {symbol_path}: {exc}") from exc

        return self._align(output, len(addresses), symbol_path)

    @staticmethod
    def _align(output: str, expected: int, symbol_path: Path) -> list[str]:
        lines = output.split("\n")
        if output.endswith("\n"):
            lines.pop()
        lines = [line.rstrip("\r") for line in lines[:expected]]
        if len(lines) < expected:
            Log.warning(
                f"Expected {expected} symbols from {symbol_path}, got {len(lines)}"
            )
            lines.extend([""] * (expected - len(lines)))
        return lines
