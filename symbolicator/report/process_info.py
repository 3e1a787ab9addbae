import re
from typing import ClassVar

from symbolicator.logging.logger import Log
from symbolicator.report.exceptions import MissingFieldError
from symbolicator.report.models import ProcessInfo


class ProcessInfoExtractor:
    """Reads process name, identifier, version, build and code type from a report header."""

    _PROCESS_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^Process:[ \t]+([^\[\r\n]+?)[ \t]*\[[^\]\r\n]+\]", re.MULTILINE
    )
    _IDENTIFIER_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^Identifier:[ \t]+(\S[^\r\n]*?)[ \t]*\r?$", re.MULTILINE
    )
    _VERSION_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^Version:[ \t]+(\S+)[ \t]+\(([^)\r\n]+)\)[ \t]*\r?$", re.MULTILINE
    )
    _CODE_TYPE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^Code Type:[ \t]+([^ \t\r\n]+)", re.MULTILINE
    )

    def extract(self, report_text: str) -> ProcessInfo:
        """Extract header metadata.

        Raises:
            MissingFieldError: if any of the four header fields is absent.
        """
        process = self._PROCESS_RE.search(report_text)
        if process is None:
            raise MissingFieldError("Process", "Process name is missing")

        identifier = self._IDENTIFIER_RE.search(report_text)
        if identifier is None:
            raise MissingFieldError("Identifier", "Process identifier is missing")

        version = self._VERSION_RE.search(report_text)
        if version is None:
            raise MissingFieldError(
                "Version", "Process version and build number is missing"
            )

        code_type = self._CODE_TYPE_RE.search(report_text)
        if code_type is None:
            raise MissingFieldError("Code Type", "Process architecture value is missing")

        info = ProcessInfo(
            name=process.group(1),
            identifier=identifier.group(1),
            version=version.group(1),
            build=version.group(2),
            architecture=code_type.group(1),
        )
        Log.info(
            f"Detected {info.identifier} {info.architecture} "
            f"[{info.name} {info.version} ({info.build})]"
        )
        return info
