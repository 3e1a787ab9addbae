import re
from collections.abc import Iterator
from typing import ClassVar

from symbolicator.report.models import StackFrameCandidate


class LineSelector:
    """Finds stack frame lines that have not been symbolicated yet.

    A frame line reads ``<index> <binary> <address> <trailing column>``; it is
    selected only while the trailing column still starts with ``0x``.
    """

    _FRAME_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^\d+[ \t]+(.+?)[ \t]+(0x[0-9a-fA-F]+)[ \t]+([^\r\n]+?)(?=[ \t]*\r?$)",
        re.MULTILINE,
    )

    def select(self, report_text: str) -> list[StackFrameCandidate]:
        return list(self.iter_candidates(report_text))

    def iter_candidates(self, report_text: str) -> Iterator[StackFrameCandidate]:
        for match in self._FRAME_RE.finditer(report_text):
            if not match.group(3).startswith("0x"):
                continue
            yield StackFrameCandidate(
                raw_line=match.group(0),
                binary=match.group(1).strip(),
                address=match.group(2),
                trailing_offset=match.start(3) - match.start(0),
            )
