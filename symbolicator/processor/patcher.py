import re

from symbolicator.logging.logger import Log
from symbolicator.processor.models import SymbolicationOutcome
from symbolicator.report.models import StackFrameCandidate


class TextPatcher:
    """Writes resolved symbols back into the report text.

    Each resolved candidate replaces the first remaining whole line equal to its
    original text, so identical frame lines are patched one after another.
    Lines without a resolved symbol are never touched.
    """

    def __init__(self, verbose: bool = False) -> None:
        self._verbose = verbose

    def apply(
        self,
        report_text: str,
        candidates: list[StackFrameCandidate],
        outcomes: list[SymbolicationOutcome],
    ) -> str:
        if len(candidates) != len(outcomes):
            raise ValueError(
                f"Got {len(outcomes)} outcomes for {len(candidates)} candidates"
            )

        result = report_text
        for candidate, outcome in zip(candidates, outcomes):
            if self._verbose:
                Log.separator()

            label = f"> {candidate.binary} {candidate.address}"
            if not outcome.resolved:
                Log.warning(f"{label}: {outcome.reason or 'no symbol found!'}")
                continue

            result, replaced = self._replace_line(
                result, candidate.raw_line, candidate.replacement(outcome.symbol)
            )
            if not replaced:
                Log.warning(f"{label}: frame line not found in report")
                continue
            Log.info(f"{label}: {outcome.symbol}")

        return result

    @staticmethod
    def _replace_line(text: str, original: str, replacement: str) -> tuple[str, bool]:
        pattern = re.compile(
            "^" + re.escape(original) + r"(?=[ \t]*\r?$)", re.MULTILINE
        )
        patched, count = pattern.subn(lambda _match: replacement, text, count=1)
        return patched, count > 0
