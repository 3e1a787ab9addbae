import logging

import pytest

from symbolicator.processor.models import OutcomeStatus, SymbolicationOutcome
from symbolicator.processor.patcher import TextPatcher
from symbolicator.report.line_selector import LineSelector
from symbolicator.report.models import StackFrameCandidate

SYMBOL = "-[AppDelegate main] (AppDelegate.m:42)"


def _resolved(candidate: StackFrameCandidate, symbol: str = SYMBOL) -> SymbolicationOutcome:
    return SymbolicationOutcome(
        candidate=candidate, status=OutcomeStatus.RESOLVED, symbol=symbol
    )


def _failed(
    candidate: StackFrameCandidate,
    status: OutcomeStatus = OutcomeStatus.NO_SYMBOL,
    reason: str = "no symbol found!",
) -> SymbolicationOutcome:
    return SymbolicationOutcome(candidate=candidate, status=status, reason=reason)


class TestApplyResolved:
    def test_replaces_trailing_column_only(self) -> None:
        text = "Thread 0:\n3   MyApp   0x1000 0x2000 + 78925\nend\n"
        candidates = LineSelector().select(text)

        result = TextPatcher().apply(text, candidates, [_resolved(candidates[0])])

        assert result == f"Thread 0:\n3   MyApp   0x1000 {SYMBOL}\nend\n"

    def test_patches_identical_lines_one_by_one(self) -> None:
        line = "0 MyApp 0x1000 0x2000 + 4096"
        text = f"{line}\n{line}\n"
        candidates = LineSelector().select(text)
        patcher = TextPatcher()

        once = patcher.apply(text, candidates[:1], [_resolved(candidates[0])])
        twice = patcher.apply(
            text, candidates, [_resolved(candidates[0]), _resolved(candidates[1])]
        )

        assert once == f"0 MyApp 0x1000 {SYMBOL}\n{line}\n"
        assert twice == f"0 MyApp 0x1000 {SYMBOL}\n0 MyApp 0x1000 {SYMBOL}\n"

    def test_does_not_match_inside_longer_line(self) -> None:
        text = "13 MyApp 0x1000 0x2000 + 78925\n3 MyApp 0x1000 0x2000 + 78925\n"
        candidate = LineSelector().select(text)[1]

        result = TextPatcher().apply(text, [candidate], [_resolved(candidate)])

        assert result == f"13 MyApp 0x1000 0x2000 + 78925\n3 MyApp 0x1000 {SYMBOL}\n"

    def test_preserves_crlf_line_endings(self) -> None:
        text = "3 MyApp 0x1000 0x2000 + 78925\r\nnext\r\n"
        candidate = LineSelector().select(text)[0]

        result = TextPatcher().apply(text, [candidate], [_resolved(candidate)])

        assert result == f"3 MyApp 0x1000 {SYMBOL}\r\nnext\r\n"

    def test_preserves_trailing_spaces(self) -> None:
        text = "3 MyApp 0x1000 0x2000 + 1   \nnext\n"
        candidate = LineSelector().select(text)[0]

        result = TextPatcher().apply(text, [candidate], [_resolved(candidate)])

        assert candidate.raw_line == "3 MyApp 0x1000 0x2000 + 1"
        assert result == f"3 MyApp 0x1000 {SYMBOL}   \nnext\n"

    def test_preserves_trailing_tab_before_crlf(self) -> None:
        text = "3 MyApp 0x1000 0x2000 + 1\t\r\nnext\r\n"
        candidate = LineSelector().select(text)[0]

        result = TextPatcher().apply(text, [candidate], [_resolved(candidate)])

        assert result == f"3 MyApp 0x1000 {SYMBOL}\t\r\nnext\r\n"

    def test_symbol_with_backslashes_is_inserted_verbatim(self) -> None:
        text = "3 MyApp 0x1000 0x2000 + 78925\n"
        candidate = LineSelector().select(text)[0]

        result = TextPatcher().apply(text, [candidate], [_resolved(candidate, r"f(\1) (a.c:1)")])

        assert result == "3 MyApp 0x1000 f(\\1) (a.c:1)\n"

    def test_logs_resolved_symbol(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="symbolicator")
        text = "3 MyApp 0x1000 0x2000 + 78925\n"
        candidate = LineSelector().select(text)[0]

        TextPatcher().apply(text, [candidate], [_resolved(candidate)])

        assert f"> MyApp 0x1000: {SYMBOL}" in caplog.text


class TestApplyUnresolved:
    def test_leaves_failed_lines_untouched(self, sample_report: str) -> None:
        candidates = LineSelector().select(sample_report)
        outcomes = [
            _failed(c, OutcomeStatus.MISSING_SYMBOLS, "missing DWARF file!") for c in candidates
        ]

        assert TextPatcher().apply(sample_report, candidates, outcomes) == sample_report

    def test_resolved_status_with_empty_symbol_is_skipped(self) -> None:
        text = "3 MyApp 0x1000 0x2000 + 78925\n"
        candidate = LineSelector().select(text)[0]

        result = TextPatcher().apply(text, [candidate], [_resolved(candidate, "")])

        assert result == text

    def test_reports_binary_and_address(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="symbolicator")
        text = "3 MyApp 0x1000 0x2000 + 78925\n"
        candidate = LineSelector().select(text)[0]

        TextPatcher().apply(text, [candidate], [_failed(candidate)])

        assert "> MyApp 0x1000: no symbol found!" in caplog.text

    def test_warns_when_line_is_gone(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="symbolicator")
        candidate = StackFrameCandidate(
            raw_line="3 MyApp 0x1000 0x2000 + 1",
            binary="MyApp",
            address="0x1000",
            trailing_offset=15,
        )

        result = TextPatcher().apply("other text\n", [candidate], [_resolved(candidate)])

        assert result == "other text\n"
        assert "frame line not found" in caplog.text


class TestApplyValidation:
    def test_raises_on_misaligned_outcomes(self) -> None:
        text = "3 MyApp 0x1000 0x2000 + 78925\n"
        candidates = LineSelector().select(text)
        with pytest.raises(ValueError, match="1 candidates"):
            TextPatcher().apply(text, candidates, [])


class TestVerboseSeparators:
    def test_inserts_blank_record_per_frame(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="symbolicator")
        text = "0 MyApp 0x1000 0x2000 + 1\n1 MyApp 0x1004 0x2000 + 5\n"
        candidates = LineSelector().select(text)

        TextPatcher(verbose=True).apply(text, candidates, [_failed(c) for c in candidates])

        blank = [r for r in caplog.records if r.getMessage() == ""]
        assert len(blank) == 2
