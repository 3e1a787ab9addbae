import sys
from pathlib import Path

from symbolicator.config.settings import Settings
from symbolicator.logging.logger import Log
from symbolicator.processor.processor import build_processor
from symbolicator.report.exceptions import MissingFieldError


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build processor -> symbolicate one report."""
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    Log.configure(settings.log_level)

    if args:
        try:
            report_text = Path(args[0]).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            Log.error(f"Cannot read report {args[0]}: {exc}")
            return 1
    else:
        report_text = sys.stdin.read()

    processor = build_processor(settings)
    try:
        result = processor.process(report_text)
    except MissingFieldError:
        return 1

    sys.stdout.write(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
