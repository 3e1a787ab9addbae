import re

from symbolicator.logging.logger import Log
from symbolicator.report.models import BinaryImage


class BaseAddressResolver:
    """Looks up a binary's load address in the report's binary image listing."""

    AMBIGUOUS_MARKER = "?"

    def find_image(self, report_text: str, identifier: str) -> BinaryImage | None:
        """Return the first image line for identifier, or None.

        Identifiers containing "?" (e.g. "???") are never looked up.
        """
        if self.AMBIGUOUS_MARKER in identifier:
            Log.debug(f"Skipping base address lookup for ambiguous binary {identifier}")
            return None

        pattern = re.compile(
            r"^[ \t]*(0x[0-9a-fA-F]+)[ \t]+-[ \t]+(0x[0-9a-fA-F]+)[ \t]+[+]?"
            + re.escape(identifier)
            + r"(?=\s|$)",
            re.MULTILINE,
        )
        match = pattern.search(report_text)
        if match is None:
            Log.warning(f"Didn't find starting address for {identifier}")
            return None
        return BinaryImage(identifier=identifier, base_address=match.group(1))

    def resolve(self, report_text: str, identifier: str) -> str | None:
        image = self.find_image(report_text, identifier)
        return image.base_address if image is not None else None
