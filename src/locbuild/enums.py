"""Enumerations for type-safe pipeline constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class ExtensionSourceKind(StrEnum):
    """Kind of translation source found in an extension folder.

    StrEnum provides automatic string conversion: str(ExtensionSourceKind.PACKAGE) == "package"
    """

    PACKAGE = "package"
    """Package manifest string table: package.nls.json"""

    METADATA = "metadata"
    """Per-source-file message metadata: nls.metadata.json"""

    BUNDLE = "bundle"
    """Freeform localization bundle: bundle.l10n.json"""


class LineEnding(StrEnum):
    """Line terminator used for generated JSON artifacts."""

    LF = "lf"
    CRLF = "crlf"

    @property
    def characters(self) -> str:
        """The terminator itself."""
        return "\r\n" if self is LineEnding.CRLF else "\n"


__all__ = [
    "ExtensionSourceKind",
    "LineEnding",
]
