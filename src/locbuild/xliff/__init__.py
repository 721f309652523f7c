"""XLIFF 1.2 exchange format.

Submodules:
    builder - XlfDocument: deterministic serialization of translation units
    parser  - parse_xlf: translated documents back to per-file message maps
    l10n    - l10n bundle maps to and from XLF

Python 3.13+.
"""

from .builder import XlfDocument
from .l10n import build_l10n_xlf, parse_l10n_xlf
from .parser import ParsedXlfFile, parse_xlf, parse_xlf_text

__all__ = [
    "ParsedXlfFile",
    "XlfDocument",
    "build_l10n_xlf",
    "parse_l10n_xlf",
    "parse_xlf",
    "parse_xlf_text",
]
