"""Text-level codecs shared by the XLIFF and bundle stages.

Submodules:
    entities - XML entity encode/decode and string-literal escaping
    jsonc    - JSON-with-comments stripping for translation files

Python 3.13+. Zero external dependencies.
"""

from .entities import decode_entities, encode_entities, escape_string_literal
from .jsonc import strip_comments

__all__ = [
    "decode_entities",
    "encode_entities",
    "escape_string_literal",
    "strip_comments",
]
