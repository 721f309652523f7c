"""Character-level escaping for XLIFF text and generated string literals.

encode_entities / decode_entities handle exactly the three XML special
characters ``<``, ``>`` and ``&``. They are exact inverses on each other's
output and are not a general XML escaping routine: quotes and apostrophes
pass through untouched.

escape_string_literal prepares text for embedding in a quoted literal of a
generated runtime bundle.

Python 3.13+. Zero external dependencies.
"""

import re

__all__ = [
    "decode_entities",
    "encode_entities",
    "escape_string_literal",
]

_ENCODE_TABLE = str.maketrans({"<": "&lt;", ">": "&gt;", "&": "&amp;"})

_DECODE_MAP = {"&lt;": "<", "&gt;": ">", "&amp;": "&"}
_DECODE_PATTERN = re.compile("|".join(map(re.escape, _DECODE_MAP)))

_LITERAL_TABLE = str.maketrans(
    {
        "'": "\\'",
        '"': '\\"',
        "\\": "\\\\",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\b": "\\b",
        "\f": "\\f",
    }
)


def encode_entities(text: str) -> str:
    """Escape ``<``, ``>`` and ``&`` character by character.

    Every ``&`` is escaped, including one that starts an existing entity.

    Example:
        >>> encode_entities("a < b & c")
        'a &lt; b &amp; c'
    """
    return text.translate(_ENCODE_TABLE)


def decode_entities(text: str) -> str:
    """Replace ``&lt;``, ``&gt;`` and ``&amp;`` in a single left-to-right pass.

    Example:
        >>> decode_entities("&amp;lt;")
        '&lt;'
    """
    return _DECODE_PATTERN.sub(lambda match: _DECODE_MAP[match.group()], text)


def escape_string_literal(text: str) -> str:
    r"""Escape quotes, backslash and control characters as two-character sequences.

    Example:
        >>> print(escape_string_literal('Say "hi"'))
        Say \"hi\"
    """
    return text.translate(_LITERAL_TABLE)
