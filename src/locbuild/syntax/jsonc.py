"""JSON-with-comments support for translation files.

Translation repositories ship ``*.i18n.json`` files that may contain
``//`` and ``/* */`` comments and trailing commas. strip_comments turns
such text into strict JSON without touching string literals.

Python 3.13+. Zero external dependencies.
"""

import json
import re
from typing import Any

__all__ = [
    "loads",
    "strip_comments",
]

# Groups: double-quoted string, single-quoted string, block comment,
# line comment, trailing comma. Only one group matches per hit.
_TOKEN_PATTERN = re.compile(
    r'("[^"\\]*(?:\\.[^"\\]*)*")'
    r"|('[^'\\]*(?:\\.[^'\\]*)*')"
    r"|(/\*[^/*]*(?:(?:\*|/)[^/*]*)*?\*/)"
    r"|(/{2,}.*?(?:\r?\n|\Z))"
    r"|(,\s*[}\]])"
)


def _replace(match: re.Match[str]) -> str:
    block_comment, line_comment, trailing_comma = match.group(3, 4, 5)
    if block_comment:
        return ""
    if line_comment:
        # Keep the line break so line numbers in JSON errors stay meaningful
        if line_comment.endswith("\r\n"):
            return "\r\n"
        if line_comment.endswith("\n"):
            return "\n"
        return ""
    if trailing_comma:
        return trailing_comma[1:]
    return match.group(0)


def strip_comments(text: str) -> str:
    """Remove comments and trailing commas from JSON text.

    Example:
        >>> strip_comments('{"a": "//x", // note\\n "b": [1,],}')
        '{"a": "//x", \\n "b": [1]}'
    """
    return _TOKEN_PATTERN.sub(_replace, text)


def loads(text: str) -> Any:
    """Decode JSON text that may contain comments and trailing commas."""
    return json.loads(strip_comments(text))
