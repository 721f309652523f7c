"""XLIFF helpers for tests.

Exported documents carry only sources. These helpers turn them into the
translated documents a translation service would return, so export and
import can be tested against each other.
"""

from __future__ import annotations

import re

_SOURCE = re.compile(r'<source xml:lang="en">(.*?)</source>', re.S)


def translate(xlf_text: str, language: str = "de") -> str:
    """Add a target-language and echo every source as its target."""
    text = xlf_text.replace(
        'source-language="en"', f'source-language="en" target-language="{language}"'
    )
    return _SOURCE.sub(lambda match: f"{match.group(0)}<target>{match.group(1)}</target>", text)


def translate_with(xlf_text: str, messages: dict[str, str], language: str = "de") -> str:
    """Add a target-language and targets for the given unit ids only."""
    text = xlf_text.replace(
        'source-language="en"', f'source-language="en" target-language="{language}"'
    )
    for key, message in messages.items():
        text = re.sub(
            rf'(<trans-unit id="{re.escape(key)}">\r\n\s*<source[^>]*>.*?</source>)',
            lambda match, message=message: f"{match.group(1)}<target>{message}</target>",
            text,
            flags=re.S,
        )
    return text
