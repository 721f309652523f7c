"""Bridge between freeform l10n bundle maps and XLIFF.

Extension translations are gathered as ``resource path -> l10n bundle``
maps. These helpers render such a map as one XLF document and read a
translated document back as plain ``resource path -> {key: message}``
maps, reusing XlfDocument and parse_xlf.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping

from locbuild.catalog.model import BareKey, CommentedKey, L10nEntry, L10nMessage, TranslationKey
from locbuild.catalog.types import MessageKey, ResourcePath
from locbuild.constants import EXTENSIONS_PROJECT
from locbuild.xliff.builder import XlfDocument
from locbuild.xliff.parser import parse_xlf

__all__ = ["build_l10n_xlf", "parse_l10n_xlf"]


def build_l10n_xlf(
    l10n_map: Mapping[ResourcePath, Mapping[MessageKey, L10nEntry]],
    project: str = EXTENSIONS_PROJECT,
) -> str:
    """Serialize l10n bundles as one XLF document.

    Args:
        l10n_map: Resource path -> bundle; each path becomes one file node
        project: Translation project of the document

    Returns:
        XLIFF text
    """
    xlf = XlfDocument(project)
    for resource, bundle in l10n_map.items():
        keys: list[TranslationKey] = []
        messages: list[str] = []
        for key, entry in bundle.items():
            match entry:
                case L10nMessage(message=message, comment=comment):
                    keys.append(CommentedKey(key, comment))
                    messages.append(message)
                case _:
                    keys.append(BareKey(key))
                    messages.append(entry)
        xlf.add_file(resource, keys, messages)
    return xlf.serialize()


async def parse_l10n_xlf(text: str) -> dict[ResourcePath, dict[MessageKey, str]]:
    """Read a translated XLF document as l10n maps.

    Raises:
        XlfStructureError: If the document is malformed
    """
    return {file.name: dict(file.messages) for file in await parse_xlf(text)}
