"""Parse translated XLIFF 1.2 documents back into message maps.

Structural problems (unparseable XML, no file nodes, file nodes without
``original`` or ``target-language``, translated units without ``id``) fail
the whole parse with XlfStructureError. Units without a ``target`` are
untranslated and simply skipped; files that end up with no messages are
dropped from the result.

Python 3.13+.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from locbuild.catalog.types import LanguageId, MessageKey, ResourcePath
from locbuild.diagnostics import XlfStructureError

__all__ = ["ParsedXlfFile", "parse_xlf", "parse_xlf_text"]


@dataclass(frozen=True, slots=True)
class ParsedXlfFile:
    """Translated messages of one ``<file>`` node.

    Attributes:
        name: The file node's ``original`` attribute
        language: Lower-cased ``target-language``
        messages: Unit id -> translated text
    """

    name: ResourcePath
    language: LanguageId
    messages: Mapping[MessageKey, str] = field(default_factory=dict)


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified tags."""
    return tag.rpartition("}")[2]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local_name(child.tag) == name)


def _parse_file_node(node: ET.Element) -> ParsedXlfFile:
    name = node.get("original")
    if not name:
        msg = (
            "XLF parsing error: XLIFF file node does not contain original attribute "
            "to determine the original location of the resource file."
        )
        raise XlfStructureError(msg)
    language = node.get("target-language")
    if not language:
        msg = (
            f"XLF parsing error: XLIFF file node {name} does not contain target-language "
            "attribute to determine translated language."
        )
        raise XlfStructureError(msg)

    messages: dict[MessageKey, str] = {}
    for body in _children(node, "body"):
        for unit in body.iter():
            if _local_name(unit.tag) != "trans-unit":
                continue
            target = next(_children(unit, "target"), None)
            if target is None:
                continue  # not translated yet
            key = unit.get("id")
            if not key:
                msg = (
                    f"XLF parsing error: trans-unit {ET.tostring(unit, encoding='unicode')!r} "
                    f"defined in file {name} is missing the ID attribute."
                )
                raise XlfStructureError(msg)
            messages[key] = "".join(target.itertext())
    return ParsedXlfFile(name=name, language=language.lower(), messages=messages)


def parse_xlf_text(text: str) -> tuple[ParsedXlfFile, ...]:
    """Parse an XLIFF document synchronously.

    Args:
        text: XLIFF document text

    Returns:
        One ParsedXlfFile per file node with at least one translated unit,
        in document order

    Raises:
        XlfStructureError: If the document is malformed or misses required parts
    """
    try:
        root = ET.fromstring(text)  # noqa: S314 - trusted build input
    except ET.ParseError as e:
        msg = f"XLF parsing error: Failed to parse XLIFF string. {e}"
        raise XlfStructureError(msg) from e

    file_nodes = list(_children(root, "file")) if _local_name(root.tag) == "xliff" else []
    if not file_nodes:
        msg = (
            'XLF parsing error: XLIFF file does not contain "xliff" or "file" node(s) '
            "required for parsing."
        )
        raise XlfStructureError(msg)

    parsed = (_parse_file_node(node) for node in file_nodes)
    return tuple(file for file in parsed if file.messages)


async def parse_xlf(text: str) -> tuple[ParsedXlfFile, ...]:
    """Parse an XLIFF document.

    Coroutine form of parse_xlf_text, so batches of documents can be
    awaited jointly by the pack and installer-script stages.

    Raises:
        XlfStructureError: If the document is malformed or misses required parts
    """
    return parse_xlf_text(text)
