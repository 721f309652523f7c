"""Serialize translation catalogs to XLIFF 1.2.

XlfDocument collects per-file translation units and renders them as one
XLIFF document. Output is deterministic: files are sorted by path and
units by id, so identical input always yields byte-identical text.

Lifecycle:
    1. XlfDocument(project) - created empty
    2. add_file(...)        - populated, once per source file
    3. serialize()          - rendered; the document is sealed afterwards

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from locbuild.catalog.model import TranslationUnit, parse_translation_key
from locbuild.catalog.types import MessageKey, ResourcePath
from locbuild.constants import SOURCE_LANGUAGE, XLIFF_FOOTER, XLIFF_HEADER
from locbuild.diagnostics import CatalogMismatchError, XlfSealedError
from locbuild.syntax.entities import encode_entities

__all__ = ["XlfDocument"]

logger = logging.getLogger(__name__)

_LINE_SEPARATOR = "\r\n"
_FILE_INDENT = 2
_UNIT_INDENT = 4
_CHILD_INDENT = 6


def _text(value: str) -> str:
    """Encode a value for element content, keeping carriage returns."""
    return encode_entities(value).replace("\r", "&#13;")


def _attribute(value: str) -> str:
    """Encode a value for a double-quoted XML attribute."""
    return encode_entities(value).replace('"', "&quot;")


class XlfDocument:
    """XLIFF 1.2 document under construction.

    Example:
        >>> xlf = XlfDocument("vscode-editor")
        >>> xlf.add_file("src/vs/base/common/errors", ["ok"], ["OK"])
        >>> print(xlf.serialize())  # doctest: +NORMALIZE_WHITESPACE
        <?xml version="1.0" encoding="utf-8"?>
        <xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
          <file original="src/vs/base/common/errors" source-language="en" datatype="plaintext"><body>
            <trans-unit id="ok">
              <source xml:lang="en">OK</source>
            </trans-unit>
        </body></file>
        </xliff>

    Attributes:
        project: Translation project the document belongs to
    """

    __slots__ = ("_files", "_serialized", "_unit_count", "project")

    def __init__(self, project: str) -> None:
        self.project = project
        self._files: dict[ResourcePath, list[TranslationUnit]] = {}
        self._unit_count = 0
        self._serialized: str | None = None

    def __repr__(self) -> str:
        return (
            f"XlfDocument(project={self.project!r}, files={len(self._files)}, "
            f"units={self._unit_count})"
        )

    @property
    def unit_count(self) -> int:
        """Total number of units accepted across all files."""
        return self._unit_count

    @property
    def file_paths(self) -> tuple[ResourcePath, ...]:
        """Paths of all added files, sorted."""
        return tuple(sorted(self._files))

    def units(self, original: ResourcePath) -> tuple[TranslationUnit, ...]:
        """Units of one file, sorted by id."""
        return tuple(sorted(self._files[original], key=lambda unit: unit.id))

    def add_file(
        self,
        original: ResourcePath,
        keys: Sequence[object],
        messages: Sequence[str],
    ) -> None:
        """Add one source file's keys and messages.

        Keys may be TranslationKey values or raw JSON keys (strings or
        ``{"key", "comment"}`` objects). Empty and repeated keys are skipped;
        the first occurrence wins. Adding the same path twice replaces it.

        Args:
            original: Path recorded as the ``original`` attribute of the file node
            keys: Keys, parallel to messages
            messages: Untranslated messages

        Raises:
            CatalogMismatchError: If keys and messages differ in length
            CatalogFormatError: If a raw key has neither accepted shape
            XlfSealedError: If the document was already serialized
        """
        if self._serialized is not None:
            msg = f"Cannot add {original}: XLF document for {self.project} is already serialized"
            raise XlfSealedError(msg)
        if len(keys) != len(messages):
            raise CatalogMismatchError(len(keys), len(messages), module=original)
        if not keys:
            logger.info("No keys in %s", original)
            return

        units: list[TranslationUnit] = []
        seen: set[MessageKey] = set()
        for raw_key, message in zip(keys, messages, strict=True):
            key = parse_translation_key(raw_key)
            real_key = key.real_key
            if not real_key or real_key in seen:
                continue
            seen.add(real_key)
            comment = None
            if key.comment_lines:
                comment = _LINE_SEPARATOR.join(_text(line) for line in key.comment_lines)
            units.append(TranslationUnit(real_key, _text(message), comment))

        previous = self._files.get(original)
        if previous is not None:
            self._unit_count -= len(previous)
        self._files[original] = units
        self._unit_count += len(units)

    def serialize(self) -> str:
        """Render the document and seal it.

        Repeated calls return the same text.

        Returns:
            XLIFF text with CRLF line separators
        """
        if self._serialized is not None:
            return self._serialized

        lines: list[str] = list(XLIFF_HEADER)
        for original in sorted(self._files):
            lines.append(
                " " * _FILE_INDENT
                + f'<file original="{_attribute(original)}" '
                f'source-language="{SOURCE_LANGUAGE}" datatype="plaintext"><body>'
            )
            for unit in self.units(original):
                lines.extend(self._render_unit(original, unit))
            lines.append("</body></file>")
        lines.append(XLIFF_FOOTER)

        self._serialized = _LINE_SEPARATOR.join(lines)
        return self._serialized

    __str__ = serialize

    @staticmethod
    def _render_unit(original: ResourcePath, unit: TranslationUnit) -> list[str]:
        if not unit.message:
            logger.warning("Item with id %s in file %s has an empty message.", unit.id, original)
        rendered = [
            " " * _UNIT_INDENT + f'<trans-unit id="{_attribute(unit.id)}">',
            " " * _CHILD_INDENT + f'<source xml:lang="{SOURCE_LANGUAGE}">{unit.message}</source>',
        ]
        if unit.comment:
            rendered.append(" " * _CHILD_INDENT + f"<note>{unit.comment}</note>")
        rendered.append(" " * _UNIT_INDENT + "</trans-unit>")
        return rendered
