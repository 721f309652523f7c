"""Inno Setup message files (.isl): export for translation and translate back.

An installer script is line oriented: ``;`` starts a comment, ``[Section]``
opens a section, and data lines are ``key=value``. Only the ``[Messages]``
and ``[CustomMessages]`` sections are exported for translation.
Translation rewrites data lines whose key has a translated value and keeps
every other line verbatim, then encodes the script in the language's
Windows code page with CRLF line endings.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
import posixpath
import re
from collections.abc import Iterable, Iterator, Mapping

from locbuild.artifacts import OutputFile
from locbuild.catalog.types import MessageKey
from locbuild.config import InnoSetupConfig
from locbuild.constants import ISL_DEFAULT_NAME, ISL_SOURCE_FILE, ISL_XLF_FILE, SETUP_PROJECT
from locbuild.diagnostics import IslPreparationError, MalformedLineError, UnknownInputError
from locbuild.languages import LanguageDescriptor
from locbuild.loading import FileProvider
from locbuild.xliff.builder import XlfDocument
from locbuild.xliff.parser import parse_xlf

__all__ = [
    "create_isl_file",
    "create_xlf_files_for_isl",
    "parse_isl_messages",
    "prepare_isl_files",
    "translate_isl",
]

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_TRANSLATABLE_SECTIONS = frozenset({"[Messages]", "[CustomMessages]"})
_CRLF = "\r\n"


def _split_lines(text: str) -> list[str]:
    return _LINE_BREAK.split(text)


def parse_isl_messages(text: str) -> Iterator[tuple[MessageKey, str]]:
    """Yield (key, value) pairs of the translatable sections.

    Blank lines and comments are ignored, as are entries with an empty key
    or value.

    Raises:
        MalformedLineError: If a translatable-section line has no ``=``
    """
    in_messages = False
    for line_number, line in enumerate(_split_lines(text), start=1):
        if not line:
            continue
        if line.startswith(";"):
            continue
        if line.startswith("["):
            in_messages = line in _TRANSLATABLE_SECTIONS
            continue
        if not in_messages:
            continue
        key, separator, value = line.partition("=")
        if not separator:
            raise MalformedLineError(line, line_number=line_number)
        if key and value:
            yield key, value


def _original_path(path: str) -> str:
    """Source path without its language and extension suffixes."""
    directory, name = posixpath.split(path.replace("\\", "/"))
    stem = name.split(".", 1)[0]
    return posixpath.join(directory, stem) if directory else stem


def create_xlf_files_for_isl(path: str, text: str) -> OutputFile:
    """Export the translatable messages of ``messages.en.isl`` as XLF.

    Args:
        path: Path of the script relative to the repository root
        text: Script text

    Returns:
        ``vscode-setup/messages.xlf``

    Raises:
        UnknownInputError: If the file is not messages.en.isl
        MalformedLineError: If a translatable-section line has no ``=``
    """
    if posixpath.basename(path.replace("\\", "/")) != ISL_SOURCE_FILE:
        raise UnknownInputError(path, "is not a known installer message file")

    keys: list[MessageKey] = []
    messages: list[str] = []
    for key, value in parse_isl_messages(text):
        keys.append(key)
        messages.append(value)

    xlf = XlfDocument(SETUP_PROJECT)
    xlf.add_file(_original_path(path), keys, messages)
    return OutputFile.from_text(f"{SETUP_PROJECT}/{ISL_XLF_FILE}", xlf.serialize())


def translate_isl(text: str, messages: Mapping[MessageKey, str]) -> str:
    """Substitute translated values into an installer script.

    Comment and section lines are kept; data lines whose key has a
    non-empty translation become ``key=translation``; any other line is
    kept verbatim. Blank lines are dropped.

    Returns:
        Translated script joined with CRLF

    Example:
        >>> translate_isl("[Messages]\\ngreeting=Hello\\nbye=Bye", {"greeting": "Bonjour"})
        '[Messages]\\r\\ngreeting=Bonjour\\r\\nbye=Bye'
    """
    content: list[str] = []
    for line in _split_lines(text):
        if not line:
            continue
        if line.startswith(("[", ";")):
            content.append(line)
            continue
        key = line.partition("=")[0]
        translated = messages.get(key) if key else None
        content.append(f"{key}={translated}" if translated else line)
    return _CRLF.join(content)


def create_isl_file(
    name: str,
    messages: Mapping[MessageKey, str],
    language: LanguageDescriptor,
    inno_setup: InnoSetupConfig,
    provider: FileProvider,
) -> OutputFile:
    """Translate one installer script into a language.

    The ``Default`` script is read as ``<name>.isl``; every other script as
    ``<name>.en.isl``. The result is ``<basename>.<language id>.isl``,
    encoded in the installer code page (unencodable characters become ``?``).
    """
    basename = posixpath.basename(name)
    source = f"{name}.isl" if basename == ISL_DEFAULT_NAME else f"{name}.en.isl"
    translated = translate_isl(provider.read_text(source), messages)
    logger.debug("Translated %s into %s (%s)", source, language.id, inno_setup.encoding)
    return OutputFile(
        f"{basename}.{language.id}.isl",
        translated.encode(inno_setup.encoding, errors="replace"),
    )


async def prepare_isl_files(
    xlf_texts: Iterable[str],
    language: LanguageDescriptor,
    inno_setup: InnoSetupConfig,
    provider: FileProvider,
) -> tuple[OutputFile, ...]:
    """Translate installer scripts from translated XLF documents.

    All documents are parsed concurrently and awaited together; scripts are
    only produced once every parse succeeded.

    Raises:
        IslPreparationError: If any document failed to parse; carries every failure
    """
    results = await asyncio.gather(
        *(parse_xlf(text) for text in xlf_texts),
        return_exceptions=True,
    )
    errors = [result for result in results if isinstance(result, BaseException)]
    if errors:
        raise IslPreparationError("Failed to prepare installer scripts", errors)

    outputs: list[OutputFile] = []
    for parsed in results:
        assert not isinstance(parsed, BaseException)  # errors handled above
        outputs.extend(
            create_isl_file(file.name, file.messages, language, inno_setup, provider)
            for file in parsed
        )
    return tuple(outputs)
