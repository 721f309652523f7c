"""Prepare language pack files from translated XLF documents.

Every translated XLF document is routed by the project and resource names
derived from its path. Extension-project documents feed one pack per
extension; everything else feeds the main pack. All documents are parsed
concurrently and awaited together: if any parse fails, preparation fails
as a whole and no pack file is produced.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath

from locbuild.artifacts import OutputFile
from locbuild.catalog.model import L10nMessage, LanguagePack
from locbuild.catalog.types import MessageKey
from locbuild.config import BuildConfig
from locbuild.constants import (
    EXTENSIONS_PROJECT,
    EXTERNAL_EXTENSIONS,
    MAIN_PACK_FILE,
    MAIN_PACK_ID,
    NORMALIZED_RESOURCE_SUFFIX,
)
from locbuild.diagnostics import PackPreparationError
from locbuild.xliff.l10n import parse_l10n_xlf

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Inputs and results
    "XlfInput",
    "TranslationPath",
    "PackPreparationResult",
    # Operations
    "prepare_i18n_pack_files",
    "render_pack",
    "resolve_project",
    "record_from_l10n",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class XlfInput:
    """A translated XLF document.

    Attributes:
        path: Relative path, ``<...>/<project>/<folder>/<resource>.xlf``
        text: Document text
    """

    path: str
    text: str


@dataclass(frozen=True, slots=True)
class TranslationPath:
    """Where the translations of one pack id were written.

    Attributes:
        id: ``vscode`` for the main pack, otherwise the extension id
        resource_name: Pack file path
    """

    id: str
    resource_name: str


@dataclass(frozen=True, slots=True)
class PackPreparationResult:
    """Prepared language packs.

    Attributes:
        files: Rendered pack files, main pack first
        translation_paths: Pack id -> file records, in the order of files
        main_pack: Main product pack
        extension_packs: Extension id -> pack
    """

    files: tuple[OutputFile, ...]
    translation_paths: tuple[TranslationPath, ...]
    main_pack: LanguagePack
    extension_packs: Mapping[str, LanguagePack]


def resolve_project(path: str) -> tuple[str, str]:
    """Derive (project, resource) from a translated XLF path.

    The project is the grandparent folder name. The resource is the file
    name without ``.xlf`` and without the normalization suffix. Externally
    partnered extensions always belong to the extensions project.

    Example:
        >>> resolve_project("de/vscode-extensions/ms-vscode.js-debug/ms-vscode.js-debug-new.xlf")
        ('vscode-extensions', 'ms-vscode.js-debug')
    """
    posix_path = PurePosixPath(path.replace("\\", "/"))
    project = posix_path.parent.parent.name
    resource = posix_path.name.removesuffix(".xlf").removesuffix(NORMALIZED_RESOURCE_SUFFIX)
    if resource in EXTERNAL_EXTENSIONS:
        project = EXTENSIONS_PROJECT
    return project, resource


def record_from_l10n(messages: Mapping[MessageKey, object]) -> dict[MessageKey, str]:
    """Flatten l10n entries to ``{key: message}``, sorted by key.

    Bare strings are kept; structured entries contribute their message only.
    """
    record: dict[MessageKey, str] = {}
    for key in sorted(messages):
        match messages[key]:
            case str(message):
                record[key] = message
            case L10nMessage(message=message):
                record[key] = message
            case {"message": str(message)}:
                record[key] = message
            case other:
                msg = f"Invalid translation entry for key {key}: {other!r}"
                raise TypeError(msg)
    return record


def _strip_segments(path: str, count: int) -> str:
    """Drop leading path segments; a missing separator keeps the remainder."""
    start = 0
    for _ in range(count):
        start = path.find("/", start) + 1
    return path[start:]


def render_pack(pack: LanguagePack, config: BuildConfig) -> str:
    """Render a pack as tab-indented JSON with the banner injected first."""
    document: dict[str, object] = {"": list(config.pack_banner)}
    document.update(pack.to_json())
    content = json.dumps(document, indent="\t", ensure_ascii=False)
    return content.replace("\n", config.line_ending.characters)


async def prepare_i18n_pack_files(
    inputs: Iterable[XlfInput],
    config: BuildConfig | None = None,
) -> PackPreparationResult:
    """Parse translated XLF documents and build the language pack files.

    Args:
        inputs: Translated XLF documents of one target language
        config: Build configuration (defaults to BuildConfig())

    Returns:
        PackPreparationResult with the main pack and one pack per extension

    Raises:
        PackPreparationError: If any document failed to parse; carries every failure
    """
    config = config if config is not None else BuildConfig()
    documents = list(inputs)
    routes = [resolve_project(document.path) for document in documents]
    for project, resource in routes:
        logger.info("Found %s: %s", project, resource)

    results = await asyncio.gather(
        *(parse_l10n_xlf(document.text) for document in documents),
        return_exceptions=True,
    )
    errors = [result for result in results if isinstance(result, BaseException)]
    if errors:
        raise PackPreparationError("Failed to prepare language packs", errors)

    main_pack = LanguagePack(config.pack_version)
    extension_packs: dict[str, LanguagePack] = {}
    for (project, resource), parsed in zip(routes, results, strict=True):
        assert not isinstance(parsed, BaseException)  # errors handled above
        for name, messages in parsed.items():
            if project == EXTENSIONS_PROJECT:
                pack = extension_packs.get(resource)
                if pack is None:
                    pack = extension_packs[resource] = LanguagePack(config.pack_version)
                # drop the 'extensions/<extension id>/' prefix
                pack.contents[_strip_segments(name, 2)] = record_from_l10n(messages)
            else:
                main_pack.contents[_strip_segments(name, 1)] = record_from_l10n(messages)

    files = [OutputFile.from_text(MAIN_PACK_FILE, render_pack(main_pack, config))]
    translation_paths = [TranslationPath(MAIN_PACK_ID, MAIN_PACK_FILE)]
    for extension_id, pack in extension_packs.items():
        resource_name = f"extensions/{extension_id}.i18n.json"
        files.append(OutputFile.from_text(resource_name, render_pack(pack, config)))
        translation_paths.append(TranslationPath(extension_id, resource_name))

    return PackPreparationResult(
        files=tuple(files),
        translation_paths=tuple(translation_paths),
        main_pack=main_pack,
        extension_packs=extension_packs,
    )
