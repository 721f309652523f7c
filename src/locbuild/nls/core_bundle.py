"""Resolve core runtime message bundles for every target language.

For each language, every manifest key is resolved against the language's
external translation file. Absent files, modules, or keys fall back to the
manifest default and are counted as missing; they are never errors. The
outcome is returned as a CoreBundleResult: generated bundle files plus
per-language statistics and any non-fatal bundle errors.

Resolution steps:
    1. Default messages per module from the manifest
    2. Per language (sorted by id): load the external translation map, if any
    3. Per module and key: external value, else default (+1 missing)
    4. Per bundle: render ``<bundle>.nls.<language>.js``

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import posixpath
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from locbuild.artifacts import OutputFile
from locbuild.catalog.model import BundleManifest
from locbuild.catalog.types import LanguageId, MessageKey, ModuleName
from locbuild.config import BuildConfig
from locbuild.constants import NLS_METADATA_FILE
from locbuild.diagnostics import BundleResolutionError, CatalogFormatError
from locbuild.languages import LanguageDescriptor, describe_language, sort_languages
from locbuild.loading import FileProvider
from locbuild.syntax import jsonc
from locbuild.syntax.entities import escape_string_literal

__all__ = [
    "CoreBundleResult",
    "load_translations",
    "process_nls_file",
    "render_bundle",
    "resolve_core_bundles",
]

logger = logging.getLogger(__name__)

type ModuleTranslations = Mapping[ModuleName, Mapping[MessageKey, object]]


@dataclass(frozen=True, slots=True)
class CoreBundleResult:
    """Outcome of resolving core bundles for a set of languages.

    Attributes:
        files: Generated ``<bundle>.nls.<language>.js`` files
        resolved: Language -> module -> resolved messages in manifest key order
        missing_counts: Language -> number of keys that fell back to defaults
        untranslated_languages: Languages for which no translation was found at all
        errors: Non-fatal errors (bundles referencing unresolved modules)
    """

    files: tuple[OutputFile, ...]
    resolved: Mapping[LanguageId, Mapping[ModuleName, tuple[str, ...]]]
    missing_counts: Mapping[LanguageId, int]
    untranslated_languages: tuple[LanguageId, ...]
    errors: tuple[BundleResolutionError, ...] = ()

    @property
    def has_errors(self) -> bool:
        """Check if any bundle could not be fully generated."""
        return len(self.errors) > 0


def load_translations(
    language: LanguageDescriptor,
    provider: FileProvider,
    config: BuildConfig,
) -> ModuleTranslations | None:
    """Load the external per-module translation map of a language.

    Args:
        language: Target language; its resource id selects the file
        provider: File access
        config: Locates the translation file

    Returns:
        Module -> {key: translation}, or None if the language has no translation file

    Raises:
        CatalogFormatError: If the file exists but has no ``contents`` object
        json.JSONDecodeError: If the file is not valid JSON (comments allowed)
    """
    path = config.translation_file(language.resource_id)
    if not provider.exists(path):
        return None
    data = jsonc.loads(provider.read_text(path))
    contents = data.get("contents") if isinstance(data, dict) else None
    if not isinstance(contents, dict):
        msg = f"Translation file {path} has no 'contents' object"
        raise CatalogFormatError(msg)
    return contents


def render_bundle(
    bundle: str,
    language_id: LanguageId,
    modules: Iterable[tuple[ModuleName, tuple[str, ...]]],
    file_header: str,
) -> str:
    """Render one runtime bundle as an AMD ``define`` module.

    Example:
        >>> print(render_bundle("b", "de", [("mod", ("Hallo",))], "// header"))
        // header
        define("b.nls.de", {
        	"mod": [
        		"Hallo"
        	]
        });
    """
    module_list = list(modules)
    lines = [file_header, f'define("{bundle}.nls.{language_id}", {{']
    for module_index, (module, messages) in enumerate(module_list):
        lines.append(f'\t"{module}": [')
        for index, message in enumerate(messages):
            separator = "," if index < len(messages) - 1 else ""
            lines.append(f'\t\t"{escape_string_literal(message)}"{separator}')
        lines.append("\t]," if module_index < len(module_list) - 1 else "\t]")
    lines.append("});")
    return "\n".join(lines)


def _resolve_language(
    manifest: BundleManifest,
    defaults: Mapping[ModuleName, Mapping[MessageKey, str]],
    translations: ModuleTranslations | None,
) -> tuple[dict[ModuleName, tuple[str, ...]], int, int]:
    """Resolve every module of one language.

    Returns:
        (module -> messages, missing count, translated count)
    """
    resolved: dict[ModuleName, tuple[str, ...]] = {}
    missing = 0
    translated = 0
    for module in manifest.modules:
        module_translations = translations.get(module) if translations else None
        if not isinstance(module_translations, Mapping):
            logger.debug(
                "No localized messages found for module %s. Using default messages.", module
            )
            module_translations = {}
        messages: list[str] = []
        for key in manifest.keys[module]:
            message = module_translations.get(key.real_key)
            if isinstance(message, str) and message:
                translated += 1
            else:
                logger.debug(
                    "No localized message found for key %s in module %s. Using default message.",
                    key.real_key,
                    module,
                )
                message = defaults[module][key.real_key]
                missing += 1
            messages.append(message)
        resolved[module] = tuple(messages)
    return resolved, missing, translated


def resolve_core_bundles(
    manifest: BundleManifest,
    languages: Iterable[LanguageDescriptor],
    provider: FileProvider,
    config: BuildConfig | None = None,
) -> CoreBundleResult:
    """Resolve and render core bundles for all target languages.

    Args:
        manifest: Default messages and bundle grouping
        languages: Target languages (processed sorted by id)
        provider: File access for external translation files
        config: Build configuration (defaults to BuildConfig())

    Returns:
        CoreBundleResult with generated files and statistics

    Raises:
        CatalogFormatError: If an existing translation file is malformed
    """
    config = config if config is not None else BuildConfig()
    defaults = manifest.default_messages()
    if not provider.is_dir(config.language_directory):
        logger.info("No localization repository found. Looking at %s", config.language_directory)

    files: list[OutputFile] = []
    resolved_all: dict[LanguageId, dict[ModuleName, tuple[str, ...]]] = {}
    missing_counts: dict[LanguageId, int] = {}
    untranslated: list[LanguageId] = []
    errors: list[BundleResolutionError] = []

    for language in sort_languages(languages):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Generating nls bundles for: %s", describe_language(language))
        translations = load_translations(language, provider, config)
        resolved, missing, translated = _resolve_language(manifest, defaults, translations)
        resolved_all[language.id] = resolved
        missing_counts[language.id] = missing
        if missing > 0 and translated == 0:
            untranslated.append(language.id)

        for bundle, bundle_modules in manifest.bundles.items():
            present: list[tuple[ModuleName, tuple[str, ...]]] = []
            for module in bundle_modules:
                if module not in resolved:
                    error = BundleResolutionError(bundle, module, language.id)
                    logger.error("%s", error)
                    errors.append(error)
                    continue
                present.append((module, resolved[module]))
            files.append(
                OutputFile.from_text(
                    f"{bundle}.nls.{language.id}.js",
                    render_bundle(bundle, language.id, present, config.file_header),
                )
            )

    for language_id, count in missing_counts.items():
        logger.info("%s has %d untranslated strings.", language_id, count)
    for language_id in untranslated:
        logger.warning(
            "No translations found for language %s. Using default language instead.", language_id
        )

    return CoreBundleResult(
        files=tuple(files),
        resolved=resolved_all,
        missing_counts=missing_counts,
        untranslated_languages=tuple(untranslated),
        errors=tuple(errors),
    )


def process_nls_file(
    path: str,
    text: str,
    languages: Iterable[LanguageDescriptor],
    provider: FileProvider,
    config: BuildConfig | None = None,
) -> CoreBundleResult | None:
    """Resolve core bundles from an ``nls.metadata.json`` file.

    Files with another name, or metadata that is not a bundle manifest,
    produce no result.

    Raises:
        CatalogFormatError: If the manifest is malformed
        CatalogMismatchError: If a module's keys and messages differ in length
    """
    if posixpath.basename(path.replace("\\", "/")) != NLS_METADATA_FILE:
        return None
    data = json.loads(text)
    if not BundleManifest.is_manifest(data):
        return None
    return resolve_core_bundles(BundleManifest.from_json(data), languages, provider, config)
