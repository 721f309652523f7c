"""Translation sources of a single extension.

An extension contributes up to three kinds of sources, all gathered into
one ``resource path -> l10n bundle`` map keyed under ``extensions/<id>/``:

    package.nls.json   -> extensions/<id>/package
    nls.metadata.json  -> extensions/<id>/<relative dir>/<source file>
    bundle.l10n.json   -> extensions/<id>/bundle  (all bundle files merged)

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import posixpath
from collections.abc import Mapping
from typing import Any

from locbuild.catalog.model import L10nEntry, L10nMessage, parse_l10n_bundle, parse_translation_keys
from locbuild.catalog.types import MessageKey, ResourcePath
from locbuild.config import BuildConfig
from locbuild.constants import (
    EXTENSION_MANIFEST_FILE,
    EXTERNAL_EXTENSIONS,
    L10N_BUNDLE_FILE,
    NLS_METADATA_FILE,
    PACKAGE_NLS_FILE,
)
from locbuild.diagnostics import CatalogFormatError, CatalogMismatchError, UnknownInputError
from locbuild.enums import ExtensionSourceKind
from locbuild.loading import FileProvider

__all__ = [
    "L10nMap",
    "add_source",
    "collect_extension_l10n",
    "read_extension_id",
    "source_kind",
]

logger = logging.getLogger(__name__)

type L10nMap = dict[ResourcePath, dict[MessageKey, L10nEntry]]

_SOURCE_KINDS: Mapping[str, ExtensionSourceKind] = {
    PACKAGE_NLS_FILE: ExtensionSourceKind.PACKAGE,
    NLS_METADATA_FILE: ExtensionSourceKind.METADATA,
    L10N_BUNDLE_FILE: ExtensionSourceKind.BUNDLE,
}


def source_kind(path: str) -> ExtensionSourceKind:
    """Classify an extension nls file by its name.

    Raises:
        UnknownInputError: If the file is not a recognized nls file
    """
    kind = _SOURCE_KINDS.get(posixpath.basename(path))
    if kind is None:
        raise UnknownInputError(path, "is not a valid extension nls file")
    return kind


def read_extension_id(provider: FileProvider, folder: str) -> str:
    """Derive ``<publisher>.<name>`` from an extension's package.json.

    Raises:
        FileNotFoundError: If the folder has no package.json
        CatalogFormatError: If publisher or name is missing
    """
    manifest_path = posixpath.join(folder, EXTENSION_MANIFEST_FILE)
    manifest = json.loads(provider.read_text(manifest_path))
    publisher = manifest.get("publisher") if isinstance(manifest, dict) else None
    name = manifest.get("name") if isinstance(manifest, dict) else None
    if not isinstance(publisher, str) or not isinstance(name, str):
        msg = f"{manifest_path} must declare string 'publisher' and 'name' fields"
        raise CatalogFormatError(msg)
    return f"{publisher}.{name}"


def _metadata_entries(path: str, content: Any) -> dict[MessageKey, L10nEntry]:
    if not isinstance(content, dict):
        msg = f"Invalid message metadata in {path}"
        raise CatalogFormatError(msg)
    raw_keys = content.get("keys", [])
    messages = content.get("messages", [])
    if not isinstance(raw_keys, list):
        msg = f"Keys in {path} must be a list"
        raise CatalogFormatError(msg)
    if not isinstance(messages, list) or not all(isinstance(m, str) for m in messages):
        msg = f"Messages in {path} must be a list of strings"
        raise CatalogFormatError(msg)
    if len(raw_keys) != len(messages):
        raise CatalogMismatchError(len(raw_keys), len(messages), module=path)
    entries: dict[MessageKey, L10nEntry] = {}
    for key, message in zip(parse_translation_keys(raw_keys), messages, strict=True):
        if key.comment_lines:
            entries[key.real_key] = L10nMessage(message, key.comment_lines)
        else:
            entries[key.real_key] = message
    return entries


def add_source(
    l10n_map: L10nMap,
    extension_id: str,
    path: str,
    text: str,
    *,
    root: str,
) -> None:
    """Add one nls file to an extension's l10n map.

    Args:
        l10n_map: Map being accumulated (modified in place)
        extension_id: ``<publisher>.<name>``
        path: Path of the nls file
        text: Its JSON content
        root: Folder that metadata file directories are made relative to

    Raises:
        UnknownInputError: If the file is not a recognized nls file
        L10nBundleError: If a package or bundle file has malformed values
        CatalogFormatError: If a metadata file is malformed
    """
    kind = source_kind(path)
    data = json.loads(text)
    prefix = f"extensions/{extension_id}"
    match kind:
        case ExtensionSourceKind.PACKAGE:
            l10n_map[f"{prefix}/package"] = parse_l10n_bundle(data, source=path)
        case ExtensionSourceKind.METADATA:
            if not isinstance(data, dict):
                msg = f"Invalid message metadata file {path}"
                raise CatalogFormatError(msg)
            relative_dir = posixpath.relpath(posixpath.dirname(path), root)
            for source_file, content in data.items():
                directory = prefix if relative_dir == "." else f"{prefix}/{relative_dir}"
                l10n_map[f"{directory}/{source_file}"] = _metadata_entries(path, content)
        case ExtensionSourceKind.BUNDLE:
            bundle = l10n_map.setdefault(f"{prefix}/bundle", {})
            bundle.update(parse_l10n_bundle(data, source=path))


def collect_extension_l10n(
    extension_id: str,
    folder_name: str,
    provider: FileProvider,
    config: BuildConfig,
) -> L10nMap:
    """Gather all translation sources of one extension.

    Package and metadata files are read from the build folder. Bundle files
    are read from the source folder, except for externally built extensions
    whose sources only exist in the build folder.

    Returns:
        Resource path -> l10n bundle; resources without entries are omitted
    """
    build_root = f"{config.build_directory}/extensions/{folder_name}"
    if extension_id in EXTERNAL_EXTENSIONS:
        bundle_root = build_root
    else:
        bundle_root = f"extensions/{folder_name}"

    paths: list[tuple[str, str]] = []
    package_nls = f"{build_root}/{PACKAGE_NLS_FILE}"
    if provider.exists(package_nls):
        paths.append((package_nls, build_root))
    for path in provider.glob(build_root, f"**/{NLS_METADATA_FILE}"):
        paths.append((path, build_root))
    for path in provider.glob(bundle_root, f"**/{L10N_BUNDLE_FILE}"):
        paths.append((path, bundle_root))

    l10n_map: L10nMap = {}
    for path, root in paths:
        logger.debug("Reading %s for %s", path, extension_id)
        add_source(l10n_map, extension_id, path, provider.read_text(path), root=root)
    return {resource: entries for resource, entries in l10n_map.items() if entries}
