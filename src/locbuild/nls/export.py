"""Export core bundle messages as XLF files for translation.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import posixpath

from locbuild.artifacts import OutputFile
from locbuild.catalog.model import BundleManifest
from locbuild.constants import NLS_METADATA_FILE
from locbuild.diagnostics import UnknownInputError
from locbuild.resources import Resource, get_resource
from locbuild.xliff.builder import XlfDocument

__all__ = ["create_xlf_files_for_core_bundle", "export_manifest"]

logger = logging.getLogger(__name__)


def export_manifest(manifest: BundleManifest) -> tuple[OutputFile, ...]:
    """Group manifest modules by resource and render one XLF file per resource.

    Each module is added as file ``src/<module>``; output paths are
    ``<project>/<resource name with '/' replaced by '_'>.xlf``.

    Raises:
        ClassificationError: If a module path matches no resource rule
    """
    documents: dict[Resource, XlfDocument] = {}
    for module in manifest.modules:
        resource = get_resource(module)
        xlf = documents.get(resource)
        if xlf is None:
            xlf = documents[resource] = XlfDocument(resource.project)
        xlf.add_file(f"src/{module}", manifest.keys[module], manifest.messages[module])

    outputs = []
    for resource, xlf in documents.items():
        logger.debug("Exporting %d messages of %s", xlf.unit_count, resource.name)
        path = f"{xlf.project}/{resource.file_stem}.xlf"
        outputs.append(OutputFile.from_text(path, xlf.serialize()))
    return tuple(outputs)


def create_xlf_files_for_core_bundle(path: str, text: str) -> tuple[OutputFile, ...]:
    """Export an ``nls.metadata.json`` file as XLF files.

    Args:
        path: Path of the metadata file
        text: Its JSON content

    Raises:
        UnknownInputError: If the file is not a core metadata file
        CatalogFormatError: If the metadata is not a bundle manifest
        CatalogMismatchError: If a module's keys and messages differ in length
        ClassificationError: If a module path matches no resource rule
    """
    if posixpath.basename(path.replace("\\", "/")) != NLS_METADATA_FILE:
        raise UnknownInputError(path, "is not a core meta data file.")
    return export_manifest(BundleManifest.from_json(json.loads(text)))
