"""Core (nls) bundle processing.

Submodules:
    core_bundle - Resolve runtime bundles per language with fallback statistics
    export      - Export manifest messages as XLF files for translation

Python 3.13+.
"""

from .core_bundle import (
    CoreBundleResult,
    load_translations,
    process_nls_file,
    render_bundle,
    resolve_core_bundles,
)
from .export import create_xlf_files_for_core_bundle, export_manifest

__all__ = [
    "CoreBundleResult",
    "create_xlf_files_for_core_bundle",
    "export_manifest",
    "load_translations",
    "process_nls_file",
    "render_bundle",
    "resolve_core_bundles",
]
