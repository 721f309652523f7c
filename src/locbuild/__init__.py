"""locbuild - build-time localization pipeline.

Extracts source message catalogs into XLIFF 1.2 for translators,
reconciles returned translations against the default catalogs, and emits
localized artifacts: runtime message bundles, language packs and
installer scripts.

Public API:
    XlfDocument - Deterministic XLIFF 1.2 builder
    parse_xlf - Parse translated XLIFF into per-file message maps
    get_resource - Classify a module path into its XLF resource bucket
    resolve_core_bundles - Per-language runtime bundles with fallback statistics
    create_xlf_files_for_extensions - Concurrent per-extension XLF export
    prepare_i18n_pack_files - Language packs from translated XLF
    prepare_isl_files - Translated installer scripts from translated XLF

Exceptions:
    LocalizationError - Base exception class

Submodules:
    locbuild.catalog - Translation keys, manifests and units
    locbuild.syntax - Entity codec, string-literal escaping, JSON comments
    locbuild.xliff - XLIFF builder, parser and l10n bridge
    locbuild.nls - Core bundle resolution and export
    locbuild.extensions - Extension source aggregation
    locbuild.packs - Language pack preparation
    locbuild.isl - Installer script translation
    locbuild.loading - File provider capability
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .artifacts import OutputFile
from .catalog import BundleManifest
from .config import BuildConfig, InnoSetupConfig
from .diagnostics import LocalizationError
from .extensions import create_xlf_files_for_extensions
from .isl import prepare_isl_files
from .languages import DEFAULT_LANGUAGES, EXTRA_LANGUAGES, LanguageDescriptor
from .loading import FileProvider, MemoryFileProvider, PathFileProvider
from .nls import resolve_core_bundles
from .packs import prepare_i18n_pack_files
from .resources import Resource, get_resource
from .xliff import XlfDocument, parse_xlf

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("locbuild")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LANGUAGES",
    "EXTRA_LANGUAGES",
    "BuildConfig",
    "BundleManifest",
    "FileProvider",
    "InnoSetupConfig",
    "LanguageDescriptor",
    "LocalizationError",
    "MemoryFileProvider",
    "OutputFile",
    "PathFileProvider",
    "Resource",
    "XlfDocument",
    "__version__",
    "create_xlf_files_for_extensions",
    "get_resource",
    "parse_xlf",
    "prepare_i18n_pack_files",
    "prepare_isl_files",
    "resolve_core_bundles",
]
