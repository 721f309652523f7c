"""Shared constants for the localization pipeline.

Constants are grouped by domain:
- Projects: translation project names XLF files are filed under
- File names: well-known input and output file names
- XLIFF: fixed document header and footer
- Language packs: pack version and machine-generated banner
- Extensions: externally partnered extensions

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Projects
    "EDITOR_PROJECT",
    "WORKBENCH_PROJECT",
    "EXTENSIONS_PROJECT",
    "SETUP_PROJECT",
    "SERVER_PROJECT",
    # File names
    "NLS_METADATA_FILE",
    "PACKAGE_NLS_FILE",
    "L10N_BUNDLE_FILE",
    "EXTENSION_MANIFEST_FILE",
    "ISL_SOURCE_FILE",
    "ISL_XLF_FILE",
    "ISL_DEFAULT_NAME",
    "MAIN_PACK_ID",
    "MAIN_PACK_FILE",
    # XLIFF
    "XLIFF_NAMESPACE",
    "XLIFF_HEADER",
    "XLIFF_FOOTER",
    "SOURCE_LANGUAGE",
    # Language packs
    "I18N_PACK_VERSION",
    "I18N_PACK_BANNER",
    "NORMALIZED_RESOURCE_SUFFIX",
    # Extensions
    "EXTERNAL_EXTENSIONS",
]

# ============================================================================
# PROJECTS
# ============================================================================

EDITOR_PROJECT: str = "vscode-editor"
WORKBENCH_PROJECT: str = "vscode-workbench"
EXTENSIONS_PROJECT: str = "vscode-extensions"
SETUP_PROJECT: str = "vscode-setup"
SERVER_PROJECT: str = "vscode-server"

# ============================================================================
# FILE NAMES
# ============================================================================

NLS_METADATA_FILE: str = "nls.metadata.json"
PACKAGE_NLS_FILE: str = "package.nls.json"
L10N_BUNDLE_FILE: str = "bundle.l10n.json"
EXTENSION_MANIFEST_FILE: str = "package.json"

ISL_SOURCE_FILE: str = "messages.en.isl"
ISL_XLF_FILE: str = "messages.xlf"
# The one installer script read without the ".en" language suffix
ISL_DEFAULT_NAME: str = "Default"

MAIN_PACK_ID: str = "vscode"
MAIN_PACK_FILE: str = "main.i18n.json"

# ============================================================================
# XLIFF
# ============================================================================

XLIFF_NAMESPACE: str = "urn:oasis:names:tc:xliff:document:1.2"
XLIFF_HEADER: tuple[str, ...] = (
    '<?xml version="1.0" encoding="utf-8"?>',
    f'<xliff version="1.2" xmlns="{XLIFF_NAMESPACE}">',
)
XLIFF_FOOTER: str = "</xliff>"
SOURCE_LANGUAGE: str = "en"

# ============================================================================
# LANGUAGE PACKS
# ============================================================================

I18N_PACK_VERSION: str = "1.0.0"
I18N_PACK_BANNER: tuple[str, ...] = (
    "--------------------------------------------------------------------------------------------",
    "Licensed under the MIT License. See License.txt in the project root for license information.",
    "--------------------------------------------------------------------------------------------",
    "Do not edit this file. It is machine generated.",
)
# Resources exported by the newer extension localization pipeline carry this suffix
NORMALIZED_RESOURCE_SUFFIX: str = "-new"

# ============================================================================
# EXTENSIONS
# ============================================================================

# Extensions built outside this repository; their sources are read from the build folder
# and their translations always belong to the extensions project.
EXTERNAL_EXTENSIONS: tuple[str, ...] = (
    "ms-vscode.js-debug",
    "ms-vscode.js-debug-companion",
    "ms-vscode.vscode-js-profile-table",
)
