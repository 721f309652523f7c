"""Language pack preparation from translated XLF documents.

Python 3.13+.
"""

from .i18n_pack import (
    PackPreparationResult,
    TranslationPath,
    XlfInput,
    prepare_i18n_pack_files,
    record_from_l10n,
    render_pack,
    resolve_project,
)

__all__ = [
    "PackPreparationResult",
    "TranslationPath",
    "XlfInput",
    "prepare_i18n_pack_files",
    "record_from_l10n",
    "render_pack",
    "resolve_project",
]
