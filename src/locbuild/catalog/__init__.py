"""Translation catalog data model.

Submodules:
    types - PEP 695 type aliases (MessageKey, ModuleName, ResourcePath, LanguageId)
    model - Tagged key variants, BundleManifest, l10n bundle entries,
            TranslationUnit and LanguagePack

Python 3.13+. Zero external dependencies.
"""

from .model import (
    BareKey,
    BundleManifest,
    CommentedKey,
    L10nEntry,
    L10nMessage,
    LanguagePack,
    TranslationKey,
    TranslationUnit,
    parse_l10n_bundle,
    parse_translation_key,
    parse_translation_keys,
)
from .types import LanguageId, MessageKey, ModuleName, ResourcePath

__all__ = [
    "BareKey",
    "BundleManifest",
    "CommentedKey",
    "L10nEntry",
    "L10nMessage",
    "LanguageId",
    "LanguagePack",
    "MessageKey",
    "ModuleName",
    "ResourcePath",
    "TranslationKey",
    "TranslationUnit",
    "parse_l10n_bundle",
    "parse_translation_key",
    "parse_translation_keys",
]
