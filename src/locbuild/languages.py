"""Target language descriptors.

A LanguageDescriptor names a target language three ways: its id (used in
generated file names), its folder name (used by installers) and an
optional translation id that overrides the id when locating external
translation resources.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from locbuild.catalog.types import LanguageId

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "DEFAULT_LANGUAGES",
    "EXTRA_LANGUAGES",
    "LanguageDescriptor",
    "describe_language",
    "get_babel_locale",
    "sort_languages",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageDescriptor:
    """A target language of the build.

    Attributes:
        id: Lower-cased language id (e.g., 'zh-tw')
        folder_name: Installer folder name (e.g., 'cht')
        translation_id: Id of the external translation resources, if it differs
    """

    id: LanguageId
    folder_name: str
    translation_id: str | None = None

    def __post_init__(self) -> None:
        """Validate the id.

        Raises:
            ValueError: If id is empty or contains path separators
        """
        if not self.id:
            msg = "Language id cannot be empty"
            raise ValueError(msg)
        if "/" in self.id or "\\" in self.id:
            msg = f"Path separators not allowed in language id: '{self.id}'"
            raise ValueError(msg)

    @property
    def resource_id(self) -> str:
        """Id used to locate external translation resources."""
        return self.translation_id or self.id


DEFAULT_LANGUAGES: tuple[LanguageDescriptor, ...] = (
    LanguageDescriptor("zh-tw", "cht", "zh-hant"),
    LanguageDescriptor("zh-cn", "chs", "zh-hans"),
    LanguageDescriptor("ja", "jpn"),
    LanguageDescriptor("ko", "kor"),
    LanguageDescriptor("de", "deu"),
    LanguageDescriptor("fr", "fra"),
    LanguageDescriptor("es", "esn"),
    LanguageDescriptor("ru", "rus"),
    LanguageDescriptor("it", "ita"),
)

# Languages requested by the community for non-stable builds
EXTRA_LANGUAGES: tuple[LanguageDescriptor, ...] = (
    LanguageDescriptor("pt-br", "ptb"),
    LanguageDescriptor("hu", "hun"),
    LanguageDescriptor("tr", "trk"),
)


def sort_languages(languages: Iterable[LanguageDescriptor]) -> tuple[LanguageDescriptor, ...]:
    """Order languages by id for deterministic processing."""
    return tuple(sorted(languages, key=lambda language: language.id))


@functools.lru_cache(maxsize=128)
def get_babel_locale(language_id: str) -> Locale:
    """Get a Babel Locale for a language id, with caching.

    Accepts build-style ids ('zh-tw', 'pt-br'); Babel normalizes the
    territory and script casing.

    Raises:
        babel.core.UnknownLocaleError: If the locale is not in CLDR
        ValueError: If the id is not a locale identifier
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(language_id.replace("-", "_"))


def describe_language(language: LanguageDescriptor) -> str:
    """Human-readable language name for log output.

    Example:
        >>> describe_language(LanguageDescriptor("de", "deu"))
        'German (de)'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        name = get_babel_locale(language.resource_id).get_display_name("en")
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No CLDR data for language %s: %s", language.id, e)
        return language.id
    return f"{name} ({language.id})" if name else language.id
