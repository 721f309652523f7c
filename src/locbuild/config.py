"""Build configuration for the localization pipeline.

Provides frozen dataclasses that carry every tunable of a pipeline run.
Constructing them with no arguments gives the standard repository layout.

Python 3.13+.
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass, replace

from locbuild.constants import I18N_PACK_BANNER, I18N_PACK_VERSION
from locbuild.enums import LineEnding

__all__ = ["BuildConfig", "InnoSetupConfig"]

_DEFAULT_FILE_HEADER = (
    "/*---------------------------------------------------------\n"
    " * Do not edit this file. It is machine generated.\n"
    " *--------------------------------------------------------*/"
)


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable configuration of a localization build.

    Attributes:
        language_directory: Directory holding the external translation
            repositories, relative to the file provider root.
        translation_file_template: Path of a language's translation file inside
            language_directory; ``{language}`` is replaced by the language's
            resource id.
        file_header: Text prepended to every generated runtime bundle.
        build_directory: Folder holding built extensions (``.build``).
        pack_version: Version written into language packs.
        pack_banner: Machine-generated notice injected first into every pack.
        line_ending: Line terminator of generated pack JSON.

    Example:
        >>> config = BuildConfig(language_directory="../loc/i18n")
        >>> config.translation_file("zh-hans")
        '../loc/i18n/vscode-language-pack-zh-hans/translations/main.i18n.json'
    """

    language_directory: str = "vscode-loc/i18n"
    translation_file_template: str = "vscode-language-pack-{language}/translations/main.i18n.json"
    file_header: str = _DEFAULT_FILE_HEADER
    build_directory: str = ".build"
    pack_version: str = I18N_PACK_VERSION
    pack_banner: tuple[str, ...] = I18N_PACK_BANNER
    line_ending: LineEnding = LineEnding.LF

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If the translation file template lacks ``{language}``
        """
        if "{language}" not in self.translation_file_template:
            msg = (
                "translation_file_template must contain '{language}' placeholder, "
                f"got: '{self.translation_file_template}'"
            )
            raise ValueError(msg)
        # Accept plain strings for the enum field
        object.__setattr__(self, "line_ending", LineEnding(self.line_ending))

    def translation_file(self, resource_id: str) -> str:
        """Provider path of the translation file for a language resource id."""
        relative = self.translation_file_template.replace("{language}", resource_id)
        return f"{self.language_directory.rstrip('/')}/{relative}"

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str], base: BuildConfig | None = None
    ) -> BuildConfig:
        """Overlay environment settings on a configuration.

        Recognized variables:
            LOCBUILD_LANGUAGE_DIR - language_directory
            LOCBUILD_BUILD_DIR    - build_directory
            LOCBUILD_LINE_ENDING  - line_ending ('lf' or 'crlf')

        Raises:
            ValueError: If LOCBUILD_LINE_ENDING has an unknown value
        """
        config = base if base is not None else cls()
        overrides: dict[str, object] = {}
        if language_directory := environ.get("LOCBUILD_LANGUAGE_DIR"):
            overrides["language_directory"] = language_directory
        if build_directory := environ.get("LOCBUILD_BUILD_DIR"):
            overrides["build_directory"] = build_directory
        if line_ending := environ.get("LOCBUILD_LINE_ENDING"):
            overrides["line_ending"] = LineEnding(line_ending.lower())
        return replace(config, **overrides) if overrides else config


@dataclass(frozen=True, slots=True)
class InnoSetupConfig:
    """Installer settings of one target language.

    Attributes:
        code_page: Windows code page the translated script is written in (e.g., 1252)
    """

    code_page: int

    def __post_init__(self) -> None:
        """Validate that Python has a codec for the code page.

        Raises:
            ValueError: If no ``cp<code_page>`` codec exists
        """
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            msg = f"Unsupported installer code page: {self.code_page}"
            raise ValueError(msg) from e

    @property
    def encoding(self) -> str:
        """Python codec name of the code page."""
        return f"cp{self.code_page}"
