"""Tests for language descriptors and build configuration."""

import dataclasses

import pytest

from locbuild.config import BuildConfig, InnoSetupConfig
from locbuild.enums import LineEnding
from locbuild.languages import (
    DEFAULT_LANGUAGES,
    EXTRA_LANGUAGES,
    LanguageDescriptor,
    describe_language,
    get_babel_locale,
    sort_languages,
)


class TestLanguageDescriptor:
    """Test LanguageDescriptor."""

    def test_resource_id_prefers_translation_id(self) -> None:
        """The translation id overrides the id for external resources."""
        assert LanguageDescriptor("zh-tw", "cht", "zh-hant").resource_id == "zh-hant"
        assert LanguageDescriptor("de", "deu").resource_id == "de"

    @pytest.mark.parametrize("language_id", ["", "de/x", "de\\x"])
    def test_invalid_id_rejected(self, language_id: str) -> None:
        """Empty ids and path separators are refused."""
        with pytest.raises(ValueError, match="language id|Language id"):
            LanguageDescriptor(language_id, "x")

    def test_frozen(self) -> None:
        """Descriptors are immutable."""
        language = LanguageDescriptor("de", "deu")
        with pytest.raises(dataclasses.FrozenInstanceError):
            language.id = "fr"  # type: ignore[misc]

    def test_language_tables(self) -> None:
        """Default and extra language ids are unique across both tables."""
        ids = [language.id for language in (*DEFAULT_LANGUAGES, *EXTRA_LANGUAGES)]
        assert len(ids) == len(set(ids)) == 12
        assert all(language.id == language.id.lower() for language in DEFAULT_LANGUAGES)

    def test_sort_languages(self) -> None:
        """Languages are ordered by id."""
        ordered = sort_languages(DEFAULT_LANGUAGES)
        assert [language.id for language in ordered] == sorted(
            language.id for language in DEFAULT_LANGUAGES
        )


class TestDescribeLanguage:
    """Test Babel-backed display names."""

    def test_known_language(self) -> None:
        """CLDR languages are named in English."""
        assert describe_language(LanguageDescriptor("de", "deu")) == "German (de)"

    def test_translation_id_used_for_lookup(self) -> None:
        """Script-qualified resource ids resolve through Babel."""
        description = describe_language(LanguageDescriptor("zh-tw", "cht", "zh-hant"))
        assert description.startswith("Chinese")
        assert description.endswith("(zh-tw)")

    def test_unknown_language_falls_back_to_id(self) -> None:
        """Ids without CLDR data are described by themselves."""
        assert describe_language(LanguageDescriptor("qq", "qqq")) == "qq"

    def test_babel_locale_cached(self) -> None:
        """Repeated lookups return the same Locale object."""
        assert get_babel_locale("pt-br") is get_babel_locale("pt-br")
        assert str(get_babel_locale("pt-br")) == "pt_BR"


class TestBuildConfig:
    """Test BuildConfig."""

    def test_defaults(self) -> None:
        """Default configuration describes the standard layout."""
        config = BuildConfig()
        assert config.build_directory == ".build"
        assert config.line_ending is LineEnding.LF
        assert config.translation_file("de") == (
            "vscode-loc/i18n/vscode-language-pack-de/translations/main.i18n.json"
        )

    def test_template_requires_placeholder(self) -> None:
        """A template without {language} is rejected."""
        with pytest.raises(ValueError, match="placeholder"):
            BuildConfig(translation_file_template="main.i18n.json")

    def test_line_ending_string_coerced(self) -> None:
        """Plain strings are accepted for the line ending."""
        config = BuildConfig(line_ending="crlf")  # type: ignore[arg-type]
        assert config.line_ending is LineEnding.CRLF

    def test_from_environ(self) -> None:
        """Recognized variables override fields; others are ignored."""
        config = BuildConfig.from_environ(
            {
                "LOCBUILD_LANGUAGE_DIR": "../loc/i18n",
                "LOCBUILD_LINE_ENDING": "CRLF",
                "UNRELATED": "x",
            }
        )
        assert config.language_directory == "../loc/i18n"
        assert config.line_ending.characters == "\r\n"
        assert config.build_directory == ".build"

    def test_from_environ_without_overrides_returns_base(self) -> None:
        """An empty environment leaves the base untouched."""
        base = BuildConfig(build_directory="out")
        assert BuildConfig.from_environ({}, base) is base

    def test_from_environ_invalid_line_ending(self) -> None:
        """Unknown line endings are rejected."""
        with pytest.raises(ValueError, match="cr"):
            BuildConfig.from_environ({"LOCBUILD_LINE_ENDING": "cr"})


class TestInnoSetupConfig:
    """Test InnoSetupConfig."""

    def test_encoding(self) -> None:
        """The code page maps to a Python codec name."""
        assert InnoSetupConfig(1252).encoding == "cp1252"

    def test_unknown_code_page_rejected(self) -> None:
        """Code pages without a codec fail at construction."""
        with pytest.raises(ValueError, match="Unsupported installer code page: 4242"):
            InnoSetupConfig(4242)
