"""Tests for language pack preparation from translated XLF."""

import asyncio
import json

import pytest

from locbuild.catalog import L10nMessage, LanguagePack
from locbuild.config import BuildConfig
from locbuild.constants import I18N_PACK_BANNER
from locbuild.diagnostics import PackPreparationError, XlfStructureError
from locbuild.enums import LineEnding
from locbuild.packs import (
    TranslationPath,
    XlfInput,
    prepare_i18n_pack_files,
    record_from_l10n,
    render_pack,
    resolve_project,
)
from locbuild.xliff import XlfDocument, build_l10n_xlf
from tests.helpers.xliff import translate


def workbench_xlf() -> str:
    """Translated core document with one module."""
    xlf = XlfDocument("vscode-workbench")
    xlf.add_file("src/vs/workbench/browser/actions", ["close", "open"], ["Close", "Open"])
    return translate(xlf.serialize())


def git_xlf() -> str:
    """Translated extension document."""
    text = build_l10n_xlf(
        {
            "extensions/vscode.git/package": {"displayName": "Git"},
            "extensions/vscode.git/dist/main": {"k": L10nMessage("Commit", ("verb",))},
        }
    )
    return translate(text)


class TestResolveProject:
    """Test resolve_project()."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("vscode-workbench/de/vs_workbench.xlf", ("vscode-workbench", "vs_workbench")),
            ("vscode-extensions/de/vscode.git-new.xlf", ("vscode-extensions", "vscode.git")),
            (
                "vscode-editor/de/ms-vscode.js-debug.xlf",
                ("vscode-extensions", "ms-vscode.js-debug"),
            ),
            ("de\\vscode-setup\\x\\messages.xlf", ("vscode-setup", "messages")),
        ],
    )
    def test_routes(self, path: str, expected: tuple[str, str]) -> None:
        """Project comes from the grandparent folder; suffixes are stripped."""
        assert resolve_project(path) == expected


class TestRecordFromL10n:
    """Test record_from_l10n()."""

    def test_flattens_and_sorts(self) -> None:
        """Structured entries keep only their message; keys are sorted."""
        record = record_from_l10n(
            {"b": "B", "a": L10nMessage("A", ("c",)), "c": {"message": "C", "comment": []}}
        )
        assert list(record.items()) == [("a", "A"), ("b", "B"), ("c", "C")]

    def test_rejects_other_values(self) -> None:
        """Values without a message are invalid."""
        with pytest.raises(TypeError, match="Invalid translation entry for key x"):
            record_from_l10n({"x": 1})


class TestRenderPack:
    """Test render_pack()."""

    def test_banner_first(self) -> None:
        """The banner is injected under the empty key before everything else."""
        pack = LanguagePack("1.0.0", {"vs/base": {"ok": "OK"}})
        text = render_pack(pack, BuildConfig())
        assert list(json.loads(text)) == ["", "version", "contents"]
        assert json.loads(text)[""] == list(I18N_PACK_BANNER)
        assert text.startswith('{\n\t"": [')

    def test_line_endings_and_unicode(self) -> None:
        """Configured line endings are used and text is not ASCII-escaped."""
        pack = LanguagePack("1.0.0", {"vs/base": {"ok": "Schließen"}})
        text = render_pack(pack, BuildConfig(line_ending=LineEnding.CRLF))
        assert "\r\n\t" in text
        assert "\n" not in text.replace("\r\n", "")
        assert "Schließen" in text


class TestPrepareI18nPackFiles:
    """Test prepare_i18n_pack_files()."""

    def test_main_and_extension_packs(self) -> None:
        """Core documents feed the main pack, extension documents their own pack."""
        inputs = [
            XlfInput("vscode-workbench/de/vs_workbench.xlf", workbench_xlf()),
            XlfInput("vscode-extensions/de/vscode.git.xlf", git_xlf()),
        ]
        result = asyncio.run(prepare_i18n_pack_files(inputs))

        assert [file.path for file in result.files] == [
            "main.i18n.json",
            "extensions/vscode.git.i18n.json",
        ]
        assert result.translation_paths == (
            TranslationPath("vscode", "main.i18n.json"),
            TranslationPath("vscode.git", "extensions/vscode.git.i18n.json"),
        )
        assert result.main_pack.contents == {
            "vs/workbench/browser/actions": {"close": "Close", "open": "Open"}
        }
        assert result.extension_packs["vscode.git"].contents == {
            "dist/main": {"k": "Commit"},
            "package": {"displayName": "Git"},
        }
        main = json.loads(result.files[0].text())
        assert main["version"] == "1.0.0"
        assert main["contents"]["vs/workbench/browser/actions"]["close"] == "Close"

    def test_no_inputs_still_writes_main_pack(self) -> None:
        """An empty batch yields an empty main pack."""
        result = asyncio.run(prepare_i18n_pack_files([]))
        assert [file.path for file in result.files] == ["main.i18n.json"]
        assert result.main_pack.contents == {}

    def test_any_failure_fails_all(self) -> None:
        """One malformed document aborts preparation with every error collected."""
        inputs = [
            XlfInput("vscode-workbench/de/vs_workbench.xlf", workbench_xlf()),
            XlfInput("vscode-workbench/de/broken.xlf", "<xliff"),
            XlfInput("vscode-workbench/de/empty.xlf", "<xliff></xliff>"),
        ]
        with pytest.raises(PackPreparationError) as exc_info:
            asyncio.run(prepare_i18n_pack_files(inputs))
        assert len(exc_info.value.errors) == 2
        assert all(isinstance(error, XlfStructureError) for error in exc_info.value.errors)
        assert "(2 failed)" in str(exc_info.value)
