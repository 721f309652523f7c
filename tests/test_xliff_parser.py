"""Tests for parsing translated XLIFF documents."""

import asyncio
import re

import pytest
from hypothesis import given

from locbuild.catalog import L10nMessage
from locbuild.diagnostics import XlfStructureError
from locbuild.xliff import XlfDocument, build_l10n_xlf, parse_l10n_xlf, parse_xlf, parse_xlf_text
from tests.helpers.xliff import translate
from tests.strategies import catalogs

TRANSLATED = """<?xml version="1.0" encoding="utf-8"?>
<xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
  <file original="src/vs/base/common/errors" source-language="en" target-language="DE">
    <body>
      <trans-unit id="ok">
        <source xml:lang="en">OK</source>
        <target>Einverstanden &amp; gut</target>
      </trans-unit>
      <trans-unit id="untranslated">
        <source xml:lang="en">Later</source>
      </trans-unit>
    </body>
  </file>
  <file original="src/vs/empty" source-language="en" target-language="de">
    <body>
      <trans-unit id="x"><source xml:lang="en">X</source></trans-unit>
    </body>
  </file>
</xliff>
"""


class TestParseXlfText:
    """Test parse_xlf_text()."""

    def test_translated_document(self) -> None:
        """Targets are decoded once, languages are lower-cased."""
        (parsed,) = parse_xlf_text(TRANSLATED)
        assert parsed.name == "src/vs/base/common/errors"
        assert parsed.language == "de"
        assert parsed.messages == {"ok": "Einverstanden & gut"}

    def test_files_without_messages_dropped(self) -> None:
        """A file whose units all lack targets is omitted."""
        names = [file.name for file in parse_xlf_text(TRANSLATED)]
        assert "src/vs/empty" not in names

    def test_double_encoded_text_decoded_once(self) -> None:
        """&amp;lt; in a target yields the literal text &lt;."""
        text = (
            '<xliff><file original="a" target-language="fr"><body>'
            '<trans-unit id="k"><target>&amp;lt;tag&amp;gt;</target></trans-unit>'
            "</body></file></xliff>"
        )
        assert parse_xlf_text(text)[0].messages == {"k": "&lt;tag&gt;"}

    def test_nested_markup_in_target_flattened(self) -> None:
        """Inline elements contribute their text."""
        text = (
            '<xliff><file original="a" target-language="fr"><body>'
            '<trans-unit id="k"><target>Cliquez <g id="1">ici</g></target></trans-unit>'
            "</body></file></xliff>"
        )
        assert parse_xlf_text(text)[0].messages == {"k": "Cliquez ici"}

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("<xliff", "Failed to parse XLIFF string"),
            ("<root><file/></root>", '"xliff" or "file" node'),
            ('<xliff version="1.2"></xliff>', '"xliff" or "file" node'),
            ('<xliff><file target-language="de"/></xliff>', "original attribute"),
            ('<xliff><file original="a"/></xliff>', "target-language"),
            (
                '<xliff><file original="a" target-language="de"><body>'
                "<trans-unit><target>T</target></trans-unit></body></file></xliff>",
                "missing the ID attribute",
            ),
        ],
    )
    def test_structural_errors(self, text: str, message: str) -> None:
        """Structural problems fail the whole parse."""
        with pytest.raises(XlfStructureError, match=re.escape(message)):
            parse_xlf_text(text)

    def test_unit_without_id_or_target_ignored(self) -> None:
        """A missing id only matters for translated units."""
        text = (
            '<xliff><file original="a" target-language="de"><body>'
            "<trans-unit><source>S</source></trans-unit>"
            '<trans-unit id="k"><target>T</target></trans-unit>'
            "</body></file></xliff>"
        )
        assert parse_xlf_text(text)[0].messages == {"k": "T"}

    def test_coroutine_form(self) -> None:
        """parse_xlf awaits to the same result."""
        assert asyncio.run(parse_xlf(TRANSLATED)) == parse_xlf_text(TRANSLATED)


class TestRoundTrip:
    """Property: exported messages come back unchanged once translated."""

    @given(catalogs())
    def test_export_then_parse(self, catalog: dict[str, dict[str, str]]) -> None:
        """Every exported message is recovered exactly."""
        xlf = XlfDocument("p")
        for path, entries in catalog.items():
            xlf.add_file(path, list(entries), list(entries.values()))
        parsed = parse_xlf_text(translate(xlf.serialize()))
        assert {file.name: dict(file.messages) for file in parsed} == catalog
        assert {file.language for file in parsed} == {"de"}

    def test_line_endings_preserved(self) -> None:
        """CRLF, LF and tabs inside messages come back byte for byte."""
        messages = {"k": "line1\r\nline2", "n": "a\nb", "r": "lone\rcr", "t": "a\tb"}
        xlf = XlfDocument("p")
        xlf.add_file("src/a", list(messages), list(messages.values()))
        parsed = parse_xlf_text(translate(xlf.serialize()))
        assert dict(parsed[0].messages) == messages


class TestL10nBridge:
    """Test build_l10n_xlf() and parse_l10n_xlf()."""

    def test_l10n_round_trip(self) -> None:
        """Comments become notes; translations come back as plain maps."""
        l10n_map = {
            "extensions/a.b/package": {"displayName": "Git"},
            "extensions/a.b/bundle": {"Hi {0}": L10nMessage("Hi {0}", ("greeting",))},
        }
        text = build_l10n_xlf(l10n_map)
        assert "<note>greeting</note>" in text
        result = asyncio.run(parse_l10n_xlf(translate(text, "fr")))
        assert result == {
            "extensions/a.b/bundle": {"Hi {0}": "Hi {0}"},
            "extensions/a.b/package": {"displayName": "Git"},
        }
