"""
Unit tests for merging translations into the launcher template.
"""
from pathlib import Path

from launchedit_l10n.catalog import Catalog
from launchedit_l10n.desktop_merge import escape_value, merge, merge_lines
from launchedit_l10n.ftl import parse_resource

TEMPLATE = Path(__file__).resolve().parent.parent / "data" / "com.github.hyperchaotic.launchedit.desktop.in"


class TestEscapeValue:
    def test_control_characters(self):
        assert escape_value("a\nb\tc\rd") == "a\\nb\\tc\\rd"

    def test_backslash_first(self):
        assert escape_value("C:\\new") == "C:\\\\new"


class TestMergeLines:
    """Tests for merge_lines"""

    def test_translated_keys_expanded(self, bundled):
        lines = merge_lines(["[Desktop Entry]\n", "_Comment=app-comment\n"], bundled)
        assert lines[0] == "[Desktop Entry]\n"
        assert lines[1] == "Comment=Create and edit application launchers\n"
        assert "Comment[de]=Programmstarter erstellen und bearbeiten\n" in lines
        assert "Comment[sv]=Skapa och redigera programstartare\n" in lines
        assert "Comment[en]=Create and edit application launchers\n" not in lines

    def test_identical_translation_skipped(self, bundled):
        lines = merge_lines(["_Name=app-title\n"], bundled)
        assert lines == ["Name=LaunchEdit\n"]

    def test_locale_without_message_skipped(self):
        catalog = Catalog([
            parse_resource("greeting = Hello\nbye = Bye\n", "en"),
            parse_resource("greeting = Hej\n", "sv"),
        ])
        assert merge_lines(["_Comment=bye"], catalog) == ["Comment=Bye\n"]

    def test_multiline_value_escaped(self):
        catalog = Catalog([parse_resource("msg =\n    one\n    two\n", "en")])
        assert merge_lines(["_Comment=msg\n"], catalog) == ["Comment=one\\ntwo\n"]

    def test_plain_lines_copied(self, bundled):
        lines = ["Exec=launchedit %f\n", "# comment\n", "\n"]
        assert merge_lines(lines, bundled) == lines


class TestMerge:
    def test_shipped_template(self, bundled, tmp_path):
        out = tmp_path / "launchedit.desktop"
        merge(TEMPLATE, out, bundled)
        text = out.read_text(encoding="utf-8")
        assert "_Name" not in text
        assert "Name=LaunchEdit\n" in text
        assert "Keywords[sv]=skrivbord;startare;post;redigerare;\n" in text
        assert "Exec=launchedit %f\n" in text
