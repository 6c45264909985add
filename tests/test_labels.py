"""
Unit tests for UI labels: entry types, pickers, pages and file names.
"""
import pytest

from launchedit_l10n import keys
from launchedit_l10n.labels import (
    EntryType,
    NavPage,
    PickKind,
    nav_pages,
    suggested_filename,
    window_title,
)


@pytest.fixture
def en(bundled):
    return bundled.localizer(["en"])


@pytest.fixture
def sv(bundled):
    return bundled.localizer(["sv"])


@pytest.fixture
def de(bundled):
    return bundled.localizer(["de"])


class TestEntryType:
    def test_parse(self):
        assert EntryType.parse("Application") is EntryType.APPLICATION
        assert EntryType.parse("Link") is EntryType.LINK
        assert EntryType.parse("Directory") is EntryType.DIRECTORY

    def test_parse_is_case_sensitive(self):
        assert EntryType.parse("application") is None
        assert EntryType.parse(None) is None

    def test_extension(self):
        assert EntryType.DIRECTORY.extension == ".directory"
        assert EntryType.APPLICATION.extension == ".desktop"
        assert EntryType.LINK.extension == ".desktop"

    def test_default_names(self, en):
        assert en.get(EntryType.APPLICATION.default_name_key) == "My Application"
        assert en.get(EntryType.LINK.default_name_key) == "My Link"
        assert en.get(EntryType.DIRECTORY.default_name_key) == "My Directory"

    def test_all_keys_in_namespace(self):
        for member in EntryType:
            for key in (member.default_name_key, member.filename_key,
                        member.name_hint_key, member.menu_key):
                assert key in keys.ALL_KEYS


class TestPickKind:
    def test_executable_pickers_share_title(self):
        assert PickKind.EXECUTABLE.title_key == PickKind.TRY_EXECUTABLE.title_key
        assert PickKind.EXECUTABLE.title_key == keys.SELECT_EXECUTABLE

    def test_titles(self, sv):
        assert sv.get(PickKind.DESKTOP_FILE.title_key) == "Välj en skrivbordsfil"
        assert sv.get(PickKind.ICON_FILE.title_key) == "Välj en ikon"

    def test_directory_has_no_filter(self):
        assert PickKind.DIRECTORY.filter_name_key is None
        assert PickKind.ICON_FILE.filter_name_key == keys.NAME_IMAGES


class TestNavPages:
    def test_application_gets_every_page(self):
        assert nav_pages(EntryType.APPLICATION) == [
            NavPage.GENERAL, NavPage.MIMETYPES, NavPage.ACTIONS,
            NavPage.CUSTOM, NavPage.ADVANCED,
        ]

    def test_other_types_get_general_only(self):
        assert nav_pages(EntryType.LINK) == [NavPage.GENERAL]
        assert nav_pages(EntryType.DIRECTORY) == [NavPage.GENERAL]
        assert nav_pages(None) == [NavPage.GENERAL]


class TestSuggestedFilename:
    def test_from_entry_name(self, en):
        assert suggested_filename("Text Editor", EntryType.APPLICATION, en) == "text-editor.desktop"

    def test_directory_extension(self, en):
        assert suggested_filename("My Games", EntryType.DIRECTORY, en) == "my-games.directory"

    def test_localized_default(self, sv):
        assert suggested_filename(None, EntryType.LINK, sv) == "min-lank.desktop"
        assert suggested_filename("", EntryType.APPLICATION, sv) == "mitt-program.desktop"


class TestWindowTitle:
    def test_plain(self, en):
        assert window_title(en) == "LaunchEdit"

    def test_with_page(self, de):
        assert window_title(de, NavPage.ADVANCED) == "LaunchEdit — Erweitert"

