"""
Unit tests for Catalog, Localizer and the fl() helper.
"""
import logging

import pytest

import launchedit_l10n.catalog as catalog_module
from launchedit_l10n import keys
from launchedit_l10n.catalog import Catalog, Localizer, fl, init
from launchedit_l10n.errors import MissingLocaleError
from launchedit_l10n.ftl import parse_resource


class TestCatalogLoading:
    """Tests for loading tables"""

    def test_from_directory(self, small_catalog):
        assert small_catalog.locales == ["en", "sv"]
        assert small_catalog.base.locale == "en"

    def test_directories_without_table_skipped(self, locale_dir):
        (locale_dir / "fr").mkdir()
        assert Catalog.from_directory(locale_dir).locales == ["en", "sv"]

    def test_missing_base_locale(self):
        sv = parse_resource("a = b\n", "sv")
        with pytest.raises(MissingLocaleError):
            Catalog([sv])

    def test_unknown_table(self, small_catalog):
        with pytest.raises(MissingLocaleError):
            small_catalog.table("fr")

    def test_bundled_tables(self, bundled):
        assert {"en", "sv", "de"} <= set(bundled.locales)
        assert keys.APP_TITLE in bundled.base


class TestLocalizer:
    """Tests for lookups through the fallback chain"""

    def test_requested_locale_used(self, small_catalog):
        loc = small_catalog.localizer(["sv_SE"])
        assert loc.languages == ["sv", "en"]
        assert loc.get("greeting", name="Ada") == "Hej Ada"

    def test_falls_back_to_base_locale(self, small_catalog):
        loc = small_catalog.localizer(["sv"])
        assert loc.get("only-en") == "English only"

    def test_terms_resolved_per_locale(self, small_catalog):
        assert small_catalog.localizer(["en"]).get("app-title") == "Editor"
        assert small_catalog.localizer(["sv"]).get("app-title") == "Redigerare"

    def test_field_codes_left_alone(self, small_catalog):
        assert small_catalog.localizer(["en"]).get("hint-exec") == "Run, e.g. app %F"

    def test_unknown_key_returns_key(self, small_catalog, caplog):
        loc = small_catalog.localizer(["en"])
        with caplog.at_level(logging.WARNING):
            assert loc.get("no-such-key") == "no-such-key"
        assert "no-such-key" in caplog.text

    def test_missing_argument_rendered_visibly(self, small_catalog, caplog):
        loc = small_catalog.localizer(["en"])
        with caplog.at_level(logging.WARNING):
            assert loc.get("greeting") == "Hello {$name}"
        assert "$name" in caplog.text

    def test_extra_arguments_ignored(self, small_catalog):
        loc = small_catalog.localizer(["en"])
        assert loc.get("greeting", name="Ada", unused=1) == "Hello Ada"

    def test_string_literal_placeable(self):
        table = parse_resource('brace = Use { "{" } here\n', "en")
        assert Localizer([table]).get("brace") == "Use { here"

    def test_unknown_term(self):
        table = parse_resource("a = About { -missing }\n", "en")
        assert Localizer([table]).get("a") == "About {-missing}"

    def test_term_loop_rendered_visibly(self, caplog):
        table = parse_resource("-a = { -b }\n-b = { -a }\napp-title = { -a }\n", "en")
        with caplog.at_level(logging.WARNING):
            assert Localizer([table]).get("app-title") == "{-a}"
        assert "refers to itself" in caplog.text

    def test_self_referencing_term(self):
        table = parse_resource("-a = x { -a }\napp-title = { -a }\n", "en")
        assert Localizer([table]).get("app-title") == "x {-a}"

    def test_term_used_twice_is_not_a_loop(self):
        table = parse_resource("-n = Edit\n-both = { -n } and { -n }\nt = { -both }\n", "en")
        assert Localizer([table]).get("t") == "Edit and Edit"

    def test_has(self, small_catalog):
        loc = small_catalog.localizer(["sv"])
        assert loc.has("only-en")
        assert not loc.has("nope")

    def test_empty_chain_rejected(self):
        with pytest.raises(MissingLocaleError):
            Localizer([])


class TestGlobalLocalizer:
    """Tests for init() and fl()"""

    @pytest.fixture(autouse=True)
    def reset(self, monkeypatch):
        monkeypatch.setattr(catalog_module, "_localizer", None)

    def test_init_then_fl(self, small_catalog):
        init(["sv"], small_catalog)
        assert fl("greeting", name="Ada") == "Hej Ada"

    def test_locale_switch(self, small_catalog):
        init(["sv"], small_catalog)
        init(["en"], small_catalog)
        assert fl("greeting", name="Ada") == "Hello Ada"

    def test_lazy_init_uses_environment(self, monkeypatch, tmp_path):
        monkeypatch.setattr(catalog_module, "load_config", lambda: {})
        monkeypatch.setenv("LANGUAGE", "de")
        assert fl(keys.MENU_SAVE) == "Speichern"

    def test_configured_language_wins(self, monkeypatch):
        monkeypatch.setattr(catalog_module, "load_config", lambda: {"language": "sv"})
        monkeypatch.setenv("LANGUAGE", "de")
        assert fl(keys.MENU_SAVE) == "Spara"
