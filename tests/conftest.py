"""
Shared fixtures for the localization tests.
"""
import pytest

from launchedit_l10n.catalog import Catalog


EN_TABLE = """\
-brand = Editor

app-title = { -brand }
greeting = Hello { $name }
hint-exec = Run, e.g. app %F
only-en = English only
"""

SV_TABLE = """\
-brand = Redigerare

app-title = { -brand }
greeting = Hej { $name }
hint-exec = Kör, t.ex. app %F
"""


def write_tables(root, tables):
    for locale, text in tables.items():
        d = root / locale
        d.mkdir()
        (d / "launchedit.ftl").write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def locale_dir(tmp_path):
    """Small en + sv tables on disk"""
    root = tmp_path / "i18n_src"
    root.mkdir()
    return write_tables(root, {"en": EN_TABLE, "sv": SV_TABLE})


@pytest.fixture
def small_catalog(locale_dir):
    return Catalog.from_directory(locale_dir)


@pytest.fixture(scope="session")
def bundled():
    """Tables shipped with the package"""
    return Catalog.bundled()
