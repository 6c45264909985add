"""Locale tables, fallback lookup and the process-wide fl() helper."""

import logging
from importlib import resources
from pathlib import Path
from typing import Iterable

from .config import load_config, preferred_languages
from .errors import MissingLocaleError
from .ftl import PLACEABLE_RE, LocaleTable, load_resource, parse_resource
from .languages import DEFAULT_LANGUAGE, negotiate, requested_languages

log = logging.getLogger(__name__)

DOMAIN = "launchedit"
RESOURCE_NAME = f"{DOMAIN}.ftl"


class Catalog:
    """Every locale table known to the application."""

    def __init__(self, tables: Iterable[LocaleTable],
                 default_locale: str = DEFAULT_LANGUAGE):
        self.tables = {t.locale: t for t in tables}
        self.default_locale = default_locale
        if default_locale not in self.tables:
            raise MissingLocaleError(
                f"base locale {default_locale!r} has no table")

    @classmethod
    def from_directory(cls, path, default_locale: str = DEFAULT_LANGUAGE) -> "Catalog":
        """Load <path>/<locale>/launchedit.ftl for every locale directory."""
        tables = []
        for loc_dir in sorted(Path(path).iterdir()):
            ftl = loc_dir / RESOURCE_NAME
            if loc_dir.is_dir() and ftl.is_file():
                tables.append(load_resource(ftl, loc_dir.name))
        log.debug("Loaded %d locale tables from %s", len(tables), path)
        return cls(tables, default_locale)

    @classmethod
    def bundled(cls) -> "Catalog":
        """Load the tables shipped with the package."""
        root = resources.files(__package__).joinpath("i18n")
        tables = []
        for loc_dir in sorted(root.iterdir(), key=lambda p: p.name):
            ftl = loc_dir.joinpath(RESOURCE_NAME)
            if loc_dir.is_dir() and ftl.is_file():
                tables.append(parse_resource(
                    ftl.read_text(encoding="utf-8"), loc_dir.name,
                    f"{loc_dir.name}/{RESOURCE_NAME}"))
        return cls(tables)

    @property
    def locales(self) -> list[str]:
        return sorted(self.tables)

    @property
    def base(self) -> LocaleTable:
        return self.tables[self.default_locale]

    def table(self, locale: str) -> LocaleTable:
        try:
            return self.tables[locale]
        except KeyError:
            raise MissingLocaleError(f"no table for locale {locale!r}") from None

    def localizer(self, requested: Iterable[str] | None = None) -> "Localizer":
        if requested is None:
            requested = requested_languages()
        chain = negotiate(list(requested), self.tables, self.default_locale)
        return Localizer([self.tables[loc] for loc in chain])


class Localizer:
    """Looks keys up through a chain of tables, first match wins."""

    def __init__(self, chain: list[LocaleTable]):
        if not chain:
            raise MissingLocaleError("empty fallback chain")
        self.chain = chain

    @property
    def language(self) -> str:
        return self.chain[0].locale

    @property
    def languages(self) -> list[str]:
        return [t.locale for t in self.chain]

    def has(self, key: str) -> bool:
        return any(key in t for t in self.chain)

    def get(self, key: str, **args) -> str:
        for table in self.chain:
            text = table.get(key)
            if text is not None:
                return self._resolve(text, table, key, args)
        log.warning("No localization for id %r in %s", key, self.languages)
        return key

    __call__ = get

    def _resolve(self, text: str, table: LocaleTable, key: str, args: dict,
                 expanding: frozenset = frozenset()) -> str:
        def repl(m):
            if m.group("var"):
                name = m.group("var")
                if name not in args:
                    log.warning("Missing argument $%s for %r", name, key)
                    return f"{{${name}}}"
                return str(args[name])
            if m.group("term"):
                name = m.group("term")
                if name not in table.terms:
                    log.warning("Unknown term -%s in %r (%s)", name, key, table.locale)
                    return f"{{-{name}}}"
                if name in expanding:
                    log.warning("Term -%s refers to itself in %r (%s)", name, key, table.locale)
                    return f"{{-{name}}}"
                return self._resolve(table.terms[name], table, key, args,
                                     expanding | {name})
            return m.group("lit")

        return PLACEABLE_RE.sub(repl, text)


_localizer: Localizer | None = None


def init(requested: Iterable[str] | None = None,
         catalog: Catalog | None = None) -> Localizer:
    """Install the process-wide localizer, at startup or on a locale switch."""
    global _localizer
    if requested is None:
        requested = preferred_languages(load_config(), requested_languages())
    catalog = catalog or Catalog.bundled()
    _localizer = catalog.localizer(requested)
    log.info("Localization initialized: %s", ", ".join(_localizer.languages))
    return _localizer


def current() -> Localizer:
    if _localizer is None:
        return init()
    return _localizer


def fl(key: str, **args) -> str:
    """Localized string for `key` from the process-wide localizer."""
    return current().get(key, **args)
