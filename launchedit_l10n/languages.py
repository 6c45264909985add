"""Work out which locales the user wants and which of ours fit best."""

import locale
import os
from typing import Iterable, Mapping

DEFAULT_LANGUAGE = "en"

# Display names for the locales shipped in launchedit_l10n/i18n
LANGUAGES = {
    "en": "English",
    "sv": "Swedish",
    "de": "German",
}


def normalize_locale(tag: str) -> str:
    """Turn a POSIX or BCP-47 tag into lang_COUNTRY@MODIFIER form."""
    tag = tag.strip().replace("-", "_")
    modifier = ""
    if "@" in tag:
        tag, modifier = tag.split("@", 1)
    tag = tag.split(".", 1)[0]
    if "_" in tag:
        lang, country = tag.split("_", 1)
        tag = f"{lang.lower()}_{country.upper()}"
    else:
        tag = tag.lower()
    return f"{tag}@{modifier}" if modifier else tag


def expand_locale(tag: str) -> list[str]:
    """Candidates for a locale, most specific first.

    Follows the Desktop Entry Specification matching order:
    lang_COUNTRY@MODIFIER, lang_COUNTRY, lang@MODIFIER, lang.
    """
    tag = normalize_locale(tag)
    base, _, modifier = tag.partition("@")
    lang, _, country = base.partition("_")

    candidates = []
    if country and modifier:
        candidates.append(f"{lang}_{country}@{modifier}")
    if country:
        candidates.append(f"{lang}_{country}")
    if modifier:
        candidates.append(f"{lang}@{modifier}")
    candidates.append(lang)
    return candidates


def requested_languages(environ: Mapping[str, str] | None = None) -> list[str]:
    """Languages requested by the environment, in order of preference."""
    env = os.environ if environ is None else environ
    raw: list[str] = []

    language = env.get("LANGUAGE", "")
    if language:
        raw.extend(language.split(":"))
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        if env.get(var):
            raw.append(env[var])
            break

    if not raw and environ is None:
        try:
            loc = locale.getlocale()[0]  # e.g. 'sv_SE'
        except ValueError:
            loc = None
        if loc:
            raw.append(loc)

    langs: list[str] = []
    for tag in raw:
        if not tag or tag.split(".")[0] in ("C", "POSIX"):
            continue
        tag = normalize_locale(tag)
        if tag not in langs:
            langs.append(tag)
    return langs


def negotiate(requested: Iterable[str], available: Iterable[str],
              default: str = DEFAULT_LANGUAGE) -> list[str]:
    """Order the available locales by how well they match the request.

    The default locale closes the list when it is available and was not
    requested explicitly.
    """
    by_norm = {normalize_locale(a): a for a in available}
    chosen: list[str] = []

    def add(loc):
        if loc not in chosen:
            chosen.append(loc)

    for tag in requested:
        matched = False
        for candidate in expand_locale(tag):
            if candidate in by_norm:
                add(by_norm[candidate])
                matched = True
        if not matched:
            # 'sv' also accepts 'sv_SE' when that is all we have
            lang = expand_locale(tag)[-1]
            for norm, loc in sorted(by_norm.items()):
                if expand_locale(norm)[-1] == lang:
                    add(loc)

    if normalize_locale(default) in by_norm:
        add(by_norm[normalize_locale(default)])
    return chosen


def best_localized(values: Mapping[str | None, str],
                   languages: Iterable[str]) -> str | None:
    """Pick the value whose locale best fits the language preference.

    `values` maps locale tags to text; the None key holds the unlocalized
    value used when no locale matches.
    """
    localized = {normalize_locale(k): v for k, v in values.items() if k}
    for tag in languages:
        for candidate in expand_locale(tag):
            if candidate in localized:
                return localized[candidate]
    return values.get(None)
