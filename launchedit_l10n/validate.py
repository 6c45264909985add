"""Consistency checks for the locale tables.

Checks:
1. every id the UI references exists in the base table
2. no id is defined twice in one table
3. placeholders match what callers pass, and translations keep the
   placeholders of the base string
4. translations neither miss base ids nor carry orphaned ones
5. term references resolve and never loop back to themselves
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from . import ftl
from .catalog import RESOURCE_NAME, Catalog
from .errors import L10nError
from .keys import ALL_KEYS, FIELD_CODE_KEYS, KEY_ARGS
from .languages import DEFAULT_LANGUAGE

log = logging.getLogger(__name__)

LIST_LIMIT = 15


@dataclass
class ValidationReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def extend(self, other: "ValidationReport"):
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def _preview(items: Iterable[str]) -> str:
    items = sorted(items)
    text = ", ".join(items[:LIST_LIMIT])
    if len(items) > LIST_LIMIT:
        text += f" ... and {len(items) - LIST_LIMIT} more"
    return text


def _looping_terms(terms) -> set[str]:
    """Terms that reach themselves through their term references."""
    refs = {name: ftl.term_references(text) & set(terms) for name, text in terms.items()}
    looping = set()
    for start in refs:
        seen = set()
        stack = list(refs[start])
        while stack:
            name = stack.pop()
            if name == start:
                looping.add(start)
                break
            if name not in seen:
                seen.add(name)
                stack.extend(refs[name])
    return looping


def validate_catalog(catalog: Catalog,
                     referenced: Iterable[str] = ALL_KEYS) -> ValidationReport:
    """Check the loaded tables against each other and the referenced ids."""
    report = ValidationReport()
    base = catalog.base
    base_keys = base.keys()
    referenced = set(referenced)

    missing = referenced - base_keys
    if missing:
        report.errors.append(
            f"[{base.locale}] Missing {len(missing)} referenced keys: {_preview(missing)}")
    unused = base_keys - referenced
    if unused:
        report.warnings.append(
            f"[{base.locale}] Keys not referenced by the application: {_preview(unused)}")

    for key in sorted(base_keys):
        text = base.messages[key]
        expected = KEY_ARGS.get(key, set())
        found = ftl.variables(text)
        if found != expected:
            report.errors.append(
                f"[{base.locale}] Variables of '{key}' are {sorted(found)}, "
                f"callers pass {sorted(expected)}")
        codes = FIELD_CODE_KEYS.get(key)
        if codes is not None and not codes <= ftl.field_codes(text):
            report.errors.append(
                f"[{base.locale}] '{key}' must show {sorted(codes)}")

    for loc in catalog.locales:
        table = catalog.tables[loc]
        for key, text in table.messages.items():
            for term in ftl.term_references(text) - set(table.terms):
                report.errors.append(f"[{loc}] '{key}' references unknown term -{term}")
        for term in sorted(_looping_terms(table.terms)):
            report.errors.append(f"[{loc}] term -{term} references itself")
        if loc == catalog.default_locale:
            continue

        keys = table.keys()
        missing = base_keys - keys
        if missing:
            report.errors.append(f"[{loc}] Missing {len(missing)} keys: {_preview(missing)}")
        extra = keys - base_keys
        if extra:
            report.warnings.append(f"[{loc}] Orphaned keys not in {base.locale}: {_preview(extra)}")

        for key in sorted(base_keys & keys):
            want = ftl.placeholders(base.messages[key])
            got = ftl.placeholders(table.messages[key])
            if want != got:
                report.errors.append(
                    f"[{loc}] Placeholder mismatch for '{key}': "
                    f"{base.locale} has {sorted(want)}, {loc} has {sorted(got)}")

    return report


def validate_directory(path, referenced: Iterable[str] = ALL_KEYS,
                       default_locale: str = DEFAULT_LANGUAGE) -> ValidationReport:
    """Parse every table under `path` and validate the result.

    Parse failures such as duplicate keys are reported instead of raised,
    so one broken table does not hide problems in the others.
    """
    report = ValidationReport()
    tables = []
    try:
        loc_dirs = sorted(Path(path).iterdir())
    except OSError as e:
        report.errors.append(f"Cannot read locale directory {path}: {e.strerror or e}")
        return report
    for loc_dir in loc_dirs:
        resource = loc_dir / RESOURCE_NAME
        if not resource.is_file():
            continue
        try:
            tables.append(ftl.load_resource(resource, loc_dir.name))
        except L10nError as e:
            report.errors.append(f"[{loc_dir.name}] {e}")

    try:
        catalog = Catalog(tables, default_locale)
    except L10nError as e:
        report.errors.append(str(e))
        return report
    report.extend(validate_catalog(catalog, referenced))
    log.debug("Validated %d tables: %d errors, %d warnings",
              len(tables), len(report.errors), len(report.warnings))
    return report
