"""Merge locale tables into a .desktop.in template to produce a .desktop file."""

import logging
import re
from pathlib import Path

from .catalog import Catalog

log = logging.getLogger(__name__)

TRANSLATABLE_RE = re.compile(r"^_([A-Za-z0-9-]+)=(.*)$")


def escape_value(value: str) -> str:
    """Escape a string value for a desktop entry line."""
    return (value.replace("\\", "\\\\")
            .replace("\n", "\\n")
            .replace("\t", "\\t")
            .replace("\r", "\\r"))


def merge_lines(lines: list[str], catalog: Catalog) -> list[str]:
    """Expand `_Key=message-id` lines into Key= and Key[locale]= lines."""
    out = []
    base = catalog.localizer([catalog.default_locale])
    for line in lines:
        m = TRANSLATABLE_RE.match(line.strip())
        if not m:
            out.append(line if line.endswith("\n") else line + "\n")
            continue

        key, msg_id = m.group(1), m.group(2).strip()
        if msg_id not in catalog.base:
            log.warning("Template key %s refers to unknown id %r", key, msg_id)
        base_text = base.get(msg_id)
        out.append(f"{key}={escape_value(base_text)}\n")

        for loc in catalog.locales:
            if loc == catalog.default_locale or msg_id not in catalog.tables[loc]:
                continue
            text = catalog.localizer([loc]).get(msg_id)
            if text and text != base_text:
                out.append(f"{key}[{loc}]={escape_value(text)}\n")
    return out


def merge(template, output, catalog: Catalog):
    """Read .desktop.in, merge translations, write .desktop."""
    lines = Path(template).read_text(encoding="utf-8").splitlines(keepends=True)
    merged = merge_lines(lines, catalog)
    Path(output).write_text("".join(merged), encoding="utf-8")
    log.info("Wrote %s (%d locales)", output, len(catalog.locales))
