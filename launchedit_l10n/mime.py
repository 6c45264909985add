"""Localized MIME-type descriptions read from shared-mime-info packages."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from bs4 import BeautifulSoup

from .languages import best_localized

log = logging.getLogger(__name__)

MIME_PACKAGE_DIRS = [
    Path("/usr/share/mime/packages"),
    Path("/usr/local/share/mime/packages"),
]
FLATPAK_PACKAGE_DIRS = [
    Path("/run/host/usr/share/mime/packages"),
    Path("/run/host/share/mime/packages"),
    Path("/usr/share/mime/packages"),  # the runtime's own view
]
MIME_ALIAS_FILES = [
    Path("/usr/share/mime/aliases"),
    Path("/usr/local/share/mime/aliases"),
]


@dataclass
class MimeItem:
    name: str
    description: str = ""


def default_package_dirs() -> list[Path]:
    if os.environ.get("FLATPAK_ID"):
        return list(FLATPAK_PACKAGE_DIRS)
    return list(MIME_PACKAGE_DIRS)


def default_alias_files() -> list[Path]:
    paths = list(MIME_ALIAS_FILES)
    if os.environ.get("FLATPAK_ID"):
        runtime = os.environ.get("FLATPAK_RUNTIME_DIR")
        if runtime:
            paths.append(Path(runtime) / "mime" / "aliases")
        paths.append(Path("/app/share/mime/aliases"))
    return paths


def load_aliases(paths: Iterable[Path]) -> dict[str, str]:
    """Map canonical MIME types to an alias from `alias canonical` lines."""
    aliases = {}
    for path in paths:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            continue
        log.info("Reading mime aliases from %s", path)
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split(None, 1)
            if len(parts) == 2:
                alias, canonical = parts
                aliases[canonical.strip()] = alias
    log.info("Loaded %d mime aliases.", len(aliases))
    return aliases


def parse_package(xml: str | bytes, languages: list[str]) -> dict[str, str]:
    """Best description for each mime-type element of a package file."""
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    soup = BeautifulSoup(xml, "xml")
    descriptions = {}
    for node in soup.find_all("mime-type"):
        mime_type = node.get("type")
        if not mime_type:
            continue
        comments: dict[str | None, str] = {}
        for child in node.find_all("comment", recursive=False):
            text = child.get_text().strip()
            if not text:
                continue
            lang = child.get("xml:lang")
            comments.setdefault(lang or None, text)
        chosen = best_localized(comments, languages)
        if chosen:
            descriptions.setdefault(mime_type, chosen)
    return descriptions


class MimeCache:
    """Descriptions of MIME types in the user's language."""

    def __init__(self, languages: list[str], package_dirs: list[Path] | None = None,
                 alias_files: list[Path] | None = None):
        self.languages = list(languages)
        self.package_dirs = default_package_dirs() if package_dirs is None else package_dirs
        self.alias_files = default_alias_files() if alias_files is None else alias_files
        self.descriptions: dict[str, str] = {}
        self.scan()

    def __len__(self) -> int:
        return len(self.descriptions)

    def scan(self):
        self.descriptions.clear()
        aliases = load_aliases(self.alias_files)

        for directory in self.package_dirs:
            try:
                files = sorted(Path(directory).glob("*.xml"))
            except OSError:
                continue
            for path in files:
                try:
                    xml = path.read_bytes()
                except OSError as e:
                    log.warning("Skipping %s: %s", path, e)
                    continue
                log.info("Loading mime descriptions from %s", path)
                for mime_type, desc in parse_package(xml, self.languages).items():
                    self.descriptions.setdefault(mime_type, desc)
                    alias = aliases.get(mime_type)
                    if alias:
                        self.descriptions.setdefault(alias, desc)
        log.info("Mime cache: Loaded %d mime type descriptions", len(self.descriptions))

    def lookup(self, name: str) -> str | None:
        return self.descriptions.get(name)

    def items(self, names: Iterable[str]) -> list[MimeItem]:
        """Table rows for a MimeType= list, sorted by name."""
        rows = [MimeItem(n, self.lookup(n) or "") for n in names if n]
        rows.sort(key=lambda item: item.name.lower())
        return rows
