"""Read locale tables written in a subset of the Fluent (.ftl) syntax."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .errors import DuplicateKeyError, ResourceSyntaxError

ENTRY_RE = re.compile(r"^(-?[A-Za-z][A-Za-z0-9_-]*)\s*=\s?(.*)$")
PLACEABLE_RE = re.compile(
    r'\{\s*(?:\$(?P<var>[A-Za-z][\w-]*)|-(?P<term>[A-Za-z][\w-]*)|"(?P<lit>[^"]*)")\s*\}')
FIELD_CODE_RE = re.compile(r"%[%fFuUdDnNickvm]")
# Fluent syntax outside the supported subset
ATTRIBUTE_RE = re.compile(r"^\.[A-Za-z][\w-]*\s*=")
VARIANT_RE = re.compile(r"^\*?\[")
SELECT_RE = re.compile(r"\{[^{}]*->")


@dataclass(frozen=True)
class LocaleTable:
    """All messages and terms of one locale."""
    locale: str
    messages: Mapping[str, str]
    terms: Mapping[str, str] = field(default_factory=dict)
    source: str = ""

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))
        object.__setattr__(self, "terms", MappingProxyType(dict(self.terms)))

    def __contains__(self, key: str) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def get(self, key: str) -> str | None:
        return self.messages.get(key)

    def keys(self) -> set[str]:
        return set(self.messages)


def _unsupported(text: str) -> bool:
    """Attributes, select variants and select expressions are not supported."""
    return bool(ATTRIBUTE_RE.match(text) or VARIANT_RE.match(text) or SELECT_RE.search(text))


def _dedent(lines: list[str]) -> str:
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    cut = min(indents) if indents else 0
    return "\n".join(line[cut:].rstrip() for line in lines).strip("\n")


def parse_resource(text: str, locale: str, source: str = "<string>") -> LocaleTable:
    """Parse .ftl source into a LocaleTable.

    Raises ResourceSyntaxError on lines that are not comments, entries or
    continuations, or that use attributes or select expressions, and
    DuplicateKeyError when a key is defined twice.
    """
    messages: dict[str, str] = {}
    terms: dict[str, str] = {}
    seen: dict[str, int] = {}

    key = first = None
    continuation: list[str] = []

    def flush():
        if key is None:
            return
        parts = [first] if first else []
        rest = _dedent(continuation)
        if rest:
            parts.append(rest)
        value = "\n".join(parts)
        if key.startswith("-"):
            terms[key[1:]] = value
        else:
            messages[key] = value

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            if key is not None:
                continuation.append("")
            continue
        if line.startswith("#"):
            flush()
            key = None
            continuation = []
            continue
        if line[0] in " \t":
            if key is None or _unsupported(line.strip()):
                raise ResourceSyntaxError(source, line_no, line)
            continuation.append(line)
            continue

        m = ENTRY_RE.match(line)
        if not m:
            raise ResourceSyntaxError(source, line_no, line)
        flush()
        key, first = m.group(1), m.group(2).strip()
        if SELECT_RE.search(first):
            raise ResourceSyntaxError(source, line_no, line)
        continuation = []
        if key in seen:
            raise DuplicateKeyError(key, source, line_no, seen[key])
        seen[key] = line_no
    flush()

    return LocaleTable(locale=locale, messages=messages, terms=terms, source=source)


def load_resource(path: Path, locale: str) -> LocaleTable:
    """Read and parse a .ftl file."""
    return parse_resource(Path(path).read_text(encoding="utf-8"), locale, str(path))


def variables(text: str) -> set[str]:
    """Names of the { $variable } placeables in a string."""
    return {m.group("var") for m in PLACEABLE_RE.finditer(text) if m.group("var")}


def term_references(text: str) -> set[str]:
    return {m.group("term") for m in PLACEABLE_RE.finditer(text) if m.group("term")}


def field_codes(text: str) -> set[str]:
    """Desktop entry field codes (%F, %u, ...) shown in a string."""
    return {c for c in FIELD_CODE_RE.findall(text) if c != "%%"}


def placeholders(text: str) -> set[str]:
    """All placeholder tokens: field codes plus variables written as $name."""
    return field_codes(text) | {f"${v}" for v in variables(text)}
