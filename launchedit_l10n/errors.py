"""Exceptions raised while loading and resolving locale tables."""


class L10nError(Exception):
    """Base class for localization errors."""


class ResourceSyntaxError(L10nError):
    def __init__(self, path: str, line_no: int, line: str):
        self.path = path
        self.line_no = line_no
        self.line = line
        super().__init__(f"{path}:{line_no}: cannot parse {line.strip()!r}")


class DuplicateKeyError(L10nError):
    def __init__(self, key: str, path: str, line_no: int, first_line: int):
        self.key = key
        self.path = path
        self.line_no = line_no
        self.first_line = first_line
        super().__init__(
            f"{path}:{line_no}: duplicate key {key!r} "
            f"(first defined on line {first_line})")


class MissingLocaleError(L10nError):
    """A required locale table is not present in the catalog."""
