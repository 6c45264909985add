"""Turn load and save failures into localized messages for the user."""

import errno
import logging
from dataclasses import dataclass, field
from enum import Enum

from . import keys
from .catalog import Localizer
from .errors import L10nError

log = logging.getLogger(__name__)

# Where users can write their own launchers
WRITABLE_LOCATIONS = (
    "~/.local/share/applications/",
    "~/.local/share/autostart/",
)


class ErrorCategory(Enum):
    PERMISSION_DENIED = "permission-denied"
    SAVE_FAILED = "save-failed"
    PARSE_FAILED = "parse-failed"
    FILE_NOT_FOUND = "file-not-found"


@dataclass
class ErrorReport:
    category: ErrorCategory
    title: str
    body: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return "\n".join([self.title, *self.body])


def classify(exc: BaseException) -> ErrorCategory:
    if isinstance(exc, PermissionError) or (
            isinstance(exc, OSError) and exc.errno in (errno.EACCES, errno.EPERM, errno.EROFS)):
        return ErrorCategory.PERMISSION_DENIED
    if isinstance(exc, FileNotFoundError):
        return ErrorCategory.FILE_NOT_FOUND
    if isinstance(exc, (ValueError, L10nError)):
        return ErrorCategory.PARSE_FAILED
    if isinstance(exc, OSError) and "denied" in str(exc).lower():
        return ErrorCategory.PERMISSION_DENIED
    return ErrorCategory.SAVE_FAILED


def build_report(exc: BaseException, localizer: Localizer) -> ErrorReport:
    """Localized title and body lines describing `exc`."""
    category = classify(exc)
    log.debug("Reporting %s as %s", type(exc).__name__, category.value)

    if category is ErrorCategory.PERMISSION_DENIED:
        return ErrorReport(
            category,
            localizer.get(keys.CONTEXT_DENIED),
            [*localizer.get(keys.CONTEXT_DENIED_EXPL).splitlines(), *WRITABLE_LOCATIONS])
    if category is ErrorCategory.FILE_NOT_FOUND:
        path = getattr(exc, "filename", None) or str(exc)
        return ErrorReport(
            category, localizer.get(keys.ERROR_FILE_NOT_FOUND, path=path))
    if category is ErrorCategory.PARSE_FAILED:
        return ErrorReport(
            category, localizer.get(keys.ERROR_PARSING_ENTRY), [str(exc)])
    return ErrorReport(
        category, localizer.get(keys.CONTEXT_UNABLE_TO_SAVE), [str(exc)])
