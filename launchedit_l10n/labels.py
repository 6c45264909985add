"""User interface concepts and the message ids that label them."""

from enum import Enum

from . import keys
from .catalog import Localizer

TITLE_SEPARATOR = " — "


class EntryType(Enum):
    APPLICATION = "Application"
    LINK = "Link"
    DIRECTORY = "Directory"

    @classmethod
    def parse(cls, value: str | None) -> "EntryType | None":
        """Type= value of a desktop entry, None when unknown."""
        for member in cls:
            if member.value == value:
                return member
        return None

    @property
    def default_name_key(self) -> str:
        return {
            EntryType.APPLICATION: keys.MY_APPLICATION,
            EntryType.LINK: keys.MY_LINK,
            EntryType.DIRECTORY: keys.MY_DIRECTORY,
        }[self]

    @property
    def filename_key(self) -> str:
        return {
            EntryType.APPLICATION: keys.FILENAME_APPLICATION,
            EntryType.LINK: keys.FILENAME_LINK,
            EntryType.DIRECTORY: keys.FILENAME_DIRECTORY,
        }[self]

    @property
    def name_hint_key(self) -> str:
        return {
            EntryType.APPLICATION: keys.HINT_NAME_APPLICATION,
            EntryType.LINK: keys.HINT_NAME_LINK,
            EntryType.DIRECTORY: keys.HINT_NAME_DIRECTORY,
        }[self]

    @property
    def extension(self) -> str:
        return ".directory" if self is EntryType.DIRECTORY else ".desktop"

    @property
    def menu_key(self) -> str:
        return {
            EntryType.APPLICATION: keys.MENU_NEW_APPLICATION,
            EntryType.LINK: keys.MENU_NEW_LINK,
            EntryType.DIRECTORY: keys.MENU_NEW_DIRECTORY,
        }[self]


class PickKind(Enum):
    DESKTOP_FILE = "desktop-file"
    EXECUTABLE = "executable"
    TRY_EXECUTABLE = "try-executable"
    DIRECTORY = "directory"
    ICON_FILE = "icon-file"

    @property
    def title_key(self) -> str:
        if self in (PickKind.EXECUTABLE, PickKind.TRY_EXECUTABLE):
            return keys.SELECT_EXECUTABLE
        return {
            PickKind.DESKTOP_FILE: keys.SELECT_DESKTOP,
            PickKind.DIRECTORY: keys.SELECT_DIRECTORY,
            PickKind.ICON_FILE: keys.SELECT_ICON,
        }[self]

    @property
    def filter_name_key(self) -> str | None:
        """Name of the file filter shown in the picker; directories have none."""
        return {
            PickKind.DESKTOP_FILE: keys.NAME_DESKTOP_FILES,
            PickKind.EXECUTABLE: keys.NAME_EXECUTABLES,
            PickKind.TRY_EXECUTABLE: keys.NAME_EXECUTABLES,
            PickKind.ICON_FILE: keys.NAME_IMAGES,
        }.get(self)


class NavPage(Enum):
    GENERAL = keys.NAV_GENERAL
    MIMETYPES = keys.NAV_MIMETYPES
    ACTIONS = keys.NAV_ACTIONS
    CUSTOM = keys.NAV_CUSTOM
    ADVANCED = keys.NAV_ADVANCED

    @property
    def key(self) -> str:
        return self.value


def nav_pages(entry_type: EntryType | None) -> list[NavPage]:
    """Pages offered for an entry; only applications get more than General."""
    if entry_type is EntryType.APPLICATION:
        return list(NavPage)
    return [NavPage.GENERAL]


def suggested_filename(name: str | None, entry_type: EntryType,
                       localizer: Localizer) -> str:
    """File name offered in the save dialog for an entry."""
    if name:
        base = name.lower().replace(" ", "-")
    else:
        base = localizer.get(entry_type.filename_key)
    return f"{base}{entry_type.extension}"


def window_title(localizer: Localizer, page: NavPage | None = None) -> str:
    title = localizer.get(keys.APP_TITLE)
    if page is not None:
        title += TITLE_SEPARATOR + localizer.get(page.key)
    return title
