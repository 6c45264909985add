"""Message ids referenced by the LaunchEdit user interface.

These ids are the contract between the application and its locale tables:
renaming one here means renaming it in every launchedit.ftl.
"""

APP_TITLE = "app-title"
APP_COMMENT = "app-comment"
APP_KEYWORDS = "app-keywords"

ACTION_BROWSE = "action-browse"
ACTION_SELECT = "action-select"
ACTION_ADD = "action-add"
ACTION_REMOVE = "action-remove"
ACTION_REMOVE_ITEM = "action-remove-item"

MENU_FILE = "menu-file"
MENU_NEW = "menu-new"
MENU_NEW_APPLICATION = "menu-newapplication"
MENU_NEW_LINK = "menu-newlink"
MENU_NEW_DIRECTORY = "menu-newdirectory"
MENU_OPEN = "menu-open"
MENU_SAVE = "menu-save"
MENU_SAVE_AS = "menu-saveas"
MENU_QUIT = "menu-quit"
MENU_VIEW = "menu-view"
MENU_ABOUT = "menu-about"

NAV_GENERAL = "nav-general"
NAV_MIMETYPES = "nav-mimetypes"
NAV_ACTIONS = "nav-actions"
NAV_CUSTOM = "nav-custom"
NAV_ADVANCED = "nav-advanced"

FIELD_NAME = "field-name"
FIELD_GENERIC_NAME = "field-genericname"
FIELD_ICON = "field-icon"
FIELD_COMMENT = "field-comment"
FIELD_URL = "field-url"
FIELD_COMMAND = "field-command"
FIELD_WORK_PATH = "field-workpath"
FIELD_RUN_IN_TERMINAL = "field-runinterm"
FIELD_HIDE = "field-hide"
FIELD_KEYWORDS = "field-keywords"
FIELD_ONLY_SHOWN_IN = "field-onlyshownin"
FIELD_NOT_SHOWN_IN = "field-notshownin"
FIELD_TRY_EXEC = "field-tryexec"
FIELD_CATEGORIES = "field-categories"
FIELD_IMPLEMENTS = "field-implements"
FIELD_STARTUP_WM_CLASS = "field-startupwmclass"
FIELD_STARTUP_NOTIFY = "field-startupnotify"
FIELD_NON_DEFAULT_GPU = "field-nondefaultgpu"
FIELD_HIDDEN = "field-hidden"
FIELD_SINGLE_MAIN_WINDOW = "field-singlemainwindow"
FIELD_DBUS_ACTIVATION = "field-dbusactivation"

HINT_NAME_APPLICATION = "hint-name-application"
HINT_NAME_LINK = "hint-name-link"
HINT_NAME_DIRECTORY = "hint-name-directory"
HINT_GENERIC_NAME = "hint-genericname"
HINT_ICON = "hint-icon"
HINT_COMMENT = "hint-comment"
HINT_URL = "hint-url"
HINT_EXEC = "hint-exec"
HINT_PATH = "hint-path"
HINT_TRY_EXEC = "hint-tryexec"
HINT_KEYWORDS = "hint-keywords"
HINT_ONLY_SHOWN_IN = "hint-onlyshownin"
HINT_NOT_SHOWN_IN = "hint-notshownin"
HINT_CATEGORIES = "hint-categories"
HINT_IMPLEMENTS = "hint-implements"
HINT_NEW_MIMETYPE = "hint-newmimetype"

SELECT_DESKTOP = "select-desktop"
SELECT_EXECUTABLE = "select-executable"
SELECT_DIRECTORY = "select-directory"
SELECT_ICON = "select-icon"

NAME_DESKTOP_FILES = "name-desktopfiles"
NAME_EXECUTABLES = "name-executables"
NAME_IMAGES = "name-images"

SAVE_DESKTOP_FILE = "save-desktopfile"

FILENAME_APPLICATION = "filename-application"
FILENAME_LINK = "filename-link"
FILENAME_DIRECTORY = "filename-directory"

MY_APPLICATION = "my-application"
MY_LINK = "my-link"
MY_DIRECTORY = "my-directory"

CONTEXT_UNABLE_TO_SAVE = "context-unabletosave"
CONTEXT_DENIED = "context-denied"
CONTEXT_DENIED_EXPL = "context-denied-expl"

ERROR_PARSING_ENTRY = "error-parsingentry"
ERROR_FILE_NOT_FOUND = "error-filenotfound"

LABEL_LOCATION = "label-location"
LABEL_VERSION = "label-version"
LABEL_EMPTY_PAGE = "label-emptypage"

ALL_KEYS = frozenset(
    value for name, value in dict(globals()).items()
    if name.isupper() and isinstance(value, str))

# Named variables each caller passes to fl()
KEY_ARGS = {
    ACTION_REMOVE_ITEM: {"item"},
    ERROR_FILE_NOT_FOUND: {"path"},
    LABEL_LOCATION: {"path"},
    LABEL_VERSION: {"version"},
    LABEL_EMPTY_PAGE: {"page"},
}

# Field codes a string has to show verbatim
FIELD_CODE_KEYS = {
    HINT_EXEC: {"%F"},
}
