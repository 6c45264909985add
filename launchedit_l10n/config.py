"""User settings kept in ~/.config/launchedit/config.json."""

import json
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "launchedit"
CONFIG_FILE = CONFIG_DIR / "config.json"

LANGUAGE_KEY = "language"
LOCALE_DIR_KEY = "locale_dir"
DEBUG_KEY = "debug"


def load_config(path: Path = CONFIG_FILE) -> dict:
    """Load the config, or an empty one when it is missing or unreadable."""
    try:
        config = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict, path: Path = CONFIG_FILE):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")


def preferred_languages(config: dict, requested: list[str]) -> list[str]:
    """Put the configured language in front of the requested ones."""
    lang = config.get(LANGUAGE_KEY)
    if not lang:
        return list(requested)
    return [lang] + [r for r in requested if r != lang]
