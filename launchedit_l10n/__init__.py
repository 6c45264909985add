"""Localization layer of the LaunchEdit desktop entry editor."""

__version__ = "0.1.0"

from .catalog import Catalog, Localizer, fl, init  # noqa: E402

__all__ = ["Catalog", "Localizer", "fl", "init", "__version__"]
