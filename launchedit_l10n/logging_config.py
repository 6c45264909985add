"""Console logging for launchedit_l10n."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(debug: bool = False) -> None:
    """Warnings from everyone, our own records from INFO (DEBUG when debugging)."""
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)

    logging.getLogger("launchedit_l10n").setLevel(
        logging.DEBUG if debug else logging.INFO)
