#!/usr/bin/env python3
"""Merge locale tables into a .desktop.in template to produce a .desktop file."""
import sys

from launchedit_l10n.catalog import Catalog
from launchedit_l10n.desktop_merge import merge

if __name__ == '__main__':
    if len(sys.argv) != 4:
        print(f'Usage: {sys.argv[0]} template.desktop.in locale_dir output.desktop')
        sys.exit(1)
    merge(sys.argv[1], sys.argv[3], Catalog.from_directory(sys.argv[2]))
