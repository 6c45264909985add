"""launchedit-l10n command line: inspect, check and apply the locale tables."""

import argparse
import logging
import sys

from . import __version__
from .catalog import Catalog
from .config import DEBUG_KEY, LOCALE_DIR_KEY, load_config, preferred_languages
from .desktop_merge import merge
from .errors import L10nError
from .languages import LANGUAGES, requested_languages
from .logging_config import setup_logging
from .mime import MimeCache
from .reports import build_report
from .validate import validate_catalog, validate_directory

log = logging.getLogger(__name__)

MAX_LISTED = 30


def _catalog(args, config) -> Catalog:
    locale_dir = args.dir or config.get(LOCALE_DIR_KEY)
    if locale_dir:
        return Catalog.from_directory(locale_dir)
    return Catalog.bundled()


def _languages(args, config) -> list[str]:
    if getattr(args, "lang", None):
        return [args.lang]
    return preferred_languages(config, requested_languages())


def _parse_args(pairs: list[str]) -> dict:
    values = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"--arg expects NAME=VALUE, got {pair!r}")
        values[name] = value
    return values


def cmd_languages(args, config) -> int:
    catalog = _catalog(args, config)
    requested = _languages(args, config)
    chain = catalog.localizer(requested).languages
    print(f"Requested: {', '.join(requested) or '-'}")
    for loc in catalog.locales:
        mark = "*" if loc == chain[0] else " "
        name = LANGUAGES.get(loc, loc)
        print(f" {mark} {loc:8} {name} ({len(catalog.tables[loc])} keys)")
    return 0


def cmd_list(args, config) -> int:
    catalog = _catalog(args, config)
    loc = catalog.localizer(_languages(args, config))
    for key in sorted(catalog.base.keys()):
        print(f"{key} = {loc.get(key)}")
    return 0


def cmd_show(args, config) -> int:
    loc = _catalog(args, config).localizer(_languages(args, config))
    if not loc.has(args.key):
        print(f"Unknown key: {args.key}", file=sys.stderr)
        return 1
    print(loc.get(args.key, **_parse_args(args.arg)))
    return 0


def cmd_check(args, config) -> int:
    locale_dir = args.dir or config.get(LOCALE_DIR_KEY)
    if locale_dir:
        report = validate_directory(locale_dir)
    else:
        report = validate_catalog(Catalog.bundled())

    if report.errors:
        print("LOCALIZATION CHECK FAILED\n")
        print(f"Errors ({len(report.errors)}):")
        for e in report.errors[:MAX_LISTED]:
            print(f"  - {e}")
        if len(report.errors) > MAX_LISTED:
            print(f"  ... and {len(report.errors) - MAX_LISTED} more errors")
    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for w in report.warnings[:MAX_LISTED]:
            print(f"  - {w}")
    if report.ok:
        print("LOCALIZATION CHECK PASSED")
    return 0 if report.ok else 1


def cmd_merge(args, config) -> int:
    catalog = _catalog(args, config)
    try:
        merge(args.template, args.output, catalog)
    except OSError as e:
        print(build_report(e, catalog.localizer(_languages(args, config))), file=sys.stderr)
        return 1
    return 0


def cmd_mime(args, config) -> int:
    cache = MimeCache(_languages(args, config))
    for item in cache.items(args.types):
        print(f"{item.name}\t{item.description or '-'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchedit-l10n", description="LaunchEdit localization tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--dir", help="locale tables directory (default: bundled tables)")
    sub = parser.add_subparsers(dest="command", required=True)

    # --dir is accepted after the subcommand too; unset, the global value stays
    tables = argparse.ArgumentParser(add_help=False)
    tables.add_argument("--dir", default=argparse.SUPPRESS,
                        help="locale tables directory (default: bundled tables)")

    p = sub.add_parser("languages", parents=[tables],
                       help="available locales and the negotiated one")
    p.add_argument("--lang")
    p.set_defaults(func=cmd_languages)

    p = sub.add_parser("list", parents=[tables],
                       help="print every key with its localized string")
    p.add_argument("--lang")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("show", parents=[tables], help="print one localized string")
    p.add_argument("key")
    p.add_argument("--lang")
    p.add_argument("--arg", action="append", default=[], metavar="NAME=VALUE")
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("check", parents=[tables], help="validate the locale tables")
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("merge", parents=[tables], help="translate a .desktop.in template")
    p.add_argument("template")
    p.add_argument("output")
    p.set_defaults(func=cmd_merge)

    p = sub.add_parser("mime", help="describe MIME types in the user's language")
    p.add_argument("types", nargs="+")
    p.add_argument("--lang")
    p.set_defaults(func=cmd_mime)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    setup_logging(debug=args.debug or bool(config.get(DEBUG_KEY)))
    log.debug("Running %s", args.command)
    try:
        return args.func(args, config)
    except (OSError, L10nError) as e:
        # the tables themselves could not be loaded; report in the bundled ones
        localizer = Catalog.bundled().localizer(_languages(args, config))
        print(build_report(e, localizer), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
