#!/usr/bin/env python3
"""
Entry point for the bugcount CLI.

Prints the number of BugInstance elements in a bug collection that match the
given categories, abbreviations and minimum priority.

Usage examples:
  bugcount results.xml
  bugcount -categories CORRECTNESS,MT_CORRECTNESS -minPriority 1 results.xml
  bugcount -abbrevs NP,RV -plugin myplugin/findbugs.xml results.xml.gz

Exit codes:
  0  count printed to stdout
  1  usage error
  2  input or configuration error (unreadable file, malformed XML,
     invalid priority value)
"""

import argparse
import os
import sys

from colorama import Fore, Style, just_fix_windows_console

from bugcount.config import Config
from bugcount.counter import count_bugs
from bugcount.errors import BugCountError, UsageError
from bugcount.patterns import PatternRegistry
from bugcount.utils.logger import get_logger
from bugcount.utils.settings import ENV_DISABLE_COLORS

LOG = get_logger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_ERROR = 2


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="bugcount",
        description="Count bugs in a FindBugs bug collection matching given criteria.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "collection",
        help="Bug collection XML file (optionally gzip-compressed)"
    )
    parser.add_argument(
        "-categories",
        metavar="cat1,cat2...",
        help="set bug categories"
    )
    parser.add_argument(
        "-abbrevs",
        metavar="abbrev1,abbrev2...",
        help="set bug type abbreviations"
    )
    parser.add_argument(
        "-minPriority",
        dest="min_priority",
        metavar="priority",
        type=int,
        help="set min bug priority (3=low, 2=medium, 1=high)"
    )
    parser.add_argument(
        "-config",
        help="Path to config file (TOML/YAML/INI). If omitted, will search in cwd for bugcount.toml, etc."
    )
    parser.add_argument(
        "-plugin",
        dest="plugins",
        action="append",
        default=[],
        metavar="findbugs.xml",
        help="Load bug pattern metadata from a plugin descriptor (repeatable)"
    )
    return parser


def _print_error(message: str) -> None:
    if os.getenv(ENV_DISABLE_COLORS) or not sys.stderr.isatty():
        print(message, file=sys.stderr)
    else:
        print(Fore.RED + message + Style.RESET_ALL, file=sys.stderr)


def _build_registry(config: Config, plugins) -> PatternRegistry:
    registry = PatternRegistry.default()
    if config.patterns:
        registry.load_mapping(config.patterns)
    for plugin in list(config.plugins) + list(plugins):
        registry.load_plugin_descriptor(plugin)
    return registry


def main(argv=None):
    just_fix_windows_console()
    parser = build_arg_parser()

    # 1) Parse command-line arguments
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_help(sys.stderr)
        _print_error(f"{parser.prog}: error: {e}")
        sys.exit(EXIT_USAGE)

    try:
        # 2) Load configuration; command-line options win
        config = Config.load(args.config)
        categories = args.categories if args.categories is not None else ",".join(config.categories)
        abbrevs = args.abbrevs if args.abbrevs is not None else ",".join(config.abbrevs)
        min_priority = args.min_priority if args.min_priority is not None else config.min_priority

        # 3) Build the pattern lookup and count
        registry = _build_registry(config, args.plugins)
        LOG.debug("Pattern registry holds %d bug pattern(s)", len(registry))
        count = count_bugs(
            args.collection,
            registry,
            categories=categories,
            abbrevs=abbrevs,
            min_priority=min_priority,
        )
    except (BugCountError, OSError) as e:
        LOG.debug("Counting failed", exc_info=True)
        _print_error(f"{parser.prog}: {e}")
        sys.exit(EXIT_ERROR)

    print(count)
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
