# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the adalex command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from adalex.options.config import (
    CONFIG_FILE_NAME,
    ScanConfig,
    ScanConfigError,
    discover_scan_config,
    load_scan_config,
)
from adalex.report.stats import SECTION_ORDER, LexemeStats, Section, format_section, format_summary
from adalex.scanner.lexer import LineCounter, TokenType, next_token
from adalex.scanner.render import describe, render
from adalex.scanner.stream import CharStream, StreamError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main(argv: list[str] | None = None) -> None:
    """Run the adalex CLI."""
    parser = argparse.ArgumentParser(
        prog="adalex",
        description="Scan a source file and report its tokens and lexeme statistics.",
        allow_abbrev=False,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Source file to scan")
    parser.add_argument("-all", dest="show_all", action="store_true", help="Print every token")
    parser.add_argument("-id", dest="show_ids", action="store_true", help="Print the distinct identifiers")
    parser.add_argument("-kw", dest="show_kws", action="store_true", help="Print the distinct keywords")
    parser.add_argument("-num", dest="show_nums", action="store_true", help="Print the distinct numeric literals")
    parser.add_argument(
        "-str",
        dest="show_strs",
        action="store_true",
        help="Print the distinct string and character literals",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )

    if argv is None:
        argv = sys.argv[1:]
    unknown = _find_unrecognized_flag(argv)
    if unknown is not None:
        print(f"Unrecognized flag {{{unknown}}}")
        sys.exit(1)

    args, extras = parser.parse_known_intermixed_args(argv)
    sys.exit(_run(args, extras))


# ################
# Implementation
# ################

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# argparse prefix-matches single-dash options, so flags are checked verbatim first.
_KNOWN_FLAGS = frozenset({"-all", "-id", "-kw", "-num", "-str", "--config", "-h", "--help"})

_FLAG_SECTIONS: dict[str, Section] = {
    "show_ids": Section.IDENTIFIERS,
    "show_kws": Section.KEYWORDS,
    "show_nums": Section.NUMERALS,
    "show_strs": Section.STRINGS,
}

_log_handler: logging.Handler | None = None


def _find_unrecognized_flag(argv: list[str]) -> str | None:
    """Return the first argument that looks like a flag but is not spelled exactly as one."""
    expects_value = False
    for arg in argv:
        if expects_value:
            expects_value = False
            continue
        if arg == "--config":
            expects_value = True
        elif arg.startswith("--config="):
            continue
        elif arg.startswith("-") and arg not in _KNOWN_FLAGS:
            return arg
    return None


def _run(args: argparse.Namespace, extras: list[str]) -> int:
    """Validate the command line, then scan the input file."""
    files = list(args.files)
    for extra in extras:
        if extra.startswith("-"):
            print(f"Unrecognized flag {{{extra}}}")
            return 1
        files.append(extra)

    if not files:
        print("No specified input file.")
        return 1
    if len(files) > 1:
        print("Only one file name is allowed.")
        return 1

    try:
        config = load_scan_config(args.config) if args.config is not None else discover_scan_config(Path.cwd())
    except ScanConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _configure_logging(config.log_level)

    sections = set(config.sections)
    sections.update(section for flag, section in _FLAG_SECTIONS.items() if getattr(args, flag))
    show_all = args.show_all or config.show_all

    return _scan_file(files[0], config, show_all, sections)


def _scan_file(filename: str, config: ScanConfig, show_all: bool, sections: set[Section]) -> int:
    """Scan *filename*, printing the trace, summary, and requested sections."""
    try:
        # latin-1 maps every byte to one character, so stray bytes scan as ERR tokens.
        source = open(filename, encoding="latin-1")
    except OSError as exc:
        logger.debug("Cannot open %s: %s", filename, exc)
        print(f"CANNOT OPEN THE FILE {filename}")
        return 1

    with source:
        stream = CharStream(source)
        if stream.peek() == "":
            print("Empty file.")
            return 0

        logger.info("Scanning %s", filename)
        lines = LineCounter()
        stats = LexemeStats()
        had_error = False
        while True:
            try:
                item = next_token(stream, lines)
            except StreamError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 1
            if item.kind == TokenType.DONE:
                break
            if item.kind == TokenType.ERR:
                text = describe(item)
                print(chalk.red(text) if config.color else text)
                if config.stop_on_error:
                    return 1
                had_error = True
                continue
            stats.add(item)
            if show_all:
                print(render(item), end="")

    logger.debug("Scanned %d tokens on %d lines", stats.token_count, lines.value - 1)
    print(format_summary(stats, lines.value - 1))
    style = chalk.blue if config.color else None
    for section in SECTION_ORDER:
        if section not in sections:
            continue
        text = format_section(stats, section, style)
        if text is not None:
            print(text)

    return 1 if had_error else 0


def _configure_logging(level: str) -> None:
    """Route adalex diagnostics to stderr at *level*."""
    global _log_handler

    package_logger = logging.getLogger("adalex")
    if _log_handler is not None:
        package_logger.removeHandler(_log_handler)
    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(_log_handler)
    package_logger.setLevel(level)
