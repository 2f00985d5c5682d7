"""Command line interface for unpacking webpack bundles."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from . import pipeline
from .exceptions import BundleLoadError, BundleParseError, WrapperNotFoundError
from .io.loader import STDIN_MARKER, BundleSource, load_bundle
from .io.writer import replace_file
from .pretty.beautify import DEFAULT_INDENT_SIZE

LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_PARSE_ERROR = 2

_ANSI_COLOURS = {"red": 31, "green": 32, "yellow": 33, "blue": 34, "magenta": 35, "cyan": 36}


def _ansi(text: str, colour: str) -> str:
    return f"\x1b[{_ANSI_COLOURS[colour]}m{text}\x1b[0m"


class _ColourFormatter(logging.Formatter):
    COLOURS = {
        logging.DEBUG: "blue",
        logging.INFO: "green",
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "magenta",
    }

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - trivial wrapper
        message = super().format(record)
        colour = self.COLOURS.get(record.levelno, "green")
        return _ansi(message, colour)


def configure_logging(verbose: bool, log_file: Optional[Path] = None) -> None:
    """Configure root logging handlers."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(logging.DEBUG if log_file is not None else level)

    if log_file is not None:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    stream = logging.StreamHandler()
    stream.setLevel(level)
    stream.setFormatter(_ColourFormatter("%(levelname)s: %(message)s"))
    root.addHandler(stream)


class _Console:
    """Status lines on stdout, coloured when attached to a terminal."""

    def __init__(self, stream: TextIO, colour: bool) -> None:
        self.stream = stream
        self.colour = colour

    def paint(self, text: str, colour: str) -> str:
        return _ansi(text, colour) if self.colour else text

    def write(self, text: str, colour: Optional[str] = None) -> None:
        self.stream.write((self.paint(text, colour) if colour else text) + "\n")
        self.stream.flush()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unbundler",
        description="Split a webpack bundle back into named module files",
    )
    parser.add_argument(
        "-i",
        "--input",
        help=f"bundle file to read ('{STDIN_MARKER}' for stdin; stdin is used when piped)",
    )
    parser.add_argument(
        "-o",
        "--out",
        "--output",
        dest="output",
        default=None,
        help="directory for the extracted modules (default: current directory)",
    )
    parser.add_argument("--no-beautify", action="store_true", help="write generated code without reformatting")
    parser.add_argument("--indent", type=int, default=DEFAULT_INDENT_SIZE, help="beautifier indent size")
    parser.add_argument("--list", dest="list_only", action="store_true", help="print module names without writing files")
    parser.add_argument("--report-json", metavar="PATH", help="write a JSON run report to PATH")
    parser.add_argument("--debug-log", metavar="PATH", help="write a per-module extraction trace to PATH")
    parser.add_argument("--log-file", metavar="PATH", help="write debug logging to PATH")
    parser.add_argument("--no-color", action="store_true", help="disable coloured status output")
    parser.add_argument("--verbose", action="store_true", help="enable verbose colourised logging")
    return parser


def _options_from_args(args: argparse.Namespace) -> pipeline.UnbundleOptions:
    output_dir = Path(args.output) if args.output else Path.cwd()
    return pipeline.UnbundleOptions(
        output_dir=output_dir,
        beautify=not args.no_beautify,
        indent_size=args.indent,
        list_only=args.list_only,
        debug_log=Path(args.debug_log) if args.debug_log else None,
    )


def _read_input(args: argparse.Namespace, console: _Console, stdin: Optional[TextIO]) -> BundleSource:
    stream = sys.stdin if stdin is None else stdin
    if args.input and args.input != STDIN_MARKER:
        console.write(f"Reading modules from {console.paint(args.input, 'magenta')}...", "cyan")
    elif args.input == STDIN_MARKER or (stream is not None and not stream.isatty()):
        console.write("Reading standard input...", "cyan")
    return load_bundle(args.input, stdin=stream)


def main(argv: Optional[List[str]] = None, *, stdin: Optional[TextIO] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose, Path(args.log_file) if args.log_file else None)
    console = _Console(sys.stdout, colour=not args.no_color and sys.stdout.isatty())

    try:
        bundle = _read_input(args, console, stdin)
    except BundleLoadError as exc:
        console.write(f"Error: {exc}", "red")
        return EXIT_FAILURE

    options = _options_from_args(args)
    try:
        result = pipeline.run(bundle, options)
    except BundleParseError as exc:
        console.write(f"Error: {exc}", "red")
        return EXIT_PARSE_ERROR
    except WrapperNotFoundError:
        console.write("Error: Could not find a Webpack wrapper!", "red")
        return EXIT_FAILURE

    console.write(f"Found {console.paint(str(len(result.table)), 'magenta')} modules.")
    if options.list_only:
        for module in result.table:
            console.write(f"{module.id}\t{module.name}")
    for write in result.writes:
        target = console.paint(str(write.path), "blue")
        if write.success:
            console.write(f"Successfully wrote module to {target}", "green")
        else:
            console.write(f"Error writing {target}: {write.error}", "red")

    if args.report_json:
        replace_file(Path(args.report_json), json.dumps(result.report.to_json(), indent=2) + "\n")
    if args.verbose:
        LOG.info("run summary\n%s", result.report.to_text())

    return EXIT_OK if result.success else EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover - CLI wrapper
    raise SystemExit(main())
