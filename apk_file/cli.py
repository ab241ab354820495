"""CLI for searching Alpine package contents."""

import argparse
import logging
import sys

from . import __version__
from .client import get_client
from .errors import ApkFileError, InputError
from .export import export
from .models import Architecture, Branch, ExportFormat, OutputType, Repository, Wildcard
from .output import write_output
from .patterns import split_pattern
from .query import apply_wildcard, build_query
from .settings import get_settings

logger = logging.getLogger("apk_file")


def _choices(enum_cls) -> str:
    return ", ".join(enum_cls.values())


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="apk-file",
        description="Search apk package contents via the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="File or path to search for (e.g., libssl.so, usr/bin/ssh)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read the query from stdin instead of the positional argument",
    )
    parser.add_argument(
        "--wildcard",
        default="",
        help=f"Wildcard appended to the query ({_choices(Wildcard)})",
    )
    parser.add_argument(
        "--branch",
        default=settings.branch,
        help=f"Alpine branch ({_choices(Branch)}, default: {settings.branch})",
    )
    parser.add_argument(
        "--repo",
        default=settings.repo,
        help=f"Repository to search in ({_choices(Repository)}, default: {settings.repo})",
    )
    parser.add_argument(
        "--arch",
        default=settings.arch,
        help=f"Arch to search for ({_choices(Architecture)}, default: {settings.arch})",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=settings.output_format,
        help=f"Output format ({_choices(ExportFormat)}, default: {settings.output_format})",
    )
    parser.add_argument(
        "--output-type",
        default=settings.output_type,
        help=f"Write results to {' or '.join(OutputType.values())} (default: {settings.output_type})",
    )
    parser.add_argument(
        "--output-prefix",
        default=settings.output_prefix,
        help=f"Directory for file output (default: {settings.output_prefix})",
    )
    parser.add_argument(
        "--output-basename",
        default=settings.output_basename,
        help=f"File name for file output and table name for sql formats (default: {settings.output_basename})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if not debug:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def read_query(query: str | None, use_stdin: bool, stdin=None) -> str:
    """Return the query from the argument, or from a piped stdin."""
    if use_stdin:
        stdin = stdin or sys.stdin
        if stdin.isatty():
            raise InputError("stdin is not a pipe, nothing to read")
        value = stdin.read().removesuffix("\n").removesuffix("\r")
        if not value:
            raise InputError("stdin is empty")
        return value

    if not query:
        raise InputError("must pass a file to search for")
    return query


def run(args: argparse.Namespace, stdin=None, stdout=None):
    """Search, render and write results for parsed arguments.

    All input is validated before the index is contacted.
    """
    value = read_query(args.query, args.stdin, stdin=stdin)
    value = apply_wildcard(value, args.wildcard)
    fmt = ExportFormat.parse(args.output)
    output_type = OutputType.coerce(args.output_type, "output type")

    logger.info("input: %s", value)
    logger.info("wildcard: %s", args.wildcard)
    logger.info("branch: %s", args.branch)

    file_pattern, dir_pattern = split_pattern(value)
    query = build_query(file_pattern, dir_pattern, args.branch, args.repo, args.arch)

    with get_client() as client:
        records = client.search(query)

    if records.warnings:
        logger.info("%d rows had unexpected columns", len({w.row for w in records.warnings}))

    result = export(records, fmt, output_name=args.output_basename)
    return write_output(result, output_type, args.output_prefix, args.output_basename, stream=stdout)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        run(args)
    except ApkFileError as e:
        sys.stderr.write(f"apk-file: {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
