"""CLI application entry point and command routing for hexacli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~hexacli.exceptions.HexacliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering a one-line ``error: ...``
message on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~hexacli.core.entry_service.EntryService`.
* Command results go to stdout; diagnostics go to stderr.
* This module is the only place that reads configuration and translates
  between the domain world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from hexacli.cli import exit_codes
from hexacli.cli.console import console, echo
from hexacli.config import load_settings
from hexacli.core.entry_service import EntryService
from hexacli.exceptions import HexacliError, UnknownCommandError, UsageError
from hexacli.infra.file_repository import FileRepository
from hexacli.logging_config import setup_logging
from hexacli.version import __version__

logger = logging.getLogger(__name__)

_USAGE = """%(prog)s [-f PATH] add <value...>
       %(prog)s [-f PATH] list
       %(prog)s [-f PATH] delete-last"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Flags are only recognised before the command; everything after the
    command word is handed to the command untouched.
    """
    parser = _ArgumentParser(
        prog="hexacli",
        usage=_USAGE,
        description="Append, list, and delete-last over a line-delimited text file.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        metavar="PATH",
        help="Data file to use (overrides $HEXACLI_FILE, default ./data.txt).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="One of: add, list, delete-last.",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help=argparse.SUPPRESS,
    )
    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_add(service: EntryService, tokens: Sequence[str]) -> int:
    """``add <value...>`` — join the tokens with spaces into one entry."""
    if not tokens:
        raise UsageError("add requires a value")
    service.add_value(" ".join(tokens))
    echo("OK")
    return exit_codes.SUCCESS


def _handle_list(service: EntryService, tokens: Sequence[str]) -> int:
    """``list`` — print ``<n>: <entry>`` per entry, 1-based."""
    for number, entry in enumerate(service.list_values(), start=1):
        echo(f"{number}: {entry}")
    return exit_codes.SUCCESS


def _handle_delete_last(service: EntryService, tokens: Sequence[str]) -> int:
    """``delete-last`` — remove the last non-blank entry."""
    service.delete_last()
    echo("Deleted last entry")
    return exit_codes.SUCCESS


_COMMANDS: dict[str, Callable[[EntryService, Sequence[str]], int]] = {
    "add": _handle_add,
    "list": _handle_list,
    "delete-last": _handle_delete_last,
}


def _command_tokens(
    parser: argparse.ArgumentParser, argv: Sequence[str], command: str,
) -> list[str]:
    """Return the raw tokens that follow *command* in *argv*.

    argparse may strip a ``--`` from a ``REMAINDER`` positional, so the
    tokens are sliced from the original argv instead.  The command's
    position is the first occurrence whose prefix parses to that same
    command, which skips option values spelled like a command
    (``-f add add x``).
    """
    for index, token in enumerate(argv):
        if token != command:
            continue
        try:
            prefix = parser.parse_args(list(argv[: index + 1]))
        except UsageError:
            continue
        if prefix.command == command:
            return list(argv[index + 1 :])
    return []


def _build_service(data_file: str) -> EntryService:
    """Wire the file adapter into the core service."""
    return EntryService(FileRepository(data_file))


def _report(exc: HexacliError) -> None:
    console.print(f"error: {exc}", style="bold red")
    if exc.hint:
        console.print(f"hint: {exc.hint}", style="yellow")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the hexacli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    settings = load_settings()
    parser = _build_parser()

    try:
        args = parser.parse_args(argv)
        setup_logging("DEBUG" if args.verbose else settings.log_level)

        if args.command is None:
            raise UsageError("")

        handler = _COMMANDS.get(args.command)
        if handler is None:
            raise UnknownCommandError(f"unknown command: {args.command}")

        data_file = args.file if args.file is not None else settings.data_file
        logger.debug("Running %r against %s", args.command, data_file)
        tokens = _command_tokens(parser, argv, args.command)
        return handler(_build_service(data_file), tokens)
    except UsageError as exc:
        if str(exc):
            console.print(f"error: {exc}", style="bold red")
        console.print(parser.format_usage().rstrip())
        return exit_codes.USAGE_ERROR
    except HexacliError as exc:
        _report(exc)
        return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except KeyboardInterrupt:
        console.print("Aborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"error: unexpected {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.GENERAL_ERROR)
