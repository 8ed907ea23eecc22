"""CLI application entry point for peer-drift.

This module is the **sole error boundary** for the entire application.
It catches :class:`~peer_drift.exceptions.PeerDriftError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :func:`peer_drift.core.runner.run`.
* The report is written to stdout; errors and logs go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import PurePath
from typing import NoReturn

from rich.markup import escape

from peer_drift.cli import exit_codes
from peer_drift.cli.console import ConsoleReportSink, configure_logging, get_error_console
from peer_drift.core.ignore_list import IGNORE_FLAGS
from peer_drift.core.models import WorkspaceLayout
from peer_drift.core.runner import run
from peer_drift.exceptions import IGNORE_USAGE_HINT, InvalidArgumentsError, PeerDriftError
from peer_drift.infra.local_fs import LocalFileSystem
from peer_drift.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as :class:`InvalidArgumentsError`."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(
            f"Invalid arguments passed: {message}",
            hint=IGNORE_USAGE_HINT,
        )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    ``--ignore`` is deliberately not registered here: whatever argparse
    leaves over is validated by :func:`~peer_drift.core.ignore_list.parse_ignore_list`,
    which accepts nothing or exactly ``--ignore pkg1,pkg2``.
    """
    parser = _ArgumentParser(
        prog="peer-drift",
        description=(
            "Check that every sub-package's peerDependencies match the "
            "devDependencies of the root package.json."
        ),
        usage="%(prog)s [-h] [-V] [-v] [-C DIR] [--packages-dir NAME] [--ignore PKG1,PKG2]",
        epilog="--ignore PKG1,PKG2  comma-separated package directories to skip",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every package visited (DEBUG level).",
    )
    parser.add_argument(
        "-C",
        "--workspace",
        metavar="DIR",
        default=".",
        help="Workspace root holding the main package.json (default: current directory).",
    )
    parser.add_argument(
        "--packages-dir",
        metavar="NAME",
        default="packages",
        help="Directory under the workspace root holding sub-packages (default: packages).",
    )
    return parser


def _split_inline_ignore(extras: list[str]) -> list[str]:
    """Turn ``["--ignore=a,b"]`` into ``["--ignore", "a,b"]``."""
    if len(extras) == 1:
        flag, sep, value = extras[0].partition("=")
        if sep and flag in IGNORE_FLAGS:
            return [flag, value]
    return extras


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the peer-drift CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` or :data:`exit_codes.PROBLEMS_FOUND`.
        Fatal conditions propagate as :class:`PeerDriftError`.
    """
    parser = _build_parser()
    args, extras = parser.parse_known_args(argv)

    configure_logging(verbose=args.verbose)

    layout = WorkspaceLayout(
        root=PurePath(args.workspace),
        packages_dir=args.packages_dir,
    )
    logger.debug("Checking workspace %s", layout.root)

    result = run(
        _split_inline_ignore(extras),
        fs=LocalFileSystem(),
        sink=ConsoleReportSink(),
        layout=layout,
    )
    if result.any_problem:
        return exit_codes.PROBLEMS_FOUND
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    console = get_error_console()
    try:
        code = main()
        sys.exit(code)
    except PeerDriftError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", highlight=False)
        sys.exit(exit_codes.FATAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
