"""Rich consoles, the stdout report sink, and logging setup.

The report itself goes to stdout as plain lines; errors, hints and log
records go to stderr so that piping the report stays clean.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def get_report_console() -> Console:
    """Create a console for the report, targeting stdout."""
    return Console(highlight=False, soft_wrap=True)


def get_error_console() -> Console:
    """Create a Rich console instance targeting stderr."""
    return Console(stderr=True, highlight=False, soft_wrap=True)


class ConsoleReportSink:
    """:class:`~peer_drift.core.protocols.ReportSink` backed by a Rich console.

    Lines are printed verbatim: markup is disabled so dependency names
    and version ranges such as ``[1.0,2.0)`` are never interpreted.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console: Console = console or get_report_console()

    def write_line(self, line: str = "") -> None:
        self._console.print(line, markup=False)


def configure_logging(*, verbose: bool = False) -> None:
    """Route ``peer_drift`` log records to stderr through Rich.

    WARNING and above by default, DEBUG with *verbose*.  Calling it again
    replaces the previously installed handler.
    """
    logger = logging.getLogger("peer_drift")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=get_error_console(),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
