"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols, never on concrete
implementations, so every component can be driven by in-memory test
doubles.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Protocol


class FileSystem(Protocol):
    """Read-only filesystem access needed to scan a workspace.

    Any object implementing these methods satisfies the protocol
    structurally (no explicit inheritance required).
    """

    def read_text(self, path: PurePath) -> str:
        """Return the UTF-8 decoded contents of *path*.

        Raises
        ------
        OSError
            When the file cannot be opened or read.
        UnicodeDecodeError
            When the contents are not valid UTF-8.
        """
        ...  # pragma: no cover

    def list_dir(self, path: PurePath) -> list[str]:
        """Return the names of the entries directly under *path*.

        Raises
        ------
        OSError
            When *path* does not exist or is not a directory.
        """
        ...  # pragma: no cover

    def exists(self, path: PurePath) -> bool:
        """Return whether *path* exists."""
        ...  # pragma: no cover


class ReportSink(Protocol):
    """Destination for human-readable report lines."""

    def write_line(self, line: str = "") -> None:
        """Emit one line of report output (without trailing newline)."""
        ...  # pragma: no cover
