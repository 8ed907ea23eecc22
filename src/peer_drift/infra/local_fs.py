"""Local-disk implementation of :class:`~peer_drift.core.protocols.FileSystem`."""

from __future__ import annotations

import os
from pathlib import Path, PurePath


class LocalFileSystem:
    """Read-only access to the real filesystem via :mod:`pathlib`.

    Relative paths resolve against the process working directory.  This
    class satisfies the ``FileSystem`` protocol structurally.
    """

    def read_text(self, path: PurePath) -> str:
        return Path(path).read_text(encoding="utf-8")

    def list_dir(self, path: PurePath) -> list[str]:
        # os.listdir raises NotADirectoryError for plain files.
        return os.listdir(Path(path))

    def exists(self, path: PurePath) -> bool:
        return Path(path).exists()
