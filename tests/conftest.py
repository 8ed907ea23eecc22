"""Shared pytest fixtures and test doubles for the peer-drift test suite.

Guidelines
----------
* Core tests use :class:`FakeFileSystem` — no disk access.
* CLI tests build real workspaces under ``tmp_path``.
* Report output is captured with :class:`RecordingSink` or ``capsys``.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path, PurePath
from typing import Any

import pytest


def manifest(**sections: Any) -> str:
    """Serialise a package.json document with the given top-level fields."""
    return json.dumps({"name": "fixture", **sections})


class FakeFileSystem:
    """In-memory :class:`~peer_drift.core.protocols.FileSystem` double.

    ``files`` maps paths to text contents; a value that is an exception
    instance is raised on read.  Directories are implied by file paths and
    may also be declared explicitly.  Every read and listing is recorded.
    """

    def __init__(
        self,
        files: Mapping[str, str | Exception] | None = None,
        dirs: tuple[str, ...] = (),
    ) -> None:
        self.files: dict[PurePath, str | Exception] = {
            PurePath(path): content for path, content in (files or {}).items()
        }
        self.dirs: set[PurePath] = {PurePath(d) for d in dirs}
        self.reads: list[PurePath] = []
        self.listed: list[PurePath] = []

    def _known(self) -> list[PurePath]:
        return [*self.files, *self.dirs]

    def read_text(self, path: PurePath) -> str:
        path = PurePath(path)
        self.reads.append(path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        content = self.files[path]
        if isinstance(content, Exception):
            raise content
        return content

    def list_dir(self, path: PurePath) -> list[str]:
        path = PurePath(path)
        self.listed.append(path)
        names = {
            known.relative_to(path).parts[0]
            for known in self._known()
            if path in known.parents
        }
        if not names and path not in self.dirs:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        # Reverse order so callers must sort for themselves.
        return sorted(names, reverse=True)

    def exists(self, path: PurePath) -> bool:
        path = PurePath(path)
        return any(path == known or path in known.parents for known in self._known())


class RecordingSink:
    """:class:`~peer_drift.core.protocols.ReportSink` that keeps every line."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str = "") -> None:
        self.lines.append(line)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def make_workspace(tmp_path: Path) -> Callable[..., Path]:
    """Build an on-disk workspace and return its root.

    ``packages`` maps directory names to either a dict (serialised as JSON),
    a raw string (written verbatim), or ``None`` (directory without a
    manifest).
    """

    def _make(
        dev_dependencies: dict[str, str] | None = None,
        packages: Mapping[str, dict[str, Any] | str | None] | None = None,
        *,
        root_manifest: str | None = None,
    ) -> Path:
        if root_manifest is None:
            sections = {} if dev_dependencies is None else {"devDependencies": dev_dependencies}
            root_manifest = manifest(**sections)
        (tmp_path / "package.json").write_text(root_manifest, encoding="utf-8")
        packages_dir = tmp_path / "packages"
        packages_dir.mkdir()
        for name, content in (packages or {}).items():
            package_dir = packages_dir / name
            package_dir.mkdir()
            if content is None:
                continue
            text = content if isinstance(content, str) else json.dumps(content)
            (package_dir / "package.json").write_text(text, encoding="utf-8")
        return tmp_path

    return _make
