"""Domain models for peer-drift.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies on
external packages.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any

from peer_drift.exceptions import ManifestReadError

VersionMap = Mapping[str, str]
"""Dependency name → opaque version specifier."""


# ---------------------------------------------------------------------------
# Problems
# ---------------------------------------------------------------------------

class ProblemKind(enum.Enum):
    """Kind of discrepancy between a package and the root manifest."""

    NOT_FOUND = "NOT_FOUND"
    VERSION_MISMATCH = "VERSION_MISMATCH"


@dataclass(frozen=True, slots=True)
class Problem:
    """A single peer dependency that disagrees with the root manifest."""

    kind: ProblemKind

    dependency: str
    """Name of the offending dependency."""

    actual: str
    """Version declared by the sub-package."""

    expected: str | None = None
    """Version declared by the root manifest, ``None`` when absent."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WorkspaceLayout:
    """Where the manifests live and which sections are compared."""

    root: PurePath = PurePath(".")
    packages_dir: str = "packages"
    manifest_name: str = "package.json"
    root_section: str = "devDependencies"
    package_section: str = "peerDependencies"

    @property
    def root_manifest(self) -> PurePath:
        return self.root / self.manifest_name

    @property
    def packages_path(self) -> PurePath:
        return self.root / self.packages_dir

    def package_manifest(self, entry: str) -> PurePath:
        """Return ``<root>/<packages_dir>/<entry>/<manifest_name>``."""
        return self.packages_path / entry / self.manifest_name


# ---------------------------------------------------------------------------
# Manifest loading results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ManifestLoaded:
    """Successfully parsed manifest document."""

    path: str
    document: dict[str, Any]


@dataclass(frozen=True, slots=True)
class ManifestFailed:
    """A manifest that could not be read or parsed.

    ``error`` is a :class:`~peer_drift.exceptions.ManifestReadError` whose
    ``__cause__`` is the underlying ``OSError`` / ``ValueError``.
    """

    path: str
    error: ManifestReadError


ManifestResult = ManifestLoaded | ManifestFailed


# ---------------------------------------------------------------------------
# Workspace inspection outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InspectionResult:
    """Aggregate outcome of one workspace scan.

    Truthiness follows :attr:`any_problem`.
    """

    packages_checked: tuple[str, ...] = ()
    packages_with_problems: tuple[str, ...] = ()

    @property
    def any_problem(self) -> bool:
        return bool(self.packages_with_problems)

    def __bool__(self) -> bool:
        return self.any_problem
