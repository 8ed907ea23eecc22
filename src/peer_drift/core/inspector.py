"""Workspace scan — drives manifest loading and reporting per sub-package.

Sub-packages are visited one at a time in name order.  An ignored package
is never read, so a malformed manifest there cannot abort the scan, while
any other unreadable manifest aborts the whole run.
"""

from __future__ import annotations

import logging
from collections.abc import Set

from peer_drift.core.manifest import extract_version_map, read_manifest
from peer_drift.core.models import (
    InspectionResult,
    ManifestFailed,
    VersionMap,
    WorkspaceLayout,
)
from peer_drift.core.protocols import FileSystem, ReportSink
from peer_drift.core.reporter import report_problems
from peer_drift.exceptions import (
    ManifestProcessingError,
    ManifestReadError,
    WorkspaceLayoutError,
)

logger = logging.getLogger(__name__)


def list_packages(fs: FileSystem, layout: WorkspaceLayout) -> list[str]:
    """Return the sorted entries of the packages directory.

    Raises
    ------
    WorkspaceLayoutError
        When the packages directory cannot be listed.
    """
    packages_path = layout.packages_path
    try:
        return sorted(fs.list_dir(packages_path))
    except OSError as exc:
        raise WorkspaceLayoutError(
            f"Cannot list packages directory {packages_path}",
            hint=f'Run from the workspace root or pass --workspace. ({exc.strerror or exc})',
        ) from exc


def load_package_versions(
    fs: FileSystem,
    layout: WorkspaceLayout,
    entry: str,
) -> VersionMap | None:
    """Return the peer-dependency map of one sub-package.

    ``None`` means there is nothing to check: either the manifest does not
    exist or it declares no peer dependencies.

    Raises
    ------
    ManifestProcessingError
        When the manifest exists but cannot be read, parsed or interpreted.
    """
    path = layout.package_manifest(entry)
    if not fs.exists(path):
        logger.debug("Skipping %s: no %s", entry, layout.manifest_name)
        return None

    result = read_manifest(fs, path)
    try:
        if isinstance(result, ManifestFailed):
            raise result.error
        return extract_version_map(result.document, layout.package_section, result.path)
    except ManifestReadError as exc:
        raise ManifestProcessingError(str(path)) from exc


def inspect_dependencies(
    fs: FileSystem,
    layout: WorkspaceLayout,
    root_versions: VersionMap,
    ignored: Set[str],
    sink: ReportSink,
) -> InspectionResult:
    """Check every non-ignored sub-package against *root_versions*.

    Returns
    -------
    InspectionResult
        Truthy when at least one package reported a problem.

    Raises
    ------
    WorkspaceLayoutError
        When the packages directory cannot be listed.
    ManifestProcessingError
        On the first sub-package manifest that exists but cannot be loaded.
    """
    checked: list[str] = []
    with_problems: list[str] = []

    for entry in list_packages(fs, layout):
        if entry in ignored:
            logger.debug("Ignoring package %s", entry)
            continue

        package_versions = load_package_versions(fs, layout, entry)
        if package_versions is None:
            continue

        checked.append(entry)
        if report_problems(
            entry,
            root_versions,
            package_versions,
            sink,
            manifest_name=layout.manifest_name,
        ):
            with_problems.append(entry)

    logger.debug(
        "Checked %d package(s), %d with problems",
        len(checked),
        len(with_problems),
    )
    return InspectionResult(
        packages_checked=tuple(checked),
        packages_with_problems=tuple(with_problems),
    )
