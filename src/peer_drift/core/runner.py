"""Top-level orchestration of one drift check.

Wires the ignore-list parser, the root manifest and the workspace scan
together.  Process exit codes are chosen by the CLI layer, not here.
"""

from __future__ import annotations

from collections.abc import Sequence

from peer_drift.core.ignore_list import parse_ignore_list
from peer_drift.core.inspector import inspect_dependencies
from peer_drift.core.manifest import read_root_dependencies
from peer_drift.core.models import InspectionResult, WorkspaceLayout
from peer_drift.core.protocols import FileSystem, ReportSink

SUMMARY_LINE: str = "Errors were found while checking the dependencies. See above"


def run(
    args: Sequence[str],
    *,
    fs: FileSystem,
    sink: ReportSink,
    layout: WorkspaceLayout | None = None,
) -> InspectionResult:
    """Run the drift check described by *args*.

    Parameters
    ----------
    args:
        Either empty or ``["--ignore", "pkg1,pkg2"]``.
    fs:
        Filesystem used to read manifests and list the packages directory.
    sink:
        Destination for the human-readable report.
    layout:
        Workspace layout; defaults to ``./package.json`` and ``./packages``.

    Raises
    ------
    InvalidArgumentsError
        Before any file is touched, when *args* is malformed.
    RootManifestUnreadableError
        When the root manifest cannot be loaded.
    WorkspaceLayoutError, ManifestProcessingError
        When the workspace scan cannot complete.
    """
    layout = layout or WorkspaceLayout()
    ignored = parse_ignore_list(args)
    root_versions = read_root_dependencies(fs, layout)

    result = inspect_dependencies(fs, layout, root_versions, ignored, sink)
    if result.any_problem:
        sink.write_line()
        sink.write_line(SUMMARY_LINE)
    return result
