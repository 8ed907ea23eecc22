"""Core layer — manifest interpretation, comparison and reporting.

Rules
-----
* No ``print()`` calls; report lines go through a ``ReportSink``.
* Filesystem access only through the ``FileSystem`` protocol.
* No imports from ``cli`` or ``infra``.
"""

from peer_drift.core.ignore_list import parse_ignore_list
from peer_drift.core.inspector import inspect_dependencies
from peer_drift.core.manifest import read_manifest, read_root_dependencies
from peer_drift.core.models import (
    InspectionResult,
    ManifestFailed,
    ManifestLoaded,
    Problem,
    ProblemKind,
    WorkspaceLayout,
)
from peer_drift.core.problem_finder import find_problems
from peer_drift.core.protocols import FileSystem, ReportSink
from peer_drift.core.reporter import report_problems
from peer_drift.core.runner import run

__all__: list[str] = [
    "FileSystem",
    "InspectionResult",
    "ManifestFailed",
    "ManifestLoaded",
    "Problem",
    "ProblemKind",
    "ReportSink",
    "WorkspaceLayout",
    "find_problems",
    "inspect_dependencies",
    "parse_ignore_list",
    "read_manifest",
    "read_root_dependencies",
    "report_problems",
    "run",
]
