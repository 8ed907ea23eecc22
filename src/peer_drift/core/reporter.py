"""Rendering of per-package problems as report lines.

Pure presentation: builds strings from :class:`~peer_drift.core.models.Problem`
records and hands them to a :class:`~peer_drift.core.protocols.ReportSink`.
"""

from __future__ import annotations

from peer_drift.core.models import Problem, ProblemKind, VersionMap
from peer_drift.core.problem_finder import find_problems
from peer_drift.core.protocols import ReportSink


def format_problem(problem: Problem, manifest_name: str = "package.json") -> str:
    """Return the single report line describing *problem*."""
    if problem.kind is ProblemKind.NOT_FOUND:
        return f"Dependency {problem.dependency} not found in main {manifest_name}"
    return (
        f"Dependency {problem.dependency} requires version {problem.expected} "
        f"instead of {problem.actual}"
    )


def write_problems(
    package_name: str,
    problems: list[Problem],
    sink: ReportSink,
    manifest_name: str = "package.json",
) -> None:
    """Write the header for *package_name* followed by one line per problem."""
    sink.write_line()
    sink.write_line(f"Problems found in package: {package_name}")
    for problem in problems:
        sink.write_line(format_problem(problem, manifest_name))


def report_problems(
    package_name: str,
    root_versions: VersionMap,
    package_versions: VersionMap,
    sink: ReportSink,
    *,
    manifest_name: str = "package.json",
) -> bool:
    """Report every discrepancy of one package; return whether any exist.

    Nothing is written when the package agrees with the root.
    """
    problems = find_problems(root_versions, package_versions)
    if problems:
        write_problems(package_name, problems, sink, manifest_name)
    return bool(problems)
