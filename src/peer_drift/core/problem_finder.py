"""Comparison of a package's peer dependencies against the root versions.

Versions are opaque strings compared for exact equality; no semver range
interpretation happens here.
"""

from __future__ import annotations

from peer_drift.core.models import Problem, ProblemKind, VersionMap


def find_problems(root_versions: VersionMap, package_versions: VersionMap) -> list[Problem]:
    """Return one :class:`Problem` per package dependency that disagrees.

    Problems follow the iteration order of *package_versions*; dependencies
    whose version equals the root one are left out entirely.
    """
    problems: list[Problem] = []
    for dependency, actual in package_versions.items():
        if dependency not in root_versions:
            problems.append(Problem(ProblemKind.NOT_FOUND, dependency, actual))
            continue
        expected = root_versions[dependency]
        if expected != actual:
            problems.append(
                Problem(ProblemKind.VERSION_MISMATCH, dependency, actual, expected)
            )
    return problems
