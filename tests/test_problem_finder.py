"""Tests for the comparison logic (core/problem_finder.py).

The finder is pure, so these tests need no fixtures.
"""

from __future__ import annotations

import pytest

from peer_drift.core.models import Problem, ProblemKind
from peer_drift.core.problem_finder import find_problems


class TestFindProblems:
    def test_matching_versions_produce_nothing(self) -> None:
        assert find_problems({"lodash": "4.17.21"}, {"lodash": "4.17.21"}) == []

    def test_version_mismatch(self) -> None:
        problems = find_problems({"lodash": "4.17.21"}, {"lodash": "4.17.0"})
        assert problems == [
            Problem(ProblemKind.VERSION_MISMATCH, "lodash", "4.17.0", "4.17.21"),
        ]

    def test_not_found(self) -> None:
        problems = find_problems({}, {"react": "18.0.0"})
        assert problems == [Problem(ProblemKind.NOT_FOUND, "react", "18.0.0")]

    @pytest.mark.parametrize("root", [{}, {"a": "1"}, {"a": "1", "b": "2"}])
    def test_empty_package_map(self, root: dict[str, str]) -> None:
        assert find_problems(root, {}) == []

    def test_subset_with_identical_versions(self) -> None:
        root = {"a": "1.0.0", "b": "^2.0.0", "c": "~3.1.0"}
        assert find_problems(root, {"a": "1.0.0", "c": "~3.1.0"}) == []

    def test_comparison_is_exact_not_semver(self) -> None:
        problems = find_problems({"react": "^18.0.0"}, {"react": "18.0.0"})
        assert [p.kind for p in problems] == [ProblemKind.VERSION_MISMATCH]

    def test_empty_root_version_is_still_found(self) -> None:
        problems = find_problems({"x": ""}, {"x": "1"})
        assert problems[0].kind is ProblemKind.VERSION_MISMATCH
        assert problems[0].expected == ""

    def test_order_follows_package_map(self) -> None:
        root = {"b": "1", "d": "1"}
        package = {"d": "2", "a": "1", "c": "1", "b": "1"}
        problems = find_problems(root, package)
        assert [p.dependency for p in problems] == ["d", "a", "c"]
        assert [p.kind for p in problems] == [
            ProblemKind.VERSION_MISMATCH,
            ProblemKind.NOT_FOUND,
            ProblemKind.NOT_FOUND,
        ]

    def test_one_entry_per_offending_key(self) -> None:
        root = {"a": "1", "b": "2", "c": "3"}
        package = {"a": "1", "b": "9", "x": "1", "c": "3"}
        assert {p.dependency for p in find_problems(root, package)} == {"b", "x"}

    def test_inputs_not_mutated(self) -> None:
        root = {"a": "1"}
        package = {"a": "2", "b": "1"}
        find_problems(root, package)
        assert root == {"a": "1"}
        assert package == {"a": "2", "b": "1"}
