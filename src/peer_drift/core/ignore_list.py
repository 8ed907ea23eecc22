"""Parsing of the ``--ignore pkg1,pkg2`` command-line pair."""

from __future__ import annotations

from collections.abc import Sequence

from peer_drift.exceptions import IGNORE_USAGE_HINT, InvalidArgumentsError

IGNORE_FLAGS: tuple[str, ...] = ("--ignore", "-i")


def split_package_names(raw: str) -> frozenset[str]:
    """Split a comma-separated list, trimming whitespace and dropping blanks."""
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


def parse_ignore_list(args: Sequence[str]) -> frozenset[str]:
    """Return the set of package directory names to skip.

    Accepts either no arguments at all or exactly an ignore flag followed
    by its comma-separated value.

    Raises
    ------
    InvalidArgumentsError
        For any other argument shape.
    """
    if not args:
        return frozenset()
    if len(args) == 2 and args[0] in IGNORE_FLAGS:
        return split_package_names(args[1])
    raise InvalidArgumentsError(
        "Invalid arguments passed.",
        hint=IGNORE_USAGE_HINT,
    )
