"""Manifest loading — JSON parsing behind an explicit result type.

:func:`read_manifest` never raises for a bad manifest; it returns a
:class:`~peer_drift.core.models.ManifestFailed` so that each caller decides
how fatal the failure is.  Only the root-manifest helper converts a failure
into an exception.
"""

from __future__ import annotations

import json
import logging
from pathlib import PurePath
from typing import Any

from peer_drift.core.models import (
    ManifestFailed,
    ManifestLoaded,
    ManifestResult,
    WorkspaceLayout,
)
from peer_drift.core.protocols import FileSystem
from peer_drift.exceptions import ManifestReadError, RootManifestUnreadableError

logger = logging.getLogger(__name__)


def read_manifest(fs: FileSystem, path: PurePath) -> ManifestResult:
    """Read and parse the JSON manifest at *path*.

    Read failures (``OSError``), decoding failures and JSON syntax errors
    (both ``ValueError``) are logged and returned as :class:`ManifestFailed`.
    A document whose top level is not an object is rejected the same way.
    """
    display = str(path)
    try:
        document: Any = json.loads(fs.read_text(path))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load %s: %s", display, exc)
        error = ManifestReadError(display)
        error.__cause__ = exc
        return ManifestFailed(path=display, error=error)

    if not isinstance(document, dict):
        logger.warning(
            "Manifest %s is a JSON %s, expected an object",
            display,
            type(document).__name__,
        )
        return ManifestFailed(
            path=display,
            error=ManifestReadError(display, f"Manifest {display} is not a JSON object"),
        )

    return ManifestLoaded(path=display, document=document)


def extract_version_map(
    document: dict[str, Any],
    section: str,
    path: str,
) -> dict[str, str] | None:
    """Return the ``section`` mapping of *document*, or ``None`` when absent.

    JSON ``null`` counts as absent.

    Raises
    ------
    ManifestReadError
        If the section is present but is not an object of strings.
    """
    raw = document.get(section)
    if raw is None:
        return None
    if not isinstance(raw, dict) or not all(
        isinstance(version, str) for version in raw.values()
    ):
        raise ManifestReadError(
            path,
            f'"{section}" in {path} must map dependency names to version strings',
        )
    return dict(raw)


def read_root_dependencies(fs: FileSystem, layout: WorkspaceLayout) -> dict[str, str]:
    """Load the version-of-record map from the root manifest.

    A missing ``devDependencies`` section yields an empty map.

    Raises
    ------
    RootManifestUnreadableError
        When the root manifest cannot be read or parsed, or its section is
        malformed.
    """
    result = read_manifest(fs, layout.root_manifest)
    try:
        if isinstance(result, ManifestFailed):
            raise result.error
        versions = extract_version_map(result.document, layout.root_section, result.path)
    except ManifestReadError as exc:
        raise RootManifestUnreadableError(
            f'Cannot read "{layout.root_section}" from main "{layout.manifest_name}"',
            hint=str(exc),
        ) from exc

    logger.debug(
        "Loaded %d root %s from %s",
        len(versions or {}),
        layout.root_section,
        result.path,
    )
    return versions or {}
