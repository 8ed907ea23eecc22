"""Custom exception hierarchy for peer-drift.

Every fatal condition that crosses a layer boundary is a subclass of
:class:`PeerDriftError`.  Raw ``OSError`` / ``ValueError`` instances from
filesystem access or JSON parsing never escape the manifest layer; they
are chained as ``__cause__`` of a typed error defined here.

Dependency problems (missing or mismatched versions) are *findings*, not
errors, and are never raised.

Hierarchy
---------
PeerDriftError
├── InvalidArgumentsError
├── ManifestReadError
├── RootManifestUnreadableError
├── ManifestProcessingError
└── WorkspaceLayoutError
"""

from __future__ import annotations

IGNORE_USAGE_HINT: str = 'to ignore packages use "--ignore pkg1,pkg2,pkg3"'


class PeerDriftError(Exception):
    """Base exception for all peer-drift errors.

    The CLI error boundary renders ``str(exc)`` plus the optional
    :attr:`hint` and maps the error to a non-zero exit code.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class InvalidArgumentsError(PeerDriftError):
    """Raised when the command line does not match ``[--ignore pkg1,pkg2]``."""


# --- Manifests -------------------------------------------------------------

class ManifestReadError(PeerDriftError):
    """A manifest could not be read, decoded or parsed."""

    def __init__(self, path: str, message: str | None = None) -> None:
        super().__init__(message or f"Cannot read manifest {path}")
        self.path: str = path


class RootManifestUnreadableError(PeerDriftError):
    """Raised when the root manifest is missing or unparsable."""


class ManifestProcessingError(PeerDriftError):
    """Raised when an existing sub-package manifest cannot be processed."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot process {path}")
        self.path: str = path


# --- Workspace layout ------------------------------------------------------

class WorkspaceLayoutError(PeerDriftError):
    """Raised when the packages directory cannot be listed."""
