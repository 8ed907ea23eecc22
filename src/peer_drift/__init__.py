"""peer-drift — detect peer-dependency version drift in a package workspace.

Compares every sub-package's ``peerDependencies`` against the root
manifest's ``devDependencies`` and reports any mismatch.
"""

from peer_drift.version import __version__

__all__: list[str] = ["__version__"]
