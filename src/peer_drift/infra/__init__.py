"""Infrastructure layer — operating-system integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Must satisfy the protocols declared in ``peer_drift.core.protocols``.
"""

from peer_drift.infra.local_fs import LocalFileSystem

__all__: list[str] = ["LocalFileSystem"]
