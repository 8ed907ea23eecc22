"""Allow ``python -m peer_drift`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m peer_drift`` behaves identically to the ``peer-drift``
console script.
"""

from __future__ import annotations

from peer_drift.cli.app import cli

if __name__ == "__main__":
    cli()
