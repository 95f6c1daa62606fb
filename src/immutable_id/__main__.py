"""Allow ``python -m immutable_id`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m immutable_id`` behaves identically to the
``immutable-id`` console script.
"""

from __future__ import annotations

from immutable_id.cli.app import cli

if __name__ == "__main__":
    cli()
