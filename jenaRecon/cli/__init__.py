"""Console entry point for the ``jenaRecon`` command group.

The click group lives in :mod:`jenaRecon.cli.__main__` and is only imported
when the command runs, so importing :mod:`jenaRecon.cli` stays cheap.
"""
from __future__ import annotations

__all__ = ["main"]


def main() -> None:  # pragma: no cover - thin wrapper
    from .__main__ import cli

    cli(prog_name="jenaRecon")
