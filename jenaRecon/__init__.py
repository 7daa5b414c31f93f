from __future__ import annotations

"""Package metadata."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jenaRecon")
except PackageNotFoundError:  # pragma: no cover - package not installed
    __version__ = "0.1.0"

__all__ = ["__version__"]
