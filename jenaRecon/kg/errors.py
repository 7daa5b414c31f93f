from __future__ import annotations

"""Errors raised while composing queries."""

from dataclasses import dataclass
from typing import Dict


@dataclass
class QueryPreconditionError(ValueError):
    """Raised when a query cannot be composed from the given inputs."""

    code: str
    message: str

    def __str__(self) -> str:
        return self.message

    def as_dict(self) -> Dict[str, str]:
        return {"code": self.code, "message": self.message}


__all__ = ["QueryPreconditionError"]
