from __future__ import annotations

"""Environment driven settings for talking to a Jena Text dataset."""

import os
from dataclasses import dataclass, field
from typing import Tuple

from rdflib.namespace import RDFS

DEFAULT_DATASET_URL = "http://localhost:3030/ds"
DEFAULT_TIMEOUT = 15.0

DATASET_URL_ENV = "JENA_RECON_DATASET_URL"
TIMEOUT_ENV = "JENA_RECON_TIMEOUT"
LABEL_PROPERTIES_ENV = "JENA_RECON_LABEL_PROPERTIES"


@dataclass
class ReconConfig:
    dataset_url: str = DEFAULT_DATASET_URL
    timeout: float = DEFAULT_TIMEOUT
    label_properties: Tuple[str, ...] = field(default_factory=lambda: (str(RDFS.label),))


def _split(raw: str) -> Tuple[str, ...]:
    return tuple(p.strip() for p in raw.split(",") if p.strip())


def load_config() -> ReconConfig:
    """Read settings from the environment, falling back to defaults."""

    cfg = ReconConfig()
    dataset_url = os.getenv(DATASET_URL_ENV)
    if dataset_url:
        cfg.dataset_url = dataset_url.rstrip("/")
    timeout = os.getenv(TIMEOUT_ENV)
    if timeout:
        try:
            cfg.timeout = float(timeout)
        except ValueError as exc:
            raise ValueError(f"{TIMEOUT_ENV} must be a number, got {timeout!r}") from exc
    labels = _split(os.getenv(LABEL_PROPERTIES_ENV, ""))
    if labels:
        cfg.label_properties = labels
    return cfg


__all__ = [
    "DEFAULT_DATASET_URL",
    "DEFAULT_TIMEOUT",
    "DATASET_URL_ENV",
    "TIMEOUT_ENV",
    "LABEL_PROPERTIES_ENV",
    "ReconConfig",
    "load_config",
]
