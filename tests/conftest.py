from __future__ import annotations

import os

import pytest
from pytest_socket import disable_socket, enable_socket


@pytest.fixture(autouse=True)
def _disable_network(request: pytest.FixtureRequest):
    """Block real sockets; HTTP is mocked with ``requests_mock``."""

    if os.getenv("PYTEST_ALLOW_NETWORK", "0") == "1" or request.node.get_closest_marker(
        "network"
    ):
        yield
        return
    disable_socket()
    try:
        yield
    finally:
        enable_socket()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "JENA_RECON_DATASET_URL",
        "JENA_RECON_TIMEOUT",
        "JENA_RECON_LABEL_PROPERTIES",
    ):
        monkeypatch.delenv(name, raising=False)
