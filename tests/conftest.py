"""Shared pytest fixtures for vlcremote tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


class StubTransport:
    """In-memory transport recording every requested endpoint."""

    def __init__(self, response: bytes | BaseException = b"{}") -> None:
        self.response: bytes | BaseException = response
        self.endpoints: list[str] = []

    def get(self, endpoint: str) -> bytes:
        self.endpoints.append(endpoint)
        if isinstance(self.response, BaseException):
            raise self.response
        return self.response


@pytest.fixture
def stub_transport() -> StubTransport:
    """Provide a transport answering every request with an empty JSON object."""

    return StubTransport()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the singleton."""

    import vlcremote.config.config as config_module

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("VLCREMOTE_CONFIG", str(config_path))
    for env_var in config_module.ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_path
    finally:
        config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
