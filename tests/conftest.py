from __future__ import annotations

import pytest


@pytest.fixture
def anyio_backend() -> str:
    # Force AnyIO-managed tests to use asyncio only
    return "asyncio"


@pytest.fixture(autouse=True)
def clear_reqparser_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "REQPARSER_HOST",
        "REQPARSER_PORT",
        "REQPARSER_FORMAT",
        "REQPARSER_PRETTY",
        "REQPARSER_HEADERS",
        "REQPARSER_MAX_DEPTH",
        "REQPARSER_LOG_LEVEL",
        "K_SERVICE",
        "KUBERNETES_SERVICE_HOST",
    ):
        monkeypatch.delenv(name, raising=False)
