"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from viacep_mcp.infra.http import create_http_client
from viacep_mcp.infra.providers.viacep import ViaCepClient

TESTDATA = Path(__file__).parent / "testdata"
BASE_URL = "http://example/ws"


def load_testdata(name: str) -> bytes:
    return (TESTDATA / name).read_bytes()


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """ViaCEP body for 01001-000 (Praça da Sé)."""
    return json.loads(load_testdata("valid_result.json"))


@pytest.fixture
def make_client() -> Callable[..., ViaCepClient]:
    """Build a ViaCepClient whose requests are answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], Any], *, timeout_seconds: float = 3.0) -> ViaCepClient:
        http = create_http_client(
            timeout_seconds=timeout_seconds,
            user_agent="viacep-mcp-tests",
            transport=httpx.MockTransport(handler),
        )
        return ViaCepClient(http=http, base_url=BASE_URL, timeout_seconds=timeout_seconds)

    return _make


@pytest.fixture
def testdata() -> Callable[[str], bytes]:
    return load_testdata
