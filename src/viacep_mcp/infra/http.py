from __future__ import annotations

import logging

import httpx

log = logging.getLogger(__name__)


def create_http_client(
    *,
    timeout_seconds: float,
    user_agent: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build the AsyncClient used for ViaCEP requests.

    ``timeout_seconds`` is the transport-level backstop; it is the only limit
    applied when the caller passes a background context. ``transport`` lets
    tests swap in ``httpx.MockTransport``.
    """
    return httpx.AsyncClient(
        timeout=timeout_seconds,
        headers={"User-Agent": user_agent},
        transport=transport,
    )


async def close_http_client(client: httpx.AsyncClient) -> None:
    try:
        await client.aclose()
    except httpx.HTTPError as e:
        # shutdown path, nothing left to do with the error
        log.debug("Ignoring error while closing HTTP client: %s", e)
