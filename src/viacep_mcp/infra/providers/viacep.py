from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import httpx
from pydantic import ValidationError as PydanticValidationError

from viacep_mcp.core.context import LookupContext
from viacep_mcp.core.errors import (
    DecodeError,
    InvalidInputError,
    LookupCancelledError,
    NotFoundError,
    TransportError,
)
from viacep_mcp.core.models import AddressRecord

log = logging.getLogger(__name__)

VIACEP_BASE_URL = "https://viacep.com.br/ws"

# Lookups whose result lost the race against their context. Holding a
# reference keeps the task alive until the transport finishes or times out.
_abandoned: set[asyncio.Task[AddressRecord]] = set()


class CepLookup(Protocol):
    async def lookup(self, ctx: LookupContext, cep: str) -> AddressRecord: ...


async def parse_response(response: httpx.Response) -> AddressRecord:
    """
    Classify a ViaCEP response.

    - 400: the CEP is malformed; the body is never read
    - body that is not an address object: DecodeError
    - ``"erro": true``: the CEP is well-formed but unknown
    """
    if response.status_code == httpx.codes.BAD_REQUEST:
        raise InvalidInputError()

    try:
        body = await response.aread()
    except httpx.HTTPError as e:
        raise TransportError(f"Failed to read ViaCEP response: {e}") from e

    try:
        record = AddressRecord.model_validate_json(body)
    except PydanticValidationError as e:
        raise DecodeError(f"Unexpected ViaCEP payload: {e}") from e

    if record.not_found:
        raise NotFoundError()
    return record


class ViaCepClient:
    def __init__(
        self,
        *,
        http: httpx.AsyncClient,
        base_url: str = VIACEP_BASE_URL,
        timeout_seconds: float | None = None,
    ) -> None:
        """
        ``timeout_seconds`` bounds the whole request (connect through the last
        body byte). httpx only bounds each connect/read separately.
        """
        self._http = http
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, cep: str) -> str:
        return f"{self._base_url}/{cep}/json"

    async def _request(self, url: str) -> AddressRecord:
        try:
            async with self._http.stream("GET", url) as response:
                return await parse_response(response)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.warning("ViaCEP HTTP error: %s", e)
            raise TransportError(f"ViaCEP request failed: {e}") from e

    async def _fetch(self, url: str) -> AddressRecord:
        try:
            return await asyncio.wait_for(self._request(url), timeout=self._timeout_seconds)
        except asyncio.TimeoutError as e:
            log.warning("ViaCEP request exceeded %ss", self._timeout_seconds)
            raise TransportError(f"ViaCEP request exceeded {self._timeout_seconds}s") from e

    async def lookup(self, ctx: LookupContext, cep: str) -> AddressRecord:
        """
        Look up a CEP, returning as soon as the request finishes or ``ctx`` fires.

        The request runs in its own task. If the context wins, the task is left
        running (bounded by the transport timeout) and its outcome is dropped.

        Raises:
            InvalidInputError, NotFoundError, DecodeError, TransportError,
            LookupCancelledError
        """
        work = asyncio.create_task(self._fetch(self.url_for(cep)))
        watcher = asyncio.create_task(ctx.wait())
        try:
            done, _ = await asyncio.wait({work, watcher}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            watcher.cancel()
            if not work.done():
                _abandon(work)

        # both may be ready at once; either outcome is acceptable
        if work in done:
            return work.result()

        reason = watcher.result()
        log.info("Lookup for CEP %r abandoned: %s", cep, reason)
        raise LookupCancelledError(reason) from reason


def _abandon(task: asyncio.Task[AddressRecord]) -> None:
    _abandoned.add(task)
    task.add_done_callback(_discard)


def _discard(task: asyncio.Task[AddressRecord]) -> None:
    _abandoned.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        log.debug("Discarded late lookup failure: %s", exc)
    else:
        log.debug("Discarded late lookup result")
