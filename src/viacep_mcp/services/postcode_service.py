from __future__ import annotations

import logging

from viacep_mcp.core.context import LookupContext
from viacep_mcp.core.errors import ErrorKind, ViaCepError
from viacep_mcp.core.models import AddressRecord, LookupResult
from viacep_mcp.infra.providers.viacep import CepLookup

log = logging.getLogger(__name__)

_LOUD_KINDS = {ErrorKind.TRANSPORT, ErrorKind.DECODE}


class PostcodeService:
    def __init__(self, *, client: CepLookup, default_timeout_seconds: float | None = None) -> None:
        self._client = client
        self._default_timeout_seconds = default_timeout_seconds

    def _context(self, timeout_seconds: float | None) -> LookupContext:
        timeout = timeout_seconds if timeout_seconds is not None else self._default_timeout_seconds
        if timeout is None or timeout <= 0:
            return LookupContext.background()
        return LookupContext.with_timeout(timeout)

    async def lookup(self, *, cep: str, timeout_seconds: float | None = None) -> LookupResult:
        """
        Look up a CEP and return a LookupResult instead of raising.

        Args:
            cep: passed to ViaCEP as is, without validation
            timeout_seconds: caller deadline. None uses the configured default, <= 0 means no deadline

        Returns:
            the address on success, otherwise the empty address plus error_kind/message
        """
        ctx = self._context(timeout_seconds)
        try:
            address = await self._client.lookup(ctx, cep)
        except ViaCepError as e:
            level = logging.WARNING if e.kind in _LOUD_KINDS else logging.INFO
            log.log(level, "CEP %r lookup failed (%s): %s", cep, e.kind.value, e)
            return LookupResult(address=AddressRecord.empty(), error_kind=e.kind, message=str(e))

        return LookupResult(address=address)
