from __future__ import annotations

from dataclasses import dataclass

import httpx

from viacep_mcp.app.settings import Settings, get_settings
from viacep_mcp.infra.http import close_http_client, create_http_client
from viacep_mcp.infra.providers.viacep import ViaCepClient
from viacep_mcp.services.postcode_service import PostcodeService


@dataclass(frozen=True)
class Container:
    settings: Settings
    http: httpx.AsyncClient
    viacep: ViaCepClient
    postcode_service: PostcodeService

    async def aclose(self) -> None:
        await close_http_client(self.http)


def build_container(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Container:
    settings = settings or get_settings()

    http = create_http_client(
        timeout_seconds=settings.http_timeout_seconds,
        user_agent=settings.http_user_agent,
        transport=transport,
    )
    viacep = ViaCepClient(
        http=http,
        base_url=settings.viacep_base_url,
        timeout_seconds=settings.http_timeout_seconds,
    )
    postcode_service = PostcodeService(
        client=viacep,
        default_timeout_seconds=settings.lookup_timeout_seconds,
    )

    return Container(
        settings=settings,
        http=http,
        viacep=viacep,
        postcode_service=postcode_service,
    )
