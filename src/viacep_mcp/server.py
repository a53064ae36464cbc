from __future__ import annotations

import logging

from fastmcp import FastMCP

from viacep_mcp.app.container import build_container
from viacep_mcp.app.logger import configure_logging
from viacep_mcp.app.settings import Settings, get_settings
from viacep_mcp.tools.postcode_tools import register_postcode_tools

log = logging.getLogger(__name__)


def create_server(settings: Settings | None = None) -> FastMCP:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    mcp = FastMCP("viacep-mcp")
    try:
        container = build_container(settings)
        register_postcode_tools(mcp, container)
        log.info("ViaCEP tools registered (base_url=%s)", settings.viacep_base_url)
    except Exception as e:
        log.error("Failed to register ViaCEP tools: %s", e, exc_info=True)
        raise
    return mcp


mcp = create_server()


if __name__ == "__main__":
    mcp.run(
        transport="http",
        host="127.0.0.1",
        port=3334,
        path="/mcp",
    )
