from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "viacep-mcp"


def configure_logging(level: str = "INFO") -> None:
    """Log to stderr; stdout belongs to the MCP stdio transport."""
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    numeric = logging.getLevelName(level.strip().upper())
    root.setLevel(numeric if isinstance(numeric, int) else logging.INFO)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
