from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # ViaCEP
    viacep_base_url: str

    # HTTP
    http_timeout_seconds: float
    http_user_agent: str

    # caller deadline per lookup (None = transport timeout only)
    lookup_timeout_seconds: float | None

    # Logging
    log_level: str


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _float(name: str, default: float) -> float:
    v = _clean(os.getenv(name, str(default)))
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Invalid {name}={v!r} in environment (.env): expected a number.") from e


def get_settings() -> Settings:
    """
    Read settings from the environment (.env).
    - LOOKUP_TIMEOUT_SECONDS <= 0 disables the caller deadline; only the HTTP timeout applies
    """
    lookup_timeout = _float("LOOKUP_TIMEOUT_SECONDS", 15.0)

    return Settings(
        viacep_base_url=_clean(os.getenv("VIACEP_BASE_URL")) or "https://viacep.com.br/ws",
        http_timeout_seconds=_float("HTTP_TIMEOUT_SECONDS", 10.0),
        http_user_agent=_clean(os.getenv("HTTP_USER_AGENT", "viacep-mcp/0.1.0")),
        lookup_timeout_seconds=lookup_timeout if lookup_timeout > 0 else None,
        log_level=_clean(os.getenv("LOG_LEVEL", "INFO")).upper() or "INFO",
    )
