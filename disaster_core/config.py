# disaster_core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_DATA_URL = (
    "https://raw.githubusercontent.com/nitanagdeote/"
    "Federal-Emergency-Management-Agency-FEMA-Project/refs/heads/main/data.csv"
)

# source column names in the FEMA declarations CSV
COL_STATE = "state"
COL_DECLARATION_DATE = "declarationDate"
COL_INCIDENT_TYPE = "incidentType"

ENV_DATA_URL = "DISASTERS_CSV_URL"
ENV_TIMEOUT = "DISASTERS_TIMEOUT"
ENV_CACHE_TTL = "DISASTERS_CACHE_TTL"
ENV_TOP_N = "DISASTERS_TOP_N"
ENV_LOG_LEVEL = "DISASTERS_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    data_url: str = DEFAULT_DATA_URL
    request_timeout: int = 60
    cache_ttl: int = 6 * 3600
    top_n_regions: int = 20
    log_level: str = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def get_settings() -> Settings:
    """Settings with environment overrides applied."""
    url = (os.getenv(ENV_DATA_URL) or "").strip() or DEFAULT_DATA_URL
    return Settings(
        data_url=url,
        request_timeout=_env_int(ENV_TIMEOUT, 60),
        cache_ttl=_env_int(ENV_CACHE_TTL, 6 * 3600),
        top_n_regions=_env_int(ENV_TOP_N, 20),
        log_level=(os.getenv(ENV_LOG_LEVEL) or "INFO").strip().upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once the root logger has handlers
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
