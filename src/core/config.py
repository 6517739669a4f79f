import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


DEFAULT_API_FOOTBALL_BASE_URL = "https://v3.football.api-sports.io"


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    v = value.strip().lower()
    if v in {"0", "false", "no"}:
        return False
    return True


@dataclass
class Settings:
    api_football_key: str
    api_football_base_url: str
    api_football_timeout: float
    log_level: str
    enable_prometheus_exporter: bool

    @classmethod
    def from_env(cls) -> "Settings":
        key = os.getenv("API_FOOTBALL_KEY")
        if not key:
            raise ValueError("API_FOOTBALL_KEY non impostata. Aggiungi a .env: API_FOOTBALL_KEY=LA_TUA_CHIAVE")

        def _float(name: str, default: float) -> float:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return float(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un numero (valore: {raw!r})") from e

        base_url = (os.getenv("API_FOOTBALL_BASE_URL") or DEFAULT_API_FOOTBALL_BASE_URL).rstrip("/")
        timeout = _float("API_FOOTBALL_TIMEOUT", 10.0)
        if timeout <= 0:
            timeout = 10.0
        log_level = os.getenv("MATCHES_LOG_LEVEL", "INFO").upper()
        enable_prometheus_exporter = _parse_bool(os.getenv("ENABLE_PROMETHEUS_EXPORTER"), True)

        return cls(
            api_football_key=key,
            api_football_base_url=base_url,
            api_football_timeout=timeout,
            log_level=log_level,
            enable_prometheus_exporter=enable_prometheus_exporter,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def _reset_settings_cache_for_tests() -> None:
    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "_reset_settings_cache_for_tests", "DEFAULT_API_FOOTBALL_BASE_URL"]
