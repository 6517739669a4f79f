from __future__ import annotations

import time
from typing import Any, Dict, Optional

import requests

from core.config import get_settings
from core.logging import get_logger
from .exceptions import UpstreamError

log = get_logger(__name__)


class APIFootballHttpClient:
    """
    Client HTTP per API Football (versione requests).
    Un solo tentativo per chiamata: errori di rete, status != 2xx e JSON non
    valido diventano UpstreamError.

    Telemetria minima dell'ultima chiamata:
      - _last_latency_ms: durata in millisecondi (successo o errore)
      - _last_status: ultimo HTTP status code ricevuto (None se nessuna risposta)
    """

    def __init__(self, api_key: Optional[str] = None) -> None:
        self._settings = get_settings()
        self._base_url = self._settings.api_football_base_url
        self._timeout = self._settings.api_football_timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "x-apisports-key": api_key or self._settings.api_football_key,
                "Accept": "application/json",
            }
        )

        self._last_latency_ms: float = 0.0
        self._last_status: Optional[int] = None

    def api_get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self._base_url}/{path.lstrip('/')}"
        log.info("api_football GET %s params=%s", path, params)

        self._last_latency_ms = 0.0
        self._last_status = None
        start = time.perf_counter()

        try:
            resp = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            self._last_latency_ms = (time.perf_counter() - start) * 1000
            log.error("Errore rete %s dopo %.1fms: %s", url, self._last_latency_ms, e)
            raise UpstreamError(f"Errore di rete verso {url}: {e}", detail=str(e)) from e

        self._last_latency_ms = (time.perf_counter() - start) * 1000
        self._last_status = resp.status_code

        if not 200 <= resp.status_code < 300:
            body = (resp.text or "")[:300]
            log.error(
                "Status %s %s (%.1fms) body=%s",
                resp.status_code,
                url,
                self._last_latency_ms,
                body,
                extra={"upstream_status": resp.status_code},
            )
            raise UpstreamError(
                f"Richiesta API fallita (status={resp.status_code})",
                status_code=resp.status_code,
                detail=body,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError(
                f"Risposta non valida (non JSON) status={resp.status_code}",
                status_code=resp.status_code,
            ) from e
        if not isinstance(data, dict):
            raise UpstreamError(
                f"Risposta inattesa: atteso oggetto JSON, ricevuto {type(data).__name__}",
                status_code=resp.status_code,
            )

        log.debug("OK %s %s %.1fms", url, resp.status_code, self._last_latency_ms)
        return data

    def get_stats(self) -> Dict[str, Any]:
        """
        Ritorna telemetria dell'ultima chiamata:
          latency_ms: durata complessiva
          last_status: ultimo status code visto (None se mai ricevuta risposta)
        """
        return {
            "latency_ms": round(self._last_latency_ms, 2),
            "last_status": self._last_status,
        }


def get_http_client() -> APIFootballHttpClient:
    """
    Restituisce sempre una nuova istanza per far sì che i test che
    modificano le variabili d'ambiente abbiano effetto immediato.
    """
    return APIFootballHttpClient()
