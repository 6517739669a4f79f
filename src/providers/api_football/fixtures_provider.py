from __future__ import annotations

from typing import Any, Dict, List, Optional

from core.logging import get_logger
from .base import FixturesProviderBase
from .exceptions import UpstreamError
from .http_client import APIFootballHttpClient, get_http_client

log = get_logger(__name__)


class ApiFootballFixturesProvider(FixturesProviderBase):
    """
    Provider che interroga l'endpoint /fixtures dell'API Football per una data.
    - Restituisce la 'response' grezza (filtro e proiezione sono a valle)
    - 'errors' non vuoto nel body o 'response' non lista -> UpstreamError
    """

    def __init__(self, client: Optional[APIFootballHttpClient] = None) -> None:
        self._client = client or get_http_client()

    def fetch_fixtures(self, date: str) -> List[Dict[str, Any]]:
        raw = self._client.api_get("/fixtures", params={"date": date})

        # L'API risponde 200 anche con chiave errata: l'errore sta in 'errors'
        errors = raw.get("errors")
        if errors:
            log.error("api_football errors=%s", errors, extra={"query_date": date})
            raise UpstreamError("API Football ha risposto con errori", detail=errors)

        response = raw.get("response")
        if not isinstance(response, list):
            log.warning("Formato inatteso: 'response' non è una lista")
            raise UpstreamError("Formato inatteso: 'response' non è una lista", detail=response)
        log.info(
            "fixtures ricevute=%s date=%s",
            len(response),
            date,
            extra={"fetch_stats": self._client.get_stats()},
        )
        return response

    def get_last_stats(self) -> Dict[str, Any]:
        return self._client.get_stats()


__all__ = ["ApiFootballFixturesProvider"]
