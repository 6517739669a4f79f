from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class FixturesProviderBase(ABC):
    """
    Interfaccia astratta per un provider di fixtures.

    Le implementazioni restituiscono gli elementi grezzi dell'endpoint
    (una lista di dict), senza filtri né proiezioni.
    """

    @abstractmethod
    def fetch_fixtures(self, date: str) -> List[Dict[str, Any]]:
        """
        Recupera le fixtures del giorno indicato.

        Parametri:
            date: data in formato YYYY-MM-DD.

        Ritorna:
            Lista di dizionari (fixture records grezzi).

        Solleva:
            UpstreamError se il provider non è raggiungibile o risponde con errore.
        """
        raise NotImplementedError

    def get_last_stats(self) -> Dict[str, Any]:
        """Telemetria dell'ultima chiamata (vuota se il provider non la raccoglie)."""
        return {}
