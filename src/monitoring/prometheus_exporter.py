from __future__ import annotations

from typing import Any, Dict, Optional

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    generate_latest,
)
from core.config import get_settings
from core.logging import get_logger

logger = get_logger("monitoring.prometheus_exporter")

# Registry dedicato (non quello globale di prometheus_client)
_REGISTRY = CollectorRegistry()

OUTCOMES = ("ok", "past_date", "upstream_error")

MATCHES_REQUESTS_TOTAL = Counter(
    "matches_requests_total",
    "Richieste /api/matches per esito",
    labelnames=("outcome",),
    registry=_REGISTRY,
)
UPSTREAM_LATENCY_MS = Gauge("matches_upstream_latency_ms", "Latenza ultima chiamata API Football in ms", registry=_REGISTRY)
MATCHES_RETURNED = Gauge("matches_returned", "Fixtures restituite dall'ultima richiesta riuscita", registry=_REGISTRY)


def _exporter_enabled() -> bool:
    try:
        return get_settings().enable_prometheus_exporter
    except ValueError:
        # Config non disponibile (es. API key mancante): le metriche restano attive
        return True


def record_request(outcome: str, fetch_stats: Optional[Dict[str, Any]] = None, returned: Optional[int] = None) -> None:
    """
    Aggiorna le metriche dopo una richiesta /api/matches.
    Non solleva eccezioni per esiti sconosciuti (log e skip).
    """
    if not _exporter_enabled():
        logger.debug("Exporter disabilitato, skip update")
        return
    if outcome not in OUTCOMES:
        logger.warning("Esito metriche sconosciuto: %s", outcome)
        return

    MATCHES_REQUESTS_TOTAL.labels(outcome=outcome).inc()
    if fetch_stats:
        UPSTREAM_LATENCY_MS.set(fetch_stats.get("latency_ms", 0) or 0)
    if returned is not None:
        MATCHES_RETURNED.set(returned)


def generate_prometheus_text() -> bytes:
    return generate_latest(_REGISTRY)


__all__ = ["record_request", "generate_prometheus_text", "_REGISTRY", "OUTCOMES"]
