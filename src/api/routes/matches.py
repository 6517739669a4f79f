from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from core.fixture_query import is_past_date, local_now, resolve_query_date, select_upcoming
from core.logging import get_logger
from monitoring.prometheus_exporter import record_request
from providers.api_football.base import FixturesProviderBase
from providers.api_football.exceptions import UpstreamError
from providers.api_football.fixtures_provider import ApiFootballFixturesProvider

router = APIRouter(prefix="/api", tags=["matches"])
logger = get_logger("api.routes.matches")

PAST_DATE_ERROR = "Selected date cannot be in the past"
UPSTREAM_ERROR = "Error fetching match data"


def get_clock() -> Callable[[], datetime]:
    return local_now


def get_provider_factory() -> Callable[[], FixturesProviderBase]:
    # Factory: il provider (e la config con la API key) si crea solo dopo la validazione della data
    return ApiFootballFixturesProvider


@router.get("/matches", summary="Fixtures future per data")
def get_matches(
    date: Optional[str] = Query(None, description="Data YYYY-MM-DD (default: oggi)"),
    clock: Callable[[], datetime] = Depends(get_clock),
    provider_factory: Callable[[], FixturesProviderBase] = Depends(get_provider_factory),
) -> Any:
    """
    Fixtures del giorno richiesto con calcio d'inizio >= adesso, ordinate per orario.
    - data nel passato -> 400, nessuna chiamata upstream
    - errore upstream -> 500 con messaggio fisso (dettaglio solo nei log)
    """
    now = clock()
    today = now.date()
    query_date = resolve_query_date(date, today)

    if is_past_date(query_date, today):
        logger.info("Data nel passato rifiutata: %s", query_date.isoformat(), extra={"query_date": query_date.isoformat()})
        record_request("past_date")
        return JSONResponse(status_code=400, content={"error": PAST_DATE_ERROR})

    try:
        provider = provider_factory()
        items = provider.fetch_fixtures(query_date.isoformat())
        fetch_stats = provider.get_last_stats()
        matches: List[Dict[str, Any]] = [record.to_dict() for record in select_upcoming(items, now)]
    except (UpstreamError, ValueError) as exc:
        detail = exc.detail if isinstance(exc, UpstreamError) else None
        logger.error(
            "API Error: %s detail=%s",
            exc,
            detail,
            extra={"query_date": query_date.isoformat()},
        )
        record_request("upstream_error")
        return JSONResponse(status_code=500, content={"error": UPSTREAM_ERROR})

    record_request("ok", fetch_stats=fetch_stats, returned=len(matches))
    return matches
