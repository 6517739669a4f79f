from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from core.fixture_record import FixtureRecord
from core.logging import get_logger

logger = get_logger("core.fixture_query")

# Solo forma YYYY-MM-DD (niente YYYYMMDD o timestamp completi)
_QUERY_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def local_now() -> datetime:
    """Istante corrente sull'orologio locale del servizio (timezone-aware)."""
    return datetime.now().astimezone()


def resolve_query_date(raw: Optional[str], today: date) -> date:
    """
    Data da interrogare a partire dal parametro 'date' della richiesta.
    Parametro assente, con forma sbagliata o data di calendario impossibile
    -> fallback silenzioso su 'today'.
    """
    if not raw or not _QUERY_DATE_RE.match(raw):
        return today
    try:
        return date.fromisoformat(raw)
    except ValueError:
        logger.info("Data non valida %r, uso %s", raw, today.isoformat())
        return today


def is_past_date(query_date: date, today: date) -> bool:
    return query_date < today


def select_upcoming(items: Iterable[Dict[str, Any]], now: datetime) -> List[FixtureRecord]:
    """
    Proietta gli elementi grezzi dell'API in FixtureRecord, tiene solo quelli con
    calcio d'inizio >= now e li ordina per calcio d'inizio crescente.
    """
    upcoming: List[FixtureRecord] = []
    skipped_invalid = 0
    for item in items:
        if not isinstance(item, dict):
            skipped_invalid += 1
            continue
        record = FixtureRecord.from_api(item)
        kickoff = record.kickoff()
        if kickoff is None:
            skipped_invalid += 1
            continue
        if kickoff >= now:
            upcoming.append(record)
    if skipped_invalid:
        logger.warning("Scartate %s fixtures con data non interpretabile", skipped_invalid)
    # sort stabile: a parità di orario resta l'ordine dell'API
    upcoming.sort(key=lambda r: r.kickoff())
    return upcoming


__all__ = ["local_now", "resolve_query_date", "is_past_date", "select_upcoming"]
