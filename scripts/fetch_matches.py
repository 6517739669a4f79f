from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv

from core.fixture_query import is_past_date, local_now, resolve_query_date, select_upcoming
from core.logging import get_logger
from providers.api_football.exceptions import UpstreamError
from providers.api_football.fixtures_provider import ApiFootballFixturesProvider

log = get_logger("scripts.fetch_matches")


def _write_json_atomic(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as fh:
            json.dump(data, fh, ensure_ascii=False, indent=2)
        os.replace(tmp, path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


def main(argv: Optional[List[str]] = None) -> int:
    """
    Stessa logica di GET /api/matches da riga di comando.
    Exit code: 0 ok, 2 data nel passato, 1 errore upstream/config.
    """
    ap = argparse.ArgumentParser(description="Fetch upcoming football matches for a date (API Football)")
    ap.add_argument("--date", default=None, help="YYYY-MM-DD (default: oggi)")
    ap.add_argument("--out", default=None, type=str, help="File JSON di output (default: stdout)")
    args = ap.parse_args(argv)

    load_dotenv(override=False)
    now = local_now()
    query_date = resolve_query_date(args.date, now.date())
    if is_past_date(query_date, now.date()):
        log.error("Data nel passato: %s", query_date.isoformat())
        return 2

    try:
        items = ApiFootballFixturesProvider().fetch_fixtures(query_date.isoformat())
    except (UpstreamError, ValueError) as exc:
        log.error("Fetch fallito: %s", exc, extra={"query_date": query_date.isoformat()})
        return 1

    matches = [r.to_dict() for r in select_upcoming(items, now)]
    if args.out:
        _write_json_atomic(Path(args.out), matches)
        log.info("Scritte %s fixtures in %s", len(matches), args.out)
    else:
        json.dump(matches, sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
