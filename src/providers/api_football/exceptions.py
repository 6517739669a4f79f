from __future__ import annotations

from typing import Optional


class UpstreamError(Exception):
    """Sollevata quando la chiamata all'API Football fallisce (rete, status != 2xx, payload non valido)."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: object = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
