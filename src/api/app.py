from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI

from core.config import get_settings
from core.logging import get_logger

from api.routes.health import router as health_router
from api.routes.matches import router as matches_router
from api.routes.metrics import router as metrics_router

logger = get_logger("api.app")


def create_app() -> FastAPI:
    # .env non sovrascrive variabili già presenti nell'ambiente
    load_dotenv(override=False)
    app = FastAPI(title="Upcoming Matches API", version="0.1.0")
    try:
        get_settings()
    except ValueError as exc:
        logger.error("Impossibile caricare settings: %s", exc)

    app.include_router(health_router)
    app.include_router(matches_router)
    app.include_router(metrics_router)
    return app


app = create_app()


# Avvio rapido: python -m api.app (da src/ o con il pacchetto installato)
if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run("api.app:app", host="0.0.0.0", port=int(os.getenv("PORT") or 5000), reload=False)
