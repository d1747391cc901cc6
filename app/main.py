from __future__ import annotations

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="PurpleAir AQI Bot",
        description="Answers '!aqi <sensor id>' chat commands with PurpleAir PM2.5 readings as AQI.",
        version="0.1.0",
    )
    app.include_router(router)
    return app


app = create_app()
