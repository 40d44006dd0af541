from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from app.api import routes
from app.config import get_settings
from app.middleware.request_tracker import RequestTrackerMiddleware
from app.services.external_api import OpenWeatherClient
from app.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Weather Lookup API...")

    weather_client = OpenWeatherClient()
    app.state.weather_client = weather_client

    if weather_client.credential_status() != "configured":
        logger.warning(
            "OpenWeatherMap API key is not usable, weather requests will fail",
            extra={"event": "misconfigured", "credential": weather_client.credential_status()},
        )

    yield

    logger.info("Shutting down Weather Lookup API...")

    await weather_client.close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestTrackerMiddleware)

Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

app.include_router(routes.router, prefix="/api")

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower()
    )
