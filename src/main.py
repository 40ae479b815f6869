import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from alembic import command
from alembic.config import Config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.logging import setup_logging
from src.config.monitoring import init_sentry
from src.config.settings import settings
from src.guests.routers import router as guests_router
from src.routers import healthz

logger = logging.getLogger(__name__)


async def run_migrations():
    # alembic's env.py drives its own event loop
    alembic_cfg = Config("alembic.ini")
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        logger.info("Upgrading invitees schema to head")
        await run_migrations()
    yield


init_sentry()

app = FastAPI(
    title="Wedding RSVP API",
    description="Guest RSVP links and the organizer's invitee list",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(healthz.router, prefix="/healthz", tags=["Healthz"])
# RSVP and Summary tags are set per feature router
app.include_router(guests_router)


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Wedding RSVP API"}


if __name__ == "__main__":
    uvicorn.run("src.main:app", host=settings.app_host, port=settings.app_port, reload=settings.debug)
