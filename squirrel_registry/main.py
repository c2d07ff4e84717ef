# squirrel_registry/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from squirrel_registry.api.pages import router as pages_router
from squirrel_registry.api.sightings import router as sightings_router
from squirrel_registry.config import get_settings
from squirrel_registry.db.engine import get_default_engine
from squirrel_registry.db.schema import metadata

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # create_all skips tables that already exist
    metadata.create_all(get_default_engine())
    logger.info("Sightings schema ready")
    yield


app = FastAPI(
    title="Neighborhood Squirrel Registry",
    version="0.1.0",
    lifespan=lifespan,
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(pages_router)
app.include_router(sightings_router)
