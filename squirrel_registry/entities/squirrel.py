# squirrel_registry/entities/squirrel.py
"""
Entity-style data-access client for sightings.

The view layer only ever talks to the store through Squirrel.list() and
Squirrel.create(record); both return a {success, data} envelope or raise
EntityError when the store rejects the call.
"""

import logging
from typing import List, Mapping, Optional, Union

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from squirrel_registry.db.engine import get_default_engine
from squirrel_registry.db.schema import sightings
from squirrel_registry.models.sightings import (
    SightingCreate,
    SightingCreateResponse,
    SightingListResponse,
    SightingOut,
)

logger = logging.getLogger(__name__)


class EntityError(Exception):
    """Raised when the backing store rejects a list or create call."""


def _row_to_sighting(row) -> SightingOut:
    return SightingOut(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        location=row["location"],
        date_spotted=row["date_spotted"],
    )


class Squirrel:
    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else get_default_engine()

    async def list(self) -> SightingListResponse:
        return await run_in_threadpool(self._list)

    async def create(self, record: Union[Mapping, SightingCreate]) -> SightingCreateResponse:
        payload = record if isinstance(record, SightingCreate) else SightingCreate(**record)
        return await run_in_threadpool(self._create, payload)

    def _list(self) -> SightingListResponse:
        stmt = (
            select(
                sightings.c.id,
                sightings.c.name,
                sightings.c.description,
                sightings.c.location,
                sightings.c.date_spotted,
            )
            .order_by(sightings.c.id)
        )

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            logger.exception("Listing sightings failed")
            raise EntityError("Failed to list sightings") from e

        data: List[SightingOut] = [_row_to_sighting(row) for row in rows]
        logger.info("Listed %s sightings", len(data))
        return SightingListResponse(success=True, data=data)

    def _create(self, payload: SightingCreate) -> SightingCreateResponse:
        stmt = (
            insert(sightings)
            .values(
                name=payload.name,
                description=payload.description,
                location=payload.location,
                date_spotted=payload.date_spotted,
            )
            .returning(
                sightings.c.id,
                sightings.c.name,
                sightings.c.description,
                sightings.c.location,
                sightings.c.date_spotted,
            )
        )

        try:
            with self.engine.begin() as conn:
                row = conn.execute(stmt).mappings().one()
        except SQLAlchemyError as e:
            logger.exception("Creating sighting %r failed", payload.name)
            raise EntityError("Failed to create sighting") from e

        sighting = _row_to_sighting(row)
        logger.info("Created sighting %s (%s)", sighting.id, sighting.name)
        return SightingCreateResponse(success=True, data=sighting)
