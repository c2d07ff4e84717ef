"""Shared fixtures: a throwaway SQLite store and a recording fake collaborator."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from fastapi.testclient import TestClient

from squirrel_registry.api.sightings import get_squirrel
from squirrel_registry.config import get_settings
from squirrel_registry.db.engine import get_default_engine, get_engine
from squirrel_registry.db.schema import metadata
from squirrel_registry.entities.squirrel import Squirrel
from squirrel_registry.main import app
from squirrel_registry.models.sightings import (
    SightingCreateResponse,
    SightingListResponse,
    SightingOut,
)

TODAY = date(2026, 10, 19)


def make_sighting(id: int = 1, name: str = "Nutkin", **overrides: Any) -> SightingOut:
    """Create a test sighting with default values."""
    fields = {
        "id": id,
        "name": name,
        "description": "fluffy",
        "location": "oak tree",
        "date_spotted": TODAY,
    }
    fields.update(overrides)
    return SightingOut(**fields)


class FakeSquirrel:
    """In-memory collaborator that records the order of list()/create() calls."""

    def __init__(
        self,
        records: list[SightingOut] | None = None,
        list_error: Exception | None = None,
        create_error: Exception | None = None,
        list_success: bool = True,
        create_success: bool = True,
    ) -> None:
        self.records = list(records or [])
        self.list_error = list_error
        self.create_error = create_error
        self.list_success = list_success
        self.create_success = create_success
        self.calls: list[str] = []
        self.created: list[dict] = []

    async def list(self) -> SightingListResponse:
        self.calls.append("list")
        if self.list_error is not None:
            raise self.list_error
        if not self.list_success:
            return SightingListResponse(success=False)
        return SightingListResponse(success=True, data=list(self.records))

    async def create(self, record: dict) -> SightingCreateResponse:
        self.calls.append("create")
        self.created.append(dict(record))
        if self.create_error is not None:
            raise self.create_error
        if not self.create_success:
            return SightingCreateResponse(success=False)
        sighting = SightingOut(
            id=len(self.records) + 1,
            name=record["name"],
            description=record["description"],
            location=record["location"],
            date_spotted=record["dateSpotted"],
        )
        self.records.append(sighting)
        return SightingCreateResponse(success=True, data=sighting)


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite engine with the sightings schema."""
    engine = get_engine(f"sqlite:///{tmp_path / 'squirrels.sqlite'}")
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def squirrel(engine) -> Squirrel:
    return Squirrel(engine)


@pytest.fixture
def client(squirrel):
    """TestClient wired to the temporary store.

    Used without a context manager so the app lifespan does not touch the
    default database.
    """
    app.dependency_overrides[get_squirrel] = lambda: squirrel
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin the date used for new sightings."""
    monkeypatch.setattr(
        "squirrel_registry.views.squirrel_view.today_local", lambda: TODAY
    )
    return TODAY


@pytest.fixture
def fake_client():
    """Build a TestClient whose collaborator is the given fake."""

    def build(squirrel: FakeSquirrel) -> TestClient:
        app.dependency_overrides[get_squirrel] = lambda: squirrel
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()


@pytest.fixture
def fresh_settings():
    """Drop cached settings and engine so environment changes are picked up."""
    get_settings.cache_clear()
    get_default_engine.cache_clear()
    yield get_settings
    get_settings.cache_clear()
    get_default_engine.cache_clear()
