# squirrel_registry/views/squirrel_view.py
"""
State controller for the squirrel registry page.

One SquirrelView is built per page request. It owns the record list, the
loading flag, the modal visibility and the entry form, and reaches the store
only through the Squirrel collaborator's list()/create().
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Mapping, Optional

from zoneinfo import ZoneInfo

from squirrel_registry.config import get_settings
from squirrel_registry.entities.squirrel import EntityError, Squirrel
from squirrel_registry.forms import SightingForm
from squirrel_registry.models.sightings import SightingOut

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load squirrels"
SUBMIT_FAILED = "Failed to add squirrel"
SUBMIT_OK = "Squirrel added successfully!"


def today_local() -> date:
    return datetime.now(ZoneInfo(get_settings().timezone)).date()


@dataclass
class Notification:
    level: str  # "success" | "error"
    text: str


class SquirrelView:
    def __init__(self, squirrel: Squirrel, today: Optional[Callable[[], date]] = None):
        self.squirrel = squirrel
        self.today = today or today_local

        self.records: List[SightingOut] = []
        self.loading = False
        self.modal_visible = False
        self.form = SightingForm()
        self.notifications: List[Notification] = []

    @property
    def show_empty_state(self) -> bool:
        return not self.records and not self.loading

    def notify(self, level: str, text: str) -> None:
        self.notifications.append(Notification(level=level, text=text))

    async def mount(self) -> None:
        await self.load_records()

    def open_modal(self) -> None:
        self.modal_visible = True

    def cancel(self) -> None:
        # nothing entered is persisted
        self.modal_visible = False
        self.form.reset()

    async def load_records(self) -> None:
        self.loading = True
        try:
            response = await self.squirrel.list()
            if response.success:
                self.records = list(response.data or [])
            else:
                logger.warning("Squirrel.list() returned success=false")
                self.records = []
                self.notify("error", LOAD_FAILED)
        except EntityError:
            logger.warning("Squirrel.list() rejected", exc_info=True)
            self.records = []
            self.notify("error", LOAD_FAILED)
        finally:
            self.loading = False

    async def submit(self, values: Mapping[str, str]) -> bool:
        """
        Validate the entered values and create a sighting dated today.

        Returns True when the record was created. On any failure the modal
        stays open and the entered values are kept on self.form.
        """
        self.modal_visible = True
        self.form.fill(values)
        if not self.form.validate():
            return False

        record = self.form.to_record(self.today())
        try:
            response = await self.squirrel.create(record)
        except EntityError:
            logger.warning("Squirrel.create() rejected", exc_info=True)
            self.notify("error", SUBMIT_FAILED)
            return False

        if not response.success:
            logger.warning("Squirrel.create() returned success=false")
            self.notify("error", SUBMIT_FAILED)
            return False

        self.notify("success", SUBMIT_OK)
        self.form.reset()
        self.modal_visible = False
        await self.load_records()
        return True
