# squirrel_registry/forms.py

from datetime import date
from typing import Dict, Mapping, Optional

# field name -> (label, placeholder, required message)
FIELDS = {
    "name": (
        "Squirrel Name",
        "e.g., Nutkin, Fluffy Tail, etc.",
        "Please enter a name for the squirrel!",
    ),
    "description": (
        "Description",
        "Describe the squirrel's appearance, behavior, or any distinguishing features...",
        "Please describe the squirrel!",
    ),
    "location": (
        "Location Spotted",
        "e.g., Oak tree by the park bench, backyard feeder, etc.",
        "Please enter where you saw the squirrel!",
    ),
}


class SightingForm:
    """
    Modal-scoped entry form with three required text fields.

    Values are kept exactly as typed so a failed validation or a failed submit
    re-renders them unchanged; to_record() strips them. reset() discards them.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self.values: Dict[str, str] = {name: "" for name in FIELDS}
        self.errors: Dict[str, str] = {}
        if values:
            self.fill(values)

    def fill(self, values: Mapping[str, str]) -> None:
        for name in FIELDS:
            self.values[name] = values.get(name) or ""

    def validate(self) -> bool:
        self.errors = {
            name: message
            for name, (_, _, message) in FIELDS.items()
            if not self.values[name].strip()
        }
        return not self.errors

    def reset(self) -> None:
        self.values = {name: "" for name in FIELDS}
        self.errors = {}

    def to_record(self, date_spotted: date) -> dict:
        record = {name: value.strip() for name, value in self.values.items()}
        record["dateSpotted"] = date_spotted
        return record
