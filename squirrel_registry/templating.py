# squirrel_registry/templating.py

from datetime import date
from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def format_spotted(value: Optional[date]) -> str:
    """M/D/YYYY, e.g. 10/9/2026."""
    if value is None:
        return ""
    return f"{value.month}/{value.day}/{value.year}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["spotted"] = format_spotted
