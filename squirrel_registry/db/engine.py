# squirrel_registry/db/engine.py

from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from squirrel_registry.config import get_settings


def get_engine(url: Optional[str] = None) -> Engine:
    url = url or get_settings().db_url
    connect_args = {}
    if url.startswith("sqlite"):
        # store calls run in the threadpool, not the thread that opened the connection
        connect_args["check_same_thread"] = False
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(url, future=True, connect_args=connect_args)


@lru_cache()
def get_default_engine() -> Engine:
    """Process-wide engine for the configured database, shared by every request."""
    return get_engine()
