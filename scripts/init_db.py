# scripts/init_db.py
"""
Drop and recreate the sightings schema.

Usage:
    python -m scripts.init_db
"""

import logging

from squirrel_registry.db.engine import get_engine
from squirrel_registry.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created at %s", engine.url)

if __name__ == "__main__":
    main()
