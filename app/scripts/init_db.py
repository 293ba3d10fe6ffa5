"""
Create the database tables. Run once against a fresh database:

  python -m app.scripts.init_db
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.database import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        init_db()
    except SQLAlchemyError as e:
        logger.exception("Table creation failed: %s", e)
        return 1
    logger.info("Tables created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
