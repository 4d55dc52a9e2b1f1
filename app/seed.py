"""
CLI entrypoint that seeds every content and configuration collection with its
default records. Safe to run repeatedly; collections already seeded are skipped.

  python -m app.seed
"""

import logging
import sys

from app.core.database import SessionLocal
from app.services.seeding import seed_all

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    db = SessionLocal()
    try:
        results = seed_all(db)
        seeded = sorted(name for name, inserted in results.items() if inserted)
        logger.info("Seeding completed: seeded=%s skipped=%s", len(seeded), len(results) - len(seeded))
        for name in seeded:
            logger.info("Seeded %s", name)
        return 0
    except Exception as e:
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
