#!/usr/bin/env python3
# scripts/seed_demo_data.py
"""
HealthCare Plus catalog seeder + reset.

- --seed creates any missing tables, then inserts the default clinic
  services and pharmacy medicines if their tables are empty.
- --reset deletes the clinic services and every medicine that no order
  references (order history keeps its medicines).

Run:
  python -m scripts.seed_demo_data --seed
  python -m scripts.seed_demo_data --reset
  python -m scripts.seed_demo_data --reset --seed
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

# Allow "python -m scripts.seed_demo_data" from repo root
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from app import models  # noqa: F401,E402  registers every table
from app.core.database import engine, session_scope  # noqa: E402
from app.models.base import Base  # noqa: E402
from app.services.seed_service import reset_catalog, seed_catalog  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    parser = argparse.ArgumentParser(description="Seed / reset the HealthCare Plus catalog")
    parser.add_argument("--seed", action="store_true", help="Insert default services and medicines")
    parser.add_argument("--reset", action="store_true", help="Delete unreferenced catalog rows")
    args = parser.parse_args()

    if not (args.seed or args.reset):
        parser.print_help()
        raise SystemExit(1)

    try:
        Base.metadata.create_all(bind=engine)

        if args.reset:
            with session_scope() as db:
                reset_catalog(db)
            print("Reset done.")

        if args.seed:
            with session_scope() as db:
                added = seed_catalog(db)
            print(f"Seeded: {added}")
    except SQLAlchemyError as e:
        logger.error("Seed failed: %s", e, exc_info=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
