"""Seed the sample New Zealand regions into the configured database."""

from __future__ import annotations

import argparse
import logging
import sys

from nzwalks.db import models, database
from nzwalks.db.repositories import regions as region_repo
from nzwalks.errors import StorageError


logger = logging.getLogger("nzwalks.scripts.seed_regions")

SAMPLE_REGIONS = (
    ("AKL", "Auckland", "https://images.pexels.com/photos/5169056/pexels-photo-5169056.jpeg"),
    ("NTL", "Northland", None),
    ("BOP", "Bay Of Plenty", None),
    ("WGN", "Wellington", "https://images.pexels.com/photos/4350631/pexels-photo-4350631.jpeg"),
    ("NSN", "Nelson", "https://images.pexels.com/photos/13918194/pexels-photo-13918194.jpeg"),
    ("STL", "Southland", None),
)

# Access SessionLocal dynamically so test fixtures that rebind the
# sessionmaker are respected.
SessionLocal = lambda: database.SessionLocal()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Insert sample regions that are not present yet")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the regions that would be inserted without writing them",
    )
    return parser.parse_args(argv)


def seed(dry_run: bool) -> int:
    session = SessionLocal()
    try:
        pending = [
            (code, name, image_url)
            for code, name, image_url in SAMPLE_REGIONS
            if region_repo.get_region_by_code(session, code) is None
        ]
        if dry_run:
            for code, name, _ in pending:
                print(f"would insert {code} {name}")
            print(f"{len(pending)} regions missing; no changes made.")
            return 0

        for code, name, image_url in pending:
            region_repo.create_region(
                session,
                models.Region(code=code, name=name, region_image_url=image_url),
            )
        print(f"Inserted {len(pending)} regions.")
        logger.info("Region seed complete", extra={"inserted": len(pending)})
        return 0
    except StorageError as exc:
        print(f"Region seed failed: {exc}", file=sys.stderr)
        logger.error("Region seed failed", exc_info=True)
        return 1
    finally:
        session.close()


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = parse_args(argv)
    database.ensure_sqlite_schema()
    return seed(args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
