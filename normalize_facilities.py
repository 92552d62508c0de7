"""Rewrite stored facilities into canonical JSON-array form.

The search filter matches tags inside JSON array text, so rows written as
comma-separated strings are invisible to it until they are re-encoded here.
Safe to run repeatedly.
"""

import argparse
import logging
import sys

from pgfinder.config import Settings
from pgfinder.core import configure_logging
from pgfinder.core.facilities import encode_facilities
from pgfinder.database import build_engine, build_session_factory
from pgfinder.models import Listing

logger = logging.getLogger("pgfinder.normalize_facilities")


def normalize_facilities(db, dry_run=False) -> int:
    """Re-encode every listing's facilities; return how many rows changed."""
    changed = 0
    for listing in db.query(Listing).order_by(Listing.id):
        canonical = encode_facilities(listing.facilities)
        if listing.facilities != canonical:
            logger.debug("Listing %s: %r -> %s", listing.id, listing.facilities, canonical)
            listing.facilities = canonical
            changed += 1

    if dry_run:
        db.rollback()
    else:
        db.commit()
    return changed


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--dry-run", action="store_true", help="report changes without writing them")
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.log_level, settings.log_format)

    db = build_session_factory(build_engine(settings))()
    try:
        changed = normalize_facilities(db, dry_run=args.dry_run)
    finally:
        db.close()

    logger.info("%s %d listing(s)", "Would update" if args.dry_run else "Updated", changed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
