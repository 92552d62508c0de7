import logging
import subprocess
import sys

from pgfinder.core import configure_logging

logger = logging.getLogger("pgfinder.migrate")


def run_migration(revision="head"):
    """Apply Alembic migrations up to ``revision``"""
    result = subprocess.run(["alembic", "upgrade", revision], capture_output=True, text=True)
    if result.returncode != 0:
        logger.error("Migration to %s failed: %s", revision, result.stderr.strip())
        return False
    logger.info("Database migrated to %s", revision)
    return True


if __name__ == "__main__":
    configure_logging()
    success = run_migration(sys.argv[1] if len(sys.argv) > 1 else "head")
    sys.exit(0 if success else 1)
