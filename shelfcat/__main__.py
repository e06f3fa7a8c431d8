import logging
import subprocess
import sys
from pathlib import Path

import uvicorn

from shelfcat.app import app
from shelfcat.config import DATABASE_URL, DB_PATH, HOST, PORT
from shelfcat.logging_config import configure_logging

logger = logging.getLogger(__name__)


def ensure_db_dir():
    """Create the SQLite file's directory when the default database is in use."""
    if DATABASE_URL == f"sqlite+aiosqlite:///{DB_PATH}":
        Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)


def run_migrations():
    """Run Alembic migrations before starting the server."""
    ensure_db_dir()

    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        capture_output=False,
    )
    if result.returncode != 0:
        logger.error("Migrations failed with exit code %d", result.returncode)
        sys.exit(1)


def main():
    configure_logging()
    run_migrations()
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
