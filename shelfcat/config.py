import os
from pathlib import Path

DB_PATH = os.environ.get("SHELFCAT_DB_PATH", str(Path.cwd() / "shelfcat.db"))
DATABASE_URL = os.environ.get("SHELFCAT_DATABASE_URL", f"sqlite+aiosqlite:///{DB_PATH}")

# Logging
LOG_LEVEL = os.environ.get("SHELFCAT_LOG_LEVEL", "INFO").upper()
SQL_ECHO = os.environ.get("SHELFCAT_SQL_ECHO", "1").lower() not in ("", "0", "false", "no", "off")

# Placeholders, not used to sign anything
SECRET_TOKEN = os.environ.get("SHELFCAT_SECRET_TOKEN", "secret_token")
SECRET_KEY_BASE = os.environ.get("SHELFCAT_SECRET_KEY_BASE", "secret_key_base")

# Development server
HOST = os.environ.get("SHELFCAT_HOST", "127.0.0.1")
PORT = int(os.environ.get("SHELFCAT_PORT", "8000"))
