# quick_notes/config.py

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from the .env file into the system environment
load_dotenv()

# Environment variable overriding the database location
DB_PATH_ENV_VAR = "QUICK_NOTES_DB"

# Fallback database file used when nothing else is configured
DEFAULT_DB_PATH = Path.home() / ".quick_notes" / "app.db"

APP_NAME = "quick-notes"
APP_VERSION = "1.0.0"


def resolve_db_path(db_path: Optional[Path] = None) -> Path:
    """
    Resolve which SQLite file to use.

    Precedence: explicit argument (the `--db-path` option), then the
    QUICK_NOTES_DB environment variable, then DEFAULT_DB_PATH.
    """
    if db_path is not None:
        return Path(db_path).expanduser()

    from_env = os.getenv(DB_PATH_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()

    return DEFAULT_DB_PATH
