import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from loguru import logger

import config
from core.errors import StoreOpenError


def _resolve(db_file: Optional[Union[str, Path]]) -> Path:
    path = db_file or config.DB_FILE
    if not path:
        raise StoreOpenError("Database path not found in config.")
    return Path(path)


def init_db(db_file: Optional[Union[str, Path]] = None) -> Path:
    """
    Initializes the SQLite database.
    Creates the members table if it does not exist.

    AUTOINCREMENT keeps ids strictly increasing and never hands out the id
    of a deleted row again.

    Returns:
        Path: The database file that was opened.

    Raises:
        StoreOpenError: If the file cannot be opened or the schema created.
    """
    path = _resolve(db_file)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with connect(path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS members (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL DEFAULT '',
                    email TEXT NOT NULL DEFAULT '',
                    profession TEXT NOT NULL DEFAULT '',
                    about TEXT NOT NULL DEFAULT '',
                    image BLOB NOT NULL DEFAULT X''
                )
            """)
    except (sqlite3.Error, OSError) as e:
        logger.error(f"Could not open member store at {path}: {e}")
        raise StoreOpenError(f"Could not open member store at {path}: {e}") from e

    logger.info(f"Member store ready at {path}")
    return path


@contextmanager
def connect(db_file: Optional[Union[str, Path]] = None) -> Iterator[sqlite3.Connection]:
    """
    Opens a connection for a single operation.
    Commits when the block succeeds, rolls back when it raises, and always closes.
    """
    conn = sqlite3.connect(str(_resolve(db_file)), timeout=config.DB_TIMEOUT)
    try:
        with conn:
            yield conn
    finally:
        conn.close()
