from pathlib import Path
from typing import Optional

from loguru import logger
from PySide6 import QtCore

import config

DATA_PATH_KEY = "data_path"


def ensure_folder(p: Path) -> None:
    """Creates the folder if it does not exist."""
    p.mkdir(parents=True, exist_ok=True)


def app_settings() -> QtCore.QSettings:
    """The per-user settings store for this application."""
    return QtCore.QSettings(config.ORGANIZATION_NAME, config.APP_NAME)


def init_paths(base_path: Path) -> None:
    """
    Initialize all global paths based on the selected base path.
    Sets up the data folder and database file.
    """
    config.BASE_FOLDER = Path(base_path)
    ensure_folder(config.BASE_FOLDER)

    config.DB_FILE = config.BASE_FOLDER / config.DB_FILENAME


def load_or_setup_paths(default: Optional[Path] = None,
                        settings: Optional[QtCore.QSettings] = None) -> Path:
    """
    Loads the data path remembered in the application settings.
    If none is remembered (or it no longer exists), falls back to `default`
    or config.DEFAULT_BASE_FOLDER and remembers that choice.

    Returns:
        Path: The data folder now in use.
    """
    settings = settings or app_settings()

    # 1. Try to load the remembered folder
    stored = settings.value(DATA_PATH_KEY)
    if stored:
        data_path = Path(str(stored))
        if data_path.exists():
            init_paths(data_path)
            return data_path
        logger.warning(f"Remembered data folder {data_path} is gone, using default")

    # 2. Fall back and save the selection for next time
    data_path = Path(default) if default else config.DEFAULT_BASE_FOLDER
    init_paths(data_path)
    settings.setValue(DATA_PATH_KEY, str(data_path))
    settings.sync()
    logger.info(f"Using data folder {data_path}")
    return data_path
