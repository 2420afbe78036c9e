"""
Shared fixtures for the member store tests.
"""
import pytest
from PySide6 import QtCore

import config
from services.member_service import MemberStore


@pytest.fixture(scope="session")
def qapp():
    """A QCoreApplication so queued signals from pool threads can be delivered."""
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app


@pytest.fixture
def db_file(tmp_path):
    return tmp_path / "members.db"


@pytest.fixture
def store(db_file):
    return MemberStore(db_file)


@pytest.fixture
def settings(tmp_path):
    """QSettings backed by a throwaway INI file instead of the user's real settings."""
    s = QtCore.QSettings(str(tmp_path / "settings.ini"), QtCore.QSettings.Format.IniFormat)
    yield s
    s.clear()


@pytest.fixture(autouse=True)
def reset_config():
    saved = (config.BASE_FOLDER, config.DB_FILE)
    yield
    config.BASE_FOLDER, config.DB_FILE = saved
