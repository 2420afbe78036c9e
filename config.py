from pathlib import Path

# Global Config
BASE_FOLDER = None
DB_FILE = None

APP_NAME = "MemberDicoding"
ORGANIZATION_NAME = "Dicoding"

DB_FILENAME = "members.db"

# Used when no data folder has been remembered yet
DEFAULT_BASE_FOLDER = Path.home() / APP_NAME

# Seconds a connection waits on a locked database before failing
DB_TIMEOUT = 5.0
