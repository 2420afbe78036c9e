from dataclasses import dataclass
from typing import Optional

from PySide6 import QtCore

from services.file_manager import app_settings

STATE_KEY = "state"
NAME_KEY = "name"
EMAIL_KEY = "email"
AGE_KEY = "age"


@dataclass
class Profile:
    """The signed-in user's own profile, kept in the settings store."""
    is_logged_in: bool = False
    name: str = ""
    email: str = ""
    age: int = 0


class ProfilePreferences:
    """
    Reads and writes the user's profile in QSettings.
    Values survive restarts; clear() forgets them.
    """

    def __init__(self, settings: Optional[QtCore.QSettings] = None):
        self.settings = settings or app_settings()

    @property
    def is_logged_in(self) -> bool:
        return self.settings.value(STATE_KEY, False, type=bool)

    @is_logged_in.setter
    def is_logged_in(self, value: bool) -> None:
        self.settings.setValue(STATE_KEY, bool(value))

    @property
    def name(self) -> str:
        return self.settings.value(NAME_KEY, "", type=str)

    @name.setter
    def name(self, value: str) -> None:
        self.settings.setValue(NAME_KEY, value)

    @property
    def email(self) -> str:
        return self.settings.value(EMAIL_KEY, "", type=str)

    @email.setter
    def email(self, value: str) -> None:
        self.settings.setValue(EMAIL_KEY, value)

    @property
    def age(self) -> int:
        return self.settings.value(AGE_KEY, 0, type=int)

    @age.setter
    def age(self, value: int) -> None:
        self.settings.setValue(AGE_KEY, int(value))

    def save(self, name: str, email: str, age: int) -> None:
        """Stores the profile and marks the user as logged in."""
        self.name = name
        self.email = email
        self.age = age
        self.is_logged_in = True
        self.sync()

    def load(self) -> Profile:
        return Profile(
            is_logged_in=self.is_logged_in,
            name=self.name,
            email=self.email,
            age=self.age,
        )

    def clear(self) -> None:
        """Removes every profile key (logs the user out)."""
        for key in (STATE_KEY, NAME_KEY, EMAIL_KEY, AGE_KEY):
            self.settings.remove(key)
        self.sync()

    def sync(self) -> None:
        self.settings.sync()
