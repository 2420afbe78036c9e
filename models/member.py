from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass
class Member:
    """
    Represents a single member's profile as stored in the database.
    """
    id: int
    name: str
    email: str
    profession: str
    about: str
    image: bytes = field(default=b"", repr=False)  # Encoded picture data

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Member":
        """Builds a Member from an (id, name, email, profession, about, image) row."""
        return cls(
            id=int(row[0]),
            name=row[1],
            email=row[2],
            profession=row[3],
            about=row[4],
            image=bytes(row[5]) if row[5] is not None else b"",
        )
