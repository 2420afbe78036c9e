import sqlite3
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from core.database import connect, init_db
from core.errors import FetchError, SaveError
from models.member import Member

_COLUMNS = "id, name, email, profession, about, image"


class MemberStore:
    """
    Create/read/update/delete access to the members table.

    Every call opens its own connection, so a single store can be shared by
    workers running on different threads. Failures are logged and raised as
    FetchError (reads) or SaveError (writes); nothing is silently dropped.
    """

    def __init__(self, db_file: Optional[Union[str, Path]] = None):
        # Raises StoreOpenError if the file cannot be opened
        self.db_file = init_db(db_file)

    # --- READS ---

    def list_all(self) -> List[Member]:
        """
        Fetches every member, ordered by id.

        Returns:
            List[Member]: All stored members, empty if there are none.
        """
        try:
            with connect(self.db_file) as conn:
                rows = conn.execute(f"SELECT {_COLUMNS} FROM members ORDER BY id").fetchall()
        except sqlite3.Error as e:
            logger.error(f"Could not fetch members: {e}")
            raise FetchError(f"Could not fetch members: {e}") from e

        return [Member.from_row(row) for row in rows]

    def get(self, member_id: int) -> Optional[Member]:
        """
        Fetches a single member by id.

        Returns:
            Optional[Member]: The member, or None if no row has that id.
        """
        try:
            with connect(self.db_file) as conn:
                row = conn.execute(
                    f"SELECT {_COLUMNS} FROM members WHERE id=? LIMIT 1", (member_id,)
                ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Could not fetch member {member_id}: {e}")
            raise FetchError(f"Could not fetch member {member_id}: {e}") from e

        return Member.from_row(row) if row else None

    def max_id(self) -> int:
        """Highest id currently stored, 0 when the table is empty."""
        try:
            with connect(self.db_file) as conn:
                row = conn.execute("SELECT COALESCE(MAX(id), 0) FROM members").fetchone()
        except sqlite3.Error as e:
            logger.error(f"Could not fetch max id: {e}")
            raise FetchError(f"Could not fetch max id: {e}") from e
        return int(row[0])

    def count(self) -> int:
        try:
            with connect(self.db_file) as conn:
                row = conn.execute("SELECT COUNT(*) FROM members").fetchone()
        except sqlite3.Error as e:
            logger.error(f"Could not count members: {e}")
            raise FetchError(f"Could not count members: {e}") from e
        return int(row[0])

    # --- WRITES ---

    def create(self, name: str, email: str, profession: str, about: str, image: bytes) -> Member:
        """
        Inserts a new member and returns it with its assigned id.

        The id comes from the AUTOINCREMENT key inside the same INSERT, so two
        creates running at once can never be handed the same id.
        """
        try:
            with connect(self.db_file) as conn:
                cur = conn.execute(
                    "INSERT INTO members (name, email, profession, about, image) VALUES (?, ?, ?, ?, ?)",
                    (name, email, profession, about, sqlite3.Binary(image)),
                )
                new_id = cur.lastrowid
        except sqlite3.Error as e:
            logger.error(f"Could not save new member '{name}': {e}")
            raise SaveError(f"Could not save new member '{name}': {e}") from e

        logger.debug(f"Created member {new_id} ({name})")
        return Member(id=new_id, name=name, email=email, profession=profession, about=about, image=bytes(image))

    def update(self, member_id: int, name: str, email: str, profession: str, about: str, image: bytes) -> bool:
        """
        Overwrites every mutable field of an existing member.

        Returns:
            bool: True if the member existed and was updated, False if no row
            has that id (the store is left unchanged).
        """
        try:
            with connect(self.db_file) as conn:
                cur = conn.execute(
                    "UPDATE members SET name=?, email=?, profession=?, about=?, image=? WHERE id=?",
                    (name, email, profession, about, sqlite3.Binary(image), member_id),
                )
                updated = cur.rowcount > 0
        except sqlite3.Error as e:
            logger.error(f"Could not update member {member_id}: {e}")
            raise SaveError(f"Could not update member {member_id}: {e}") from e

        if not updated:
            logger.debug(f"Update skipped, member {member_id} not found")
        return updated

    def delete(self, member_id: int) -> bool:
        """
        Permanently deletes a member.

        Returns:
            bool: True if a row was removed.
        """
        try:
            with connect(self.db_file) as conn:
                cur = conn.execute("DELETE FROM members WHERE id=?", (member_id,))
                deleted = cur.rowcount > 0
        except sqlite3.Error as e:
            logger.error(f"Could not delete member {member_id}: {e}")
            raise SaveError(f"Could not delete member {member_id}: {e}") from e
        return deleted

    def delete_all(self) -> int:
        """
        Removes every member in one statement.

        Returns:
            int: The number of rows deleted.
        """
        try:
            with connect(self.db_file) as conn:
                cur = conn.execute("DELETE FROM members")
                deleted = cur.rowcount
        except sqlite3.Error as e:
            logger.error(f"Could not delete members: {e}")
            raise SaveError(f"Could not delete members: {e}") from e

        logger.info(f"Deleted {deleted} members")
        return deleted
