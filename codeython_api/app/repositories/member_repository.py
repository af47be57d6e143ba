"""SQL for the ``members`` table."""

import sqlite3
from typing import Optional

from ..core.db import now_timestamp
from ..core.exceptions import MemberNotFoundError
from ..schemas.member import MemberRead


class MemberRepository:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def exists_by_username(self, username: str) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM members WHERE username = ?", (username,)
        ).fetchone()
        return row is not None

    def save(self, username: str, nickname: Optional[str], password_hash: str) -> int:
        cursor = self.conn.execute(
            "INSERT INTO members (username, nickname, password, created_at) VALUES (?, ?, ?, ?)",
            (username, nickname, password_hash, now_timestamp()),
        )
        return cursor.lastrowid

    def find_by_username(self, username: str) -> Optional[MemberRead]:
        """Return the member or ``None``; callers decide how absence fails."""
        row = self.conn.execute(
            "SELECT member_no, username, nickname, created_at FROM members WHERE username = ?",
            (username,),
        ).fetchone()
        if row is None:
            return None
        return self._row_to_member(row)

    def get_by_username(self, username: str) -> MemberRead:
        """Like ``find_by_username`` but raises ``MemberNotFoundError`` when absent."""
        member = self.find_by_username(username)
        if member is None:
            raise MemberNotFoundError(username)
        return member

    def find_password_hash(self, username: str) -> Optional[str]:
        row = self.conn.execute(
            "SELECT password FROM members WHERE username = ?", (username,)
        ).fetchone()
        return row["password"] if row else None

    @staticmethod
    def _row_to_member(row: sqlite3.Row) -> MemberRead:
        return MemberRead(
            member_no=row["member_no"],
            username=row["username"],
            nickname=row["nickname"],
            created_at=str(row["created_at"]),
        )
