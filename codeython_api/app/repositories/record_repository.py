"""
SQL for the ``records`` table.

Time-ordered queries break ties on ``record_no`` so that two records
written within the same timestamp still come back in a stable order.
"""

import sqlite3
from typing import List

from ..core.db import now_timestamp
from ..schemas.record import RecordCreate, RecordRead

RECORD_COLUMNS = (
    "record_no, problem_no, member_no, language, written_code, accuracy, "
    "grade, memory, execution_time, created_at, updated_at"
)


class RecordRepository:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def save(self, problem_no: int, member_no: int, data: RecordCreate) -> int:
        timestamp = now_timestamp()
        cursor = self.conn.execute(
            """
            INSERT INTO records (problem_no, member_no, language, written_code, accuracy,
                                 grade, memory, execution_time, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                problem_no,
                member_no,
                data.language.value,
                data.written_code,
                data.accuracy,
                data.grade,
                data.memory,
                data.execution_time,
                timestamp,
                timestamp,
            ),
        )
        return cursor.lastrowid

    def find_by_record_no(self, record_no: int) -> RecordRead:
        row = self.conn.execute(
            f"SELECT {RECORD_COLUMNS} FROM records WHERE record_no = ?", (record_no,)
        ).fetchone()
        return self._row_to_record(row)

    def find_all_by_problem_and_member_order_by_created_desc(
        self, problem_no: int, member_no: int
    ) -> List[RecordRead]:
        rows = self.conn.execute(
            f"""
            SELECT {RECORD_COLUMNS} FROM records
            WHERE problem_no = ? AND member_no = ?
            ORDER BY created_at DESC, record_no DESC
            """,
            (problem_no, member_no),
        ).fetchall()
        return [self._row_to_record(row) for row in rows]

    def find_all_by_member(self, member_no: int) -> List[RecordRead]:
        """Every record of the member across all problems, oldest first."""
        rows = self.conn.execute(
            f"""
            SELECT {RECORD_COLUMNS} FROM records
            WHERE member_no = ?
            ORDER BY created_at ASC, record_no ASC
            """,
            (member_no,),
        ).fetchall()
        return [self._row_to_record(row) for row in rows]

    def find_all_by_member_order_by_updated_desc(self, member_no: int) -> List[RecordRead]:
        rows = self.conn.execute(
            f"""
            SELECT {RECORD_COLUMNS} FROM records
            WHERE member_no = ?
            ORDER BY updated_at DESC, record_no DESC
            """,
            (member_no,),
        ).fetchall()
        return [self._row_to_record(row) for row in rows]

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> RecordRead:
        return RecordRead(
            record_no=row["record_no"],
            problem_no=row["problem_no"],
            member_no=row["member_no"],
            language=row["language"],
            written_code=row["written_code"],
            accuracy=row["accuracy"],
            grade=row["grade"],
            memory=row["memory"],
            execution_time=row["execution_time"],
            created_at=str(row["created_at"]),
            updated_at=str(row["updated_at"]),
        )
