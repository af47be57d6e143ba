"""
SQL for problems and the rows they own.

``problems`` owns ``languages`` (one base code template per language)
and ``testcases``.  Listing methods return rows in insertion order,
which is the order clients display them in.
"""

import json
import sqlite3
from typing import Dict, Iterable, List, Optional

from ..core.db import now_timestamp
from ..schemas.problem import LanguageTemplate, ProblemCreate, ProblemRead, TestcaseRead

PROBLEM_COLUMNS = (
    "problem_no, title, content, limit_factor, limit_time, difficulty, type, created_at"
)


class ProblemRepository:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def exists_by_title(self, title: str) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM problems WHERE title = ?", (title,)
        ).fetchone()
        return row is not None

    def save(self, data: ProblemCreate) -> int:
        """Insert the problem row only; templates and testcases are saved separately."""
        timestamp = now_timestamp()
        cursor = self.conn.execute(
            """
            INSERT INTO problems (title, content, limit_factor, limit_time, difficulty, type, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                data.title,
                data.content,
                data.limit_factor,
                data.limit_time,
                data.difficulty,
                json.dumps(data.type),
                timestamp,
                timestamp,
            ),
        )
        return cursor.lastrowid

    def find_by_problem_no(self, problem_no: int) -> Optional[ProblemRead]:
        row = self.conn.execute(
            f"SELECT {PROBLEM_COLUMNS} FROM problems WHERE problem_no = ?",
            (problem_no,),
        ).fetchone()
        if row is None:
            return None
        return self._row_to_problem(row)

    def find_all(self) -> List[ProblemRead]:
        rows = self.conn.execute(
            f"SELECT {PROBLEM_COLUMNS} FROM problems ORDER BY problem_no ASC"
        ).fetchall()
        return [self._row_to_problem(row) for row in rows]

    def find_titles_by_numbers(self, problem_nos: Iterable[int]) -> Dict[int, str]:
        """Map each existing problem number in ``problem_nos`` to its title in one query."""
        numbers = sorted(set(problem_nos))
        if not numbers:
            return {}
        placeholders = ", ".join("?" for _ in numbers)
        rows = self.conn.execute(
            f"SELECT problem_no, title FROM problems WHERE problem_no IN ({placeholders})",
            tuple(numbers),
        ).fetchall()
        return {row["problem_no"]: row["title"] for row in rows}

    @staticmethod
    def _row_to_problem(row: sqlite3.Row) -> ProblemRead:
        return ProblemRead(
            problem_no=row["problem_no"],
            title=row["title"],
            content=row["content"],
            limit_factor=row["limit_factor"],
            limit_time=row["limit_time"],
            difficulty=row["difficulty"],
            type=json.loads(row["type"]) if row["type"] else [],
            created_at=str(row["created_at"]),
        )


class LanguageRepository:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def save(self, problem_no: int, language: str, base_code: str) -> int:
        cursor = self.conn.execute(
            "INSERT INTO languages (problem_no, language, base_code) VALUES (?, ?, ?)",
            (problem_no, language, base_code),
        )
        return cursor.lastrowid

    def find_by_problem(self, problem_no: int) -> List[LanguageTemplate]:
        rows = self.conn.execute(
            """
            SELECT language_no, problem_no, language, base_code
            FROM languages WHERE problem_no = ? ORDER BY language_no ASC
            """,
            (problem_no,),
        ).fetchall()
        return [
            LanguageTemplate(
                language_no=row["language_no"],
                problem_no=row["problem_no"],
                language=row["language"],
                base_code=row["base_code"],
            )
            for row in rows
        ]


class TestcaseRepository:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def save(self, problem_no: int, input_case: str, output_case: str, description: Optional[str]) -> int:
        cursor = self.conn.execute(
            "INSERT INTO testcases (problem_no, input_case, output_case, description) VALUES (?, ?, ?, ?)",
            (problem_no, input_case, output_case, description),
        )
        return cursor.lastrowid

    def find_by_problem(self, problem_no: int) -> List[TestcaseRead]:
        rows = self.conn.execute(
            """
            SELECT input_case, output_case, description
            FROM testcases WHERE problem_no = ? ORDER BY testcase_no ASC
            """,
            (problem_no,),
        ).fetchall()
        return [
            TestcaseRead(
                input_case=row["input_case"],
                output_case=row["output_case"],
                description=row["description"],
            )
            for row in rows
        ]
