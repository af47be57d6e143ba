"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), running one service operation as a single unit
of work (``unit_of_work``) and applying migrations on application
start (``init_db``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def now_timestamp() -> str:
    """Current UTC time as text with microsecond resolution.

    Rows are ordered by these strings, so the format must sort
    lexicographically in time order.
    """
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the connection;
    SQLite disables it by default.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def unit_of_work() -> Iterator[sqlite3.Connection]:
    """Run a block of reads and writes as one transaction.

    Commits when the block exits normally.  On any exception the
    transaction is rolled back and the exception re-raised, so a
    multi-insert operation either persists entirely or not at all.
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception as e:
        conn.rollback()
        logger.warning("Transaction rolled back: %s", e)
        raise
    finally:
        conn.close()


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS members (
            member_no INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            nickname TEXT,
            password TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS problems (
            problem_no INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL UNIQUE,
            content TEXT NOT NULL,
            limit_factor INTEGER NOT NULL DEFAULT 1,
            limit_time INTEGER NOT NULL DEFAULT 1000,
            difficulty INTEGER NOT NULL DEFAULT 1,
            type TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS languages (
            language_no INTEGER PRIMARY KEY AUTOINCREMENT,
            problem_no INTEGER NOT NULL,
            language TEXT NOT NULL,
            base_code TEXT NOT NULL,
            FOREIGN KEY(problem_no) REFERENCES problems(problem_no) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS testcases (
            testcase_no INTEGER PRIMARY KEY AUTOINCREMENT,
            problem_no INTEGER NOT NULL,
            input_case TEXT NOT NULL,
            output_case TEXT NOT NULL,
            description TEXT,
            FOREIGN KEY(problem_no) REFERENCES problems(problem_no) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS records (
            record_no INTEGER PRIMARY KEY AUTOINCREMENT,
            problem_no INTEGER NOT NULL,
            member_no INTEGER NOT NULL,
            language TEXT NOT NULL,
            written_code TEXT NOT NULL,
            accuracy INTEGER NOT NULL DEFAULT 0,
            grade INTEGER,
            memory INTEGER,
            execution_time INTEGER,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(problem_no) REFERENCES problems(problem_no),
            FOREIGN KEY(member_no) REFERENCES members(member_no)
        );
        """,
    ),
    # Migration 2: indices for the per-member and per-problem lookups
    (
        2,
        """
        CREATE UNIQUE INDEX IF NOT EXISTS idx_languages_problem_language ON languages(problem_no, language);
        CREATE INDEX IF NOT EXISTS idx_testcases_problem_no ON testcases(problem_no);
        CREATE INDEX IF NOT EXISTS idx_records_member_problem ON records(member_no, problem_no);
        CREATE INDEX IF NOT EXISTS idx_records_member_updated ON records(member_no, updated_at);
        """,
    ),
]


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  To change the schema, append a migration with an
    incremented version number.
    """
    with unit_of_work() as conn:
        conn.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                conn.executescript(sql)
                conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied migration %s", version)
                current_version = version
