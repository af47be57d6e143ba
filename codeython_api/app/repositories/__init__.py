"""
Data access for each table.

Repositories receive an open connection from ``core.db.unit_of_work``
and never commit or roll back themselves; the service that opened the
unit of work owns the transaction.  Every query is parameterised.
"""

from .member_repository import MemberRepository
from .problem_repository import LanguageRepository, ProblemRepository, TestcaseRepository
from .record_repository import RecordRepository

__all__ = [
    "MemberRepository",
    "ProblemRepository",
    "LanguageRepository",
    "TestcaseRepository",
    "RecordRepository",
]
