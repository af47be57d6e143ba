"""
Business logic for submission records.

The judge scores a submission and hands the result here to be stored
against the member and problem.  Records are never updated or deleted
by this service.
"""

import logging

from ..core.db import unit_of_work
from ..core.exceptions import ProblemNotFoundError, UnsupportedLanguageError
from ..repositories import LanguageRepository, MemberRepository, ProblemRepository, RecordRepository
from ..schemas.record import RecordCreate, RecordRead


class RecordService:
    @classmethod
    async def submit_record(cls, username: str, problem_no: int, data: RecordCreate) -> RecordRead:
        """Store a judged submission.

        The problem must exist and offer a base code template for the
        submitted language.
        """
        logger = logging.getLogger(__name__)
        with unit_of_work() as conn:
            member = MemberRepository(conn).get_by_username(username)
            if ProblemRepository(conn).find_by_problem_no(problem_no) is None:
                raise ProblemNotFoundError(problem_no)
            languages = {t.language for t in LanguageRepository(conn).find_by_problem(problem_no)}
            if data.language not in languages:
                raise UnsupportedLanguageError(problem_no, data.language.value)

            records = RecordRepository(conn)
            record_no = records.save(problem_no, member.member_no, data)
            record = records.find_by_record_no(record_no)

        logger.info(
            "Member %s submitted record %s for problem %s (accuracy %s)",
            member.member_no,
            record_no,
            problem_no,
            data.accuracy,
        )
        return record
