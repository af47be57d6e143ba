"""
Business logic for problems.

This service registers problems together with their base code
templates and testcases, lists the catalog annotated with the calling
member's progress, returns a problem's detail with the member's latest
code overlaid on the templates, and lists the member's submission
history.

Every operation runs inside one ``unit_of_work``: registration either
persists the problem, all templates and all testcases, or nothing.
Members are looked up once per call and a missing member fails fast
with ``MemberNotFoundError``.
"""

import logging
import sqlite3
from typing import List

from ..core.db import unit_of_work
from ..core.exceptions import DuplicateTitleError, ProblemNotFoundError
from ..repositories import (
    LanguageRepository,
    MemberRepository,
    ProblemRepository,
    RecordRepository,
    TestcaseRepository,
)
from ..schemas.problem import ProblemCreate, ProblemDetail, ProblemProgress
from ..schemas.record import RecordHistory
from .progress_resolver import ProgressResolver


class ProblemService:
    """Service for the problem catalog and per-member progress."""

    @classmethod
    async def create_problem(cls, data: ProblemCreate) -> int:
        """Register a problem with its templates and testcases.

        Raises ``DuplicateTitleError`` before any write if the title is
        taken.  A concurrent registration that claims the title between
        the check and the insert is reported the same way.  Returns the
        new problem number.
        """
        logger = logging.getLogger(__name__)
        with unit_of_work() as conn:
            problems = ProblemRepository(conn)
            if problems.exists_by_title(data.title):
                logger.warning("Rejected duplicate problem title %r", data.title)
                raise DuplicateTitleError(data.title)

            try:
                problem_no = problems.save(data)
            except sqlite3.IntegrityError as e:
                logger.warning("Problem title %r claimed concurrently", data.title)
                raise DuplicateTitleError(data.title) from e

            languages = LanguageRepository(conn)
            for base_code in data.base_codes:
                languages.save(problem_no, base_code.language.value, base_code.code)
            testcases = TestcaseRepository(conn)
            for testcase in data.testcases:
                testcases.save(problem_no, testcase.input_case, testcase.output_case, testcase.description)

        logger.info(
            "Created problem %s (%d base codes, %d testcases)",
            problem_no,
            len(data.base_codes),
            len(data.testcases),
        )
        return problem_no

    @classmethod
    async def list_problems(cls, username: str) -> List[ProblemProgress]:
        """Return every problem with the member's best accuracy and solved flag."""
        with unit_of_work() as conn:
            member = MemberRepository(conn).get_by_username(username)
            problems = ProblemRepository(conn).find_all()
            records = RecordRepository(conn).find_all_by_member(member.member_no)
        return ProgressResolver.resolve_progress(problems, records)

    @classmethod
    async def get_problem(cls, problem_no: int, username: str) -> ProblemDetail:
        """Return the problem, its per-language code and its testcases.

        Raises ``ProblemNotFoundError`` for an unknown problem number and
        ``MemberNotFoundError`` for an unknown username.
        """
        with unit_of_work() as conn:
            problem = ProblemRepository(conn).find_by_problem_no(problem_no)
            if problem is None:
                raise ProblemNotFoundError(problem_no)
            member = MemberRepository(conn).get_by_username(username)

            records = RecordRepository(conn).find_all_by_problem_and_member_order_by_created_desc(
                problem_no, member.member_no
            )
            templates = LanguageRepository(conn).find_by_problem(problem_no)
            testcases = TestcaseRepository(conn).find_by_problem(problem_no)

        return ProblemDetail(
            problem_no=problem.problem_no,
            title=problem.title,
            content=problem.content,
            limit_factor=problem.limit_factor,
            limit_time=problem.limit_time,
            difficulty=problem.difficulty,
            type=problem.type,
            base_codes=ProgressResolver.overlay_base_codes(templates, records),
            testcases=testcases,
        )

    @classmethod
    async def list_records(cls, username: str) -> List[RecordHistory]:
        """Return the member's records, most recently updated first, with problem titles."""
        with unit_of_work() as conn:
            member = MemberRepository(conn).get_by_username(username)
            records = RecordRepository(conn).find_all_by_member_order_by_updated_desc(member.member_no)
            titles = ProblemRepository(conn).find_titles_by_numbers(r.problem_no for r in records)

        return [
            RecordHistory(**record.model_dump(), title=titles[record.problem_no])
            for record in records
        ]
