import asyncio

import pytest

from codeython_api.app.core.exceptions import MemberNotFoundError, ProblemNotFoundError, UnsupportedLanguageError
from codeython_api.app.schemas.problem import Language
from codeython_api.app.schemas.record import RecordCreate
from codeython_api.app.services.record_service import RecordService


def test_submit_record(member, create_problem, submit):
    problem_no = create_problem("A")

    record = submit(problem_no, 75, language="JAVA", code="class Main {}")

    assert record.problem_no == problem_no
    assert record.member_no == member.member_no
    assert record.language == Language.JAVA
    assert record.accuracy == 75
    assert record.created_at == record.updated_at


def test_submit_record_unknown_problem(member):
    with pytest.raises(ProblemNotFoundError):
        asyncio.run(RecordService.submit_record(member.username, 42, RecordCreate(language="PYTHON", written_code="", accuracy=0)))


def test_submit_record_unknown_member(create_problem):
    problem_no = create_problem("A")
    with pytest.raises(MemberNotFoundError):
        asyncio.run(RecordService.submit_record("ghost", problem_no, RecordCreate(language="PYTHON", written_code="", accuracy=0)))


def test_submit_record_language_without_template(member, create_problem, submit):
    problem_no = create_problem("A", languages=("PYTHON",))
    with pytest.raises(UnsupportedLanguageError):
        submit(problem_no, 100, language="C")
