import asyncio

import pytest

from codeython_api.app.core.config import settings
from codeython_api.app.core.db import init_db
from codeython_api.app.schemas.member import MemberCreate
from codeython_api.app.schemas.record import RecordCreate
from codeython_api.app.services.member_service import MemberService
from codeython_api.app.services.problem_service import ProblemService
from codeython_api.app.services.record_service import RecordService

from tests.helpers import problem_payload


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file for every test."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "codeython.db"))
    init_db()
    yield


@pytest.fixture
def member():
    return asyncio.run(
        MemberService.create_member(MemberCreate(username="coder01", nickname="Coder", password="strongpassword"))
    )


@pytest.fixture
def create_problem():
    def _create(title: str = "Two Sum", **kwargs) -> int:
        return asyncio.run(ProblemService.create_problem(problem_payload(title, **kwargs)))

    return _create


@pytest.fixture
def submit():
    def _submit(problem_no: int, accuracy: int, language: str = "PYTHON", code: str = "print(1)", username: str = "coder01"):
        data = RecordCreate(language=language, written_code=code, accuracy=accuracy)
        return asyncio.run(RecordService.submit_record(username, problem_no, data))

    return _submit
