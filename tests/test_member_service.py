import asyncio

import pytest

from codeython_api.app.core.db import unit_of_work
from codeython_api.app.core.exceptions import DuplicateUsernameError, MemberNotFoundError
from codeython_api.app.repositories import MemberRepository
from codeython_api.app.schemas.member import MemberCreate
from codeython_api.app.services.member_service import MemberService


def test_create_member(member):
    assert member.username == "coder01"
    assert member.nickname == "Coder"
    assert asyncio.run(MemberService.get_member("coder01")) == member


def test_duplicate_username_rejected(member):
    with pytest.raises(DuplicateUsernameError):
        asyncio.run(MemberService.create_member(MemberCreate(username="coder01", password="otherpassword")))


def test_get_unknown_member():
    with pytest.raises(MemberNotFoundError):
        asyncio.run(MemberService.get_member("ghost"))


def test_authenticate(member):
    assert asyncio.run(MemberService.authenticate("coder01", "strongpassword")) == member
    assert asyncio.run(MemberService.authenticate("coder01", "wrongpassword")) is None
    assert asyncio.run(MemberService.authenticate("ghost", "strongpassword")) is None


def test_repository_get_by_username(member):
    with unit_of_work() as conn:
        members = MemberRepository(conn)
        assert members.get_by_username("coder01") == member
        assert members.find_by_username("ghost") is None
        with pytest.raises(MemberNotFoundError):
            members.get_by_username("ghost")
