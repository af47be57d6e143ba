"""
Business logic for members.

Members register with a unique username and a password, which is
stored as a PBKDF2 hash.  Other services look members up by username;
``get_member`` is the fail-fast variant used by the API.
"""

import logging
from typing import Optional

from ..core.db import unit_of_work
from ..core.exceptions import DuplicateUsernameError
from ..core.security import hash_password, verify_password
from ..repositories import MemberRepository
from ..schemas.member import MemberCreate, MemberRead


class MemberService:
    @classmethod
    async def create_member(cls, data: MemberCreate) -> MemberRead:
        """Register a member; raises ``DuplicateUsernameError`` if the name is taken."""
        logger = logging.getLogger(__name__)
        with unit_of_work() as conn:
            members = MemberRepository(conn)
            if members.exists_by_username(data.username):
                logger.warning("Rejected duplicate username %r", data.username)
                raise DuplicateUsernameError(data.username)
            members.save(data.username, data.nickname, hash_password(data.password))
            member = members.find_by_username(data.username)
        logger.info("Registered member %s", member.member_no)
        return member

    @classmethod
    async def get_member(cls, username: str) -> MemberRead:
        with unit_of_work() as conn:
            return MemberRepository(conn).get_by_username(username)

    @classmethod
    async def authenticate(cls, username: str, password: str) -> Optional[MemberRead]:
        """Return the member if the password matches, otherwise ``None``."""
        with unit_of_work() as conn:
            members = MemberRepository(conn)
            if not verify_password(password, members.find_password_hash(username)):
                return None
            return members.find_by_username(username)
