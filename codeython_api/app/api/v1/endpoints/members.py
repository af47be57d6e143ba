"""
Member endpoints for API v1.

Registration is open; logging in exchanges a username and password
for a bearer token used by the problem and record endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from codeython_api.app.core.exceptions import DuplicateUsernameError, MemberNotFoundError
from codeython_api.app.core.security import create_access_token, get_current_username
from codeython_api.app.schemas.member import MemberCreate, MemberLogin, MemberRead, Token
from codeython_api.app.services.member_service import MemberService

router = APIRouter()


@router.post("/", response_model=MemberRead, status_code=status.HTTP_201_CREATED)
async def register_member(member_in: MemberCreate) -> MemberRead:
    try:
        return await MemberService.create_member(member_in)
    except DuplicateUsernameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/login", response_model=Token)
async def login(credentials: MemberLogin) -> Token:
    """Return a bearer token for valid credentials, HTTP 401 otherwise."""
    member = await MemberService.authenticate(credentials.username, credentials.password)
    if member is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_access_token(member.username))


@router.get("/me", response_model=MemberRead)
async def read_current_member(username: str = Depends(get_current_username)) -> MemberRead:
    try:
        return await MemberService.get_member(username)
    except MemberNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
