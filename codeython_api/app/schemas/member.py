"""
Pydantic models for member data.

Members are identified by username throughout the API; the bearer
token's subject is the username.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MemberCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50, example="coder01")
    nickname: Optional[str] = Field(None, max_length=50, example="Coder")
    password: str = Field(..., min_length=8, example="strongpassword")


class MemberLogin(BaseModel):
    username: str
    password: str


class MemberRead(BaseModel):
    member_no: int
    username: str
    nickname: Optional[str] = None
    created_at: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
