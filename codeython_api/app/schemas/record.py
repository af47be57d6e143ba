"""
Pydantic schemas for submission records.

A record is one member's attempt at a problem in one language.  The
judge scores it; ``accuracy`` is the percentage of testcases passed.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .problem import Language


class RecordCreate(BaseModel):
    """Schema for storing a judged submission."""

    language: Language = Field(..., example="PYTHON")
    written_code: str = Field(..., description="Submitted source code")
    accuracy: int = Field(..., ge=0, le=100, description="Percentage of testcases passed")
    grade: Optional[int] = Field(None, ge=0)
    memory: Optional[int] = Field(None, ge=0, description="Peak memory in kilobytes")
    execution_time: Optional[int] = Field(None, ge=0, description="Run time in milliseconds")


class RecordRead(BaseModel):
    record_no: int
    problem_no: int
    member_no: int
    language: Language
    written_code: str
    accuracy: int
    grade: Optional[int] = None
    memory: Optional[int] = None
    execution_time: Optional[int] = None
    created_at: str
    updated_at: str


class RecordHistory(RecordRead):
    """A record in the member's history, with the problem title attached."""

    title: str
