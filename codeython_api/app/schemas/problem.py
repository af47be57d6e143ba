"""
Pydantic schemas for problems.

A problem carries its statement and display metadata, one base code
template per supported language and a list of testcases.  Responses
come in two shapes: a catalog entry annotated with the caller's
progress, and a detail view where each language's template may be
replaced by the caller's latest submitted code.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Language(str, Enum):
    """Languages a base code template or submission can be written in."""

    JAVA = "JAVA"
    PYTHON = "PYTHON"
    JAVASCRIPT = "JAVASCRIPT"
    C = "C"
    CPP = "CPP"


class BaseCodeCreate(BaseModel):
    language: Language = Field(..., example="PYTHON")
    code: str = Field(..., description="Starter code shown before the first submission")


class TestcaseCreate(BaseModel):
    input_case: str = Field(..., description="Program input")
    output_case: str = Field(..., description="Expected program output")
    description: Optional[str] = Field(None, description="Explanation shown with the example")


class ProblemCreate(BaseModel):
    """Schema for registering a new problem."""

    title: str = Field(..., min_length=1, max_length=200, example="Two Sum")
    content: str = Field(..., description="Problem statement")
    limit_factor: int = Field(1, ge=1, description="Multiplier applied to the time limit")
    limit_time: int = Field(1000, ge=1, description="Time limit in milliseconds")
    difficulty: int = Field(1, ge=1, le=5)
    type: List[str] = Field(default_factory=list, description="Problem categories")
    base_codes: List[BaseCodeCreate] = Field(default_factory=list)
    testcases: List[TestcaseCreate] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title must not be blank")
        return v

    @field_validator("base_codes")
    @classmethod
    def one_base_code_per_language(cls, v: List[BaseCodeCreate]) -> List[BaseCodeCreate]:
        seen = set()
        for base_code in v:
            if base_code.language in seen:
                raise ValueError(f"Duplicate base code for language {base_code.language.value}")
            seen.add(base_code.language)
        return v


class ProblemCreated(BaseModel):
    problem_no: int


class ProblemRead(BaseModel):
    """A stored problem without its templates and testcases."""

    problem_no: int
    title: str
    content: str
    limit_factor: int
    limit_time: int
    difficulty: int
    type: List[str]
    created_at: str


class LanguageTemplate(BaseModel):
    language_no: int
    problem_no: int
    language: Language
    base_code: str


class TestcaseRead(BaseModel):
    input_case: str
    output_case: str
    description: Optional[str]


class BaseCodeRead(BaseModel):
    """Code displayed for one language in the problem detail."""

    language: Language
    code: str


class ProblemProgress(BaseModel):
    """Catalog entry annotated with the caller's best attempt."""

    problem_no: int
    title: str
    difficulty: int
    type: List[str]
    accuracy: int = 0
    success: bool = False


class ProblemDetail(BaseModel):
    problem_no: int
    title: str
    content: str
    limit_factor: int
    limit_time: int
    difficulty: int
    type: List[str]
    base_codes: List[BaseCodeRead]
    testcases: List[TestcaseRead]
