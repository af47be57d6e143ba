"""
Problem endpoints for API v1.

Listing and detail views are personalised: the catalog reports the
caller's best accuracy per problem, and the detail view shows the
caller's latest code in place of each language's base template.
Submitting a record stores a judged attempt against a problem.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from codeython_api.app.core.exceptions import (
    DuplicateTitleError,
    MemberNotFoundError,
    ProblemNotFoundError,
    UnsupportedLanguageError,
)
from codeython_api.app.core.security import get_current_username
from codeython_api.app.schemas.problem import ProblemCreate, ProblemCreated, ProblemDetail, ProblemProgress
from codeython_api.app.schemas.record import RecordCreate, RecordRead
from codeython_api.app.services.problem_service import ProblemService
from codeython_api.app.services.record_service import RecordService

router = APIRouter()


@router.post(
    "/",
    response_model=ProblemCreated,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_username)],
)
async def create_problem(problem_in: ProblemCreate) -> ProblemCreated:
    """Register a problem; HTTP 409 if the title is already used."""
    try:
        problem_no = await ProblemService.create_problem(problem_in)
    except DuplicateTitleError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ProblemCreated(problem_no=problem_no)


@router.get("/", response_model=List[ProblemProgress])
async def list_problems(username: str = Depends(get_current_username)) -> List[ProblemProgress]:
    try:
        return await ProblemService.list_problems(username)
    except MemberNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{problem_no}", response_model=ProblemDetail)
async def get_problem(
    problem_no: int,
    username: str = Depends(get_current_username),
) -> ProblemDetail:
    try:
        return await ProblemService.get_problem(problem_no, username)
    except (ProblemNotFoundError, MemberNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/{problem_no}/records",
    response_model=RecordRead,
    status_code=status.HTTP_201_CREATED,
)
async def submit_record(
    problem_no: int,
    record_in: RecordCreate,
    username: str = Depends(get_current_username),
) -> RecordRead:
    try:
        return await RecordService.submit_record(username, problem_no, record_in)
    except (ProblemNotFoundError, MemberNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
