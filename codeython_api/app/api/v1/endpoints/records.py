"""Submission history endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from codeython_api.app.core.exceptions import MemberNotFoundError
from codeython_api.app.core.security import get_current_username
from codeython_api.app.schemas.record import RecordHistory
from codeython_api.app.services.problem_service import ProblemService

router = APIRouter()


@router.get("/", response_model=List[RecordHistory])
async def list_records(username: str = Depends(get_current_username)) -> List[RecordHistory]:
    """Return the caller's records, most recently updated first."""
    try:
        return await ProblemService.list_records(username)
    except MemberNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
