"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a unified prefix.  When a new
domain is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import members, problems, records

router = APIRouter()

router.include_router(members.router, prefix="/members", tags=["members"])
router.include_router(problems.router, prefix="/problems", tags=["problems"])
router.include_router(records.router, prefix="/records", tags=["records"])
