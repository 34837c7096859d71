"""
Top-level router for version 1 of the API.

Aggregates the domain routers.  Each endpoint module declares its
paths relative to the prefix given here.
"""

from fastapi import APIRouter

from .endpoints import info, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(info.router, prefix="/info", tags=["info"])
