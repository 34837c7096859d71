"""
Information endpoint for API v1.

Reports the service name and version together with the number of
users currently held in memory.  Useful as a lightweight liveness
check.
"""

from fastapi import APIRouter, Depends, Request

from user_registry_api.app.core.store import UserStore, get_user_store
from user_registry_api.app.schemas.user import ServiceInfo

router = APIRouter()


@router.get("", response_model=ServiceInfo)
async def get_info(request: Request, store: UserStore = Depends(get_user_store)) -> ServiceInfo:
    return ServiceInfo(name=request.app.title, version=request.app.version, users=len(store))
