"""
Information endpoint for API v1.

Returns the project name, version and the number of stored users.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from user_registry_api.app.core.store import UserStore, get_user_store

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def get_info(request: Request, store: UserStore = Depends(get_user_store)) -> Dict[str, Any]:
    app = request.app
    return {"project": app.title, "version": app.version, "users": len(store)}
