# routes/api_appinfo.py
# API endpoints for decoded appinfo.vdf data

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from ..dependencies import get_appinfo
from ..vdf import Document, Leaf

router = APIRouter(tags=["Appinfo"])


class AppListResponse(BaseModel):
    count: int
    appids: List[int]


class AppDetailsResponse(BaseModel):
    appid: int
    data: Dict[str, Any]


class AppValueResponse(BaseModel):
    appid: int
    path: str
    kind: str  # 'leaf' or 'branch'
    value: Optional[str] = None


def _get_app(document: Document, appid: int):
    details = document.get(appid)
    if details is None:
        raise HTTPException(status_code=404, detail=f"App {appid} not found in appinfo")
    return details


@router.get("/api/appinfo")
def list_apps(document: Document = Depends(get_appinfo)) -> AppListResponse:
    """List every appid present in appinfo.vdf."""
    appids = sorted(document)
    return AppListResponse(count=len(appids), appids=appids)


@router.get("/api/appinfo/{appid}")
def get_app(appid: int, document: Document = Depends(get_appinfo)) -> AppDetailsResponse:
    """Get the full decoded tree for one app."""
    details = _get_app(document, appid)
    return AppDetailsResponse(appid=appid, data=details.to_python())


@router.get("/api/appinfo/{appid}/value")
def get_app_value(
    appid: int,
    path: str = Query(..., description="Key path, e.g. common/name"),
    document: Document = Depends(get_appinfo),
) -> AppValueResponse:
    """Look up a single key path inside one app's tree."""
    details = _get_app(document, appid)

    node = details.find(path)
    if node is None:
        raise HTTPException(status_code=404, detail=f"Key path '{path}' not found for app {appid}")

    if isinstance(node, Leaf):
        return AppValueResponse(appid=appid, path=path, kind="leaf", value=node.value)
    return AppValueResponse(appid=appid, path=path, kind="branch")
