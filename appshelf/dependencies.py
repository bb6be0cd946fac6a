# dependencies.py
# FastAPI dependency injection for the decoded appinfo document

from fastapi import HTTPException

from .services.appinfo_service import load_appinfo
from .vdf import Document, SourceNotFoundError, VdfError


def get_appinfo() -> Document:
    """
    Appinfo dependency that decodes (or reuses) Steam's appinfo.vdf.

    Usage:
        @router.get("/endpoint")
        def endpoint(document: Document = Depends(get_appinfo)):
            details = document.get(appid)
    """
    try:
        return load_appinfo()
    except SourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except VdfError as e:
        raise HTTPException(status_code=500, detail=str(e))
