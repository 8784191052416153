"""
页面路由，不需要认证
"""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, RedirectResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter()


@router.get("/workflow")
def workflow():
    return RedirectResponse(url="/workflow.html", status_code=302)


@router.get("/workflow.html", include_in_schema=False)
def workflow_page():
    return FileResponse(STATIC_DIR / "workflow.html", media_type="text/html")
