"""HTML Forms: serve the static register and search forms verbatim."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "static"

router = APIRouter(tags=["forms"])


@router.get("/RegisterForm.html", include_in_schema=False)
async def register_form():
    return FileResponse(STATIC_DIR / "RegisterForm.html", media_type="text/html")


@router.get("/SearchForm.html", include_in_schema=False)
async def search_form():
    return FileResponse(STATIC_DIR / "SearchForm.html", media_type="text/html")
