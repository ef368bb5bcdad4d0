"""
HTML pages: the chat client and the upload form.
"""

import html
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.core.config import get_settings

router = APIRouter()
settings = get_settings()

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def render_page(name: str, **values: str) -> str:
    """Load a page from static/ and fill its ``{{ key }}`` placeholders (HTML-escaped)."""
    page = (STATIC_DIR / name).read_text(encoding="utf-8")
    for key, value in values.items():
        page = page.replace("{{ " + key + " }}", html.escape(value))
    return page


@router.get("/", response_class=HTMLResponse)
async def chat_client():
    """Serve the single-page chat client."""
    return render_page("chat.html", course_name=settings.course_name)


@router.get("/upload-form", response_class=HTMLResponse)
async def upload_form():
    """Serve the material upload form."""
    return render_page("upload_form.html")
