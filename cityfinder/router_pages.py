# cityfinder/router_pages.py
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .deps import get_weather_client
from .host import HEADER_ID, VIEW_ID
from .shell import prerender

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(Path(__file__).parent / "ui" / "templates"))


# Catch-all: every path gets the page, rendered at that location.
@router.get("/{path:path}", response_class=HTMLResponse)
async def page(request: Request, path: str, api=Depends(get_weather_client)):
    document = await prerender(str(request.url), api)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "header": document.get_element_by_id(HEADER_ID).to_html(),
            "view": document.get_element_by_id(VIEW_ID).to_html(),
        },
    )
