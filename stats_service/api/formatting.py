"""Response formatting with a minimal Accept-header negotiation.

Only the exact header value ``text/html`` selects the rendered view; anything
else, including no header at all, gets JSON.
"""
from __future__ import annotations

import json
from html import escape

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import BaseModel

__all__: list[str] = [
    "HTML_ACCEPT",
    "wants_html",
    "render",
    "respond",
]

HTML_ACCEPT = "text/html"


def wants_html(accept: str | None) -> bool:
    return accept == HTML_ACCEPT


def render(payload: BaseModel, accept: str | None, status_code: int = 200) -> Response:
    """
    Serialize ``payload`` as JSON, or as 2-space indented JSON inside
    ``<pre>`` when the client asked for ``text/html``.
    """
    data = payload.model_dump()
    if wants_html(accept):
        text = json.dumps(data, indent=2, ensure_ascii=False)
        return HTMLResponse(f"<pre>{escape(text, quote=False)}</pre>", status_code=status_code)
    return JSONResponse(data, status_code=status_code)


def respond(request: Request, payload: BaseModel, status_code: int = 200) -> Response:
    """Render ``payload`` according to the request's Accept header."""
    return render(payload, request.headers.get("accept"), status_code=status_code)
