# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT
"""Catch-all responder: every request gets the same HTML page."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from starlette.types import Receive, Scope, Send

from common.config import RESPONSE_BODY

router = APIRouter()


async def respond(request: Request) -> HTMLResponse:
    """Answer any method on any path with the fixed page.

    The request body is never read.
    """
    counter = getattr(request.app.state, "request_counter", None)
    if counter is not None:
        counter.add(1, {"http.method": request.method})
    return HTMLResponse(RESPONSE_BODY)


class Responder:
    """ASGI endpoint wrapping respond().

    Starlette limits plain function endpoints to GET/HEAD; an ASGI endpoint
    is matched for every method.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = await respond(Request(scope, receive))
        await response(scope, receive, send)


router.add_route("/{path:path}", Responder(), include_in_schema=False)
