# app/core/errors.py
"""Domain errors and their HTTP mapping."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class TicketAppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 400
    detail = "Bad request"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


class NotFound(TicketAppError):
    status_code = 404
    detail = "Ticket not found"


class Forbidden(TicketAppError):
    status_code = 403
    detail = "Access denied"


class MissingIdentity(TicketAppError):
    """No usable subject id; surfaced as unauthenticated."""

    status_code = 401
    detail = "Not authenticated"


async def handle_app_error(request: Request, exc: TicketAppError) -> JSONResponse:
    log.debug("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, exc.detail)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, MissingIdentity) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TicketAppError, handle_app_error)


__all__ = ["TicketAppError", "NotFound", "Forbidden", "MissingIdentity", "register_exception_handlers"]
