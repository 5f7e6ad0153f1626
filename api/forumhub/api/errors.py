"""Exception types for the ForumHub API and their HTTP renderings."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ForumHubError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class TopicNotFound(ForumHubError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, topic_id: int):
        self.topic_id = topic_id
        super().__init__(f"Topic not found with id {topic_id}", "TOPIC_NOT_FOUND")


def _field_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        # loc is ("body", "title"), ("path", "topic_id") or just ("body",)
        loc = [str(part) for part in err.get("loc", ())]
        field = ".".join(loc[1:]) or (loc[0] if loc else "request")
        cause = (err.get("ctx") or {}).get("error")
        message = str(cause) if isinstance(cause, Exception) else err.get("msg", "Invalid value")
        errors.append({"field": field, "message": message})
    return errors


async def forumhub_error_handler(_: Request, exc: ForumHubError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _field_errors(exc)
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ForumHubError, forumhub_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
