from __future__ import annotations

import base64
import logging
from time import perf_counter

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param
from starlette.concurrency import run_in_threadpool

from forumhub.core.security import CredentialStore

PROTECTED_PREFIX = "/api"
_LOG = logging.getLogger("forumhub.http")


def is_protected(path: str) -> bool:
    return path == PROTECTED_PREFIX or path.startswith(PROTECTED_PREFIX + "/")


def parse_basic_credentials(authorization: str | None) -> HTTPBasicCredentials | None:
    """Decode an ``Authorization: Basic`` header. The user-pass pair is read as UTF-8."""
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic":
        return None
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except ValueError:
        return None
    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    return HTTPBasicCredentials(username=username, password=password)


def _unauthorized(realm: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": "Not authenticated"},
        headers={"WWW-Authenticate": f'Basic realm="{realm}"'},
    )


def install_basic_auth(app: FastAPI, credentials: CredentialStore, realm: str) -> None:
    """Reject every /api request without valid Basic credentials before it is routed."""

    @app.middleware("http")
    async def _basic_auth_middleware(request: Request, call_next):
        if not is_protected(request.url.path):
            return await call_next(request)

        supplied = parse_basic_credentials(request.headers.get("Authorization"))
        if supplied is None:
            _LOG.warning("Rejected %s %s: missing or malformed credentials", request.method, request.url.path)
            return _unauthorized(realm)

        ok = await run_in_threadpool(credentials.authenticate, supplied.username, supplied.password)
        if not ok:
            _LOG.warning("Rejected %s %s: bad credentials", request.method, request.url.path)
            return _unauthorized(realm)

        return await call_next(request)


def install_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def _request_logging_middleware(request: Request, call_next):
        started_at = perf_counter()
        response = await call_next(request)
        duration_ms = (perf_counter() - started_at) * 1000.0
        _LOG.info(
            "%s %s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
