# moviehub/errors.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

POKEMON_FETCH_ERROR = "Failed to fetch Pokemon and Pokewomen"


class UpstreamFailure(Exception):
    """
    Raised when the upstream Pokemon API cannot produce a usable result:
    network error, non-2xx status or a malformed body.
    """

    def __init__(self, reason: str, cause: Optional[Exception] = None):
        self.reason = reason
        self.cause = cause
        super().__init__(reason)


async def upstream_failure_handler(request: Request, exc: UpstreamFailure) -> JSONResponse:
    logger.warning(
        "Upstream failure on %s %s: %s (%r)",
        request.method,
        request.url.path,
        exc.reason,
        exc.cause,
    )
    return JSONResponse(status_code=500, content={"message": POKEMON_FETCH_ERROR})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UpstreamFailure, upstream_failure_handler)
