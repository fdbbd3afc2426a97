# moviehub/api/users.py

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from moviehub.models.users import LoginEcho, LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def parse_login(request: Request) -> LoginRequest:
    """
    Read a login body sent either as JSON or as an urlencoded form.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type == FORM_CONTENT_TYPE:
        form = await request.form()
        data: Dict[str, Any] = dict(form)
    elif content_type in ("application/json", ""):
        try:
            data = await request.json()
        except ValueError:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "Invalid JSON body", "input": None}]
            )
    else:
        raise HTTPException(status_code=415, detail=f"Unsupported content type: {content_type}")

    try:
        return LoginRequest.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)]
        )


@router.post("/login", response_model=LoginEcho)
async def login(payload: LoginRequest = Depends(parse_login)) -> LoginEcho:
    """
    Echo the submitted login. No credentials are checked.
    """
    logger.debug("Login received")
    return LoginEcho(email=payload.email, message="Login received")
