# moviehub/models/users.py

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginEcho(BaseModel):
    email: EmailStr
    message: str
