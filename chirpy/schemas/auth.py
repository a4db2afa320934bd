from pydantic import BaseModel, EmailStr
from chirpy.schemas.user import UserOut


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(UserOut):
    token: str
    refresh_token: str


class TokenResponse(BaseModel):
    token: str
