from enum import Enum
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class AuthErrorKind(str, Enum):
    INVALID_INPUT = 'invalid_input'
    INVALID_CREDENTIALS = 'invalid_credentials'
    UNAUTHORIZED = 'unauthorized'
    FORBIDDEN = 'forbidden'
    INTERNAL = 'internal'


_STATUS_BY_KIND = {
    AuthErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    AuthErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    AuthErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    AuthErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    AuthErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_MESSAGE_BY_KIND = {
    AuthErrorKind.INVALID_INPUT: 'Invalid input',
    AuthErrorKind.INVALID_CREDENTIALS: 'Incorrect email or password',
    AuthErrorKind.UNAUTHORIZED: 'Unauthorized',
    AuthErrorKind.FORBIDDEN: 'Not allowed',
    AuthErrorKind.INTERNAL: 'Internal server error',
}


class AuthError(Exception):
    """Coarse outcome of an auth operation.

    Only INVALID_INPUT carries a caller-facing detail; every other kind maps to
    a fixed message so the response never reveals which check failed.
    """

    def __init__(self, kind: AuthErrorKind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail if kind == AuthErrorKind.INVALID_INPUT and detail else _MESSAGE_BY_KIND[kind]
        super().__init__(self.detail)

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self.kind]


async def _auth_error_handler(_: Request, exc: AuthError) -> JSONResponse:
    headers = None
    if exc.kind == AuthErrorKind.UNAUTHORIZED:
        headers = {'WWW-Authenticate': 'Bearer'}
    return JSONResponse(status_code=exc.status_code, content={'detail': exc.detail}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthError, _auth_error_handler)
