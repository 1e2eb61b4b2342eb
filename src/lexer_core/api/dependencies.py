"""
Shared route dependencies.

The host authenticates callers and passes the identity in the X-Caller
header; the API treats it as opaque.
"""

from fastapi import Header, Request

from lexer_core.api.schemas.exceptions import MissingCallerError
from lexer_core.contract import LexerCore

CALLER_HEADER = "X-Caller"


def get_core(request: Request) -> LexerCore:
    """Return the registry bound to the application."""
    return request.app.state.core


def require_caller(x_caller: str | None = Header(None, alias=CALLER_HEADER)) -> str:
    """Return the caller identity, rejecting requests that carry none."""
    if not x_caller or not x_caller.strip():
        raise MissingCallerError(detail=f"Send the caller identity in the {CALLER_HEADER} header")
    return x_caller.strip()
