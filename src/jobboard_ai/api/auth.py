"""Authentication gate for the AI endpoints.

Identity is owned by an external provider; this module only maps a
bearer token to a user id. Any callable dependency returning a user id
(or raising ``NotAuthenticated``) can replace ``BearerTokenAuthenticator``.
"""

from __future__ import annotations

import secrets
from typing import Mapping

from fastapi import Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer


class NotAuthenticated(Exception):
    """Request carries no valid credentials."""


_bearer = HTTPBearer(auto_error=False)


class BearerTokenAuthenticator:
    def __init__(self, tokens: Mapping[str, str]):
        self._tokens = dict(tokens)

    async def __call__(self, request: Request) -> str:
        credentials: HTTPAuthorizationCredentials | None = await _bearer(request)
        if credentials is None:
            raise NotAuthenticated()
        for token, user_id in self._tokens.items():
            if secrets.compare_digest(token.encode(), credentials.credentials.encode()):
                return user_id
        raise NotAuthenticated()
