# cookbook/app/deps.py
# Everything here reads from app.state, populated once by create_app().

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cookbook.app.domain.errors import AuthError, NotFoundError
from cookbook.app.domain.models import CallerRole
from cookbook.app.infra.auth.tokens import AdminIdentity, TokenService
from cookbook.app.services.content_service import RecipeService, StoryService

auth_scheme = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_recipe_service(request: Request) -> RecipeService:
    return request.app.state.recipe_service


def get_story_service(request: Request) -> StoryService:
    return request.app.state.story_service


def _bearer_token(cred: HTTPAuthorizationCredentials | None) -> str | None:
    if cred is None or cred.scheme.lower() != "bearer":
        return None
    return cred.credentials


async def get_caller_role(
    cred: HTTPAuthorizationCredentials | None = Depends(auth_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> CallerRole:
    """
    Classify the caller. Public routes never reject a request here:
    a missing or bad token simply makes the caller public.
    """
    return tokens.classify(_bearer_token(cred))


async def require_admin(
    cred: HTTPAuthorizationCredentials | None = Depends(auth_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AdminIdentity:
    token = _bearer_token(cred)
    if token is None:
        raise AuthError("Missing token")
    return tokens.verify(token)


# Largest value of the bigint id columns.
MAX_ID = 2**63 - 1


def parse_id(value: str, kind: str) -> int:
    """Path ids that are not positive bigint values can never match a row."""
    if not (value.isascii() and value.isdigit()):
        raise NotFoundError(kind, value)
    item_id = int(value)
    if item_id <= 0 or item_id > MAX_ID:
        raise NotFoundError(kind, value)
    return item_id
