from __future__ import annotations

from fastapi import APIRouter, Depends

from cookbook.app.deps import get_token_service, require_admin
from cookbook.app.infra.auth.tokens import AdminIdentity, TokenService
from cookbook.app.schemas.auth import AdminMe, LoginRequest, LoginResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    tokens: TokenService = Depends(get_token_service),
) -> LoginResponse:
    issued = tokens.login(payload.username, payload.password)
    return LoginResponse(token=issued.token, expiresAt=issued.expires_at)


@router.get("/me", response_model=AdminMe)
async def me(admin: AdminIdentity = Depends(require_admin)) -> AdminMe:
    return AdminMe(username=admin.username, role=admin.role, expiresAt=admin.expires_at)
