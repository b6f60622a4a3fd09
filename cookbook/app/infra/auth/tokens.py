# cookbook/app/infra/auth/tokens.py
"""
Admin bearer tokens.
Issues and verifies HS256 JWTs carrying a role claim.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from cookbook.app.domain.errors import AuthError
from cookbook.app.domain.models import CallerRole

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ADMIN_ROLE = "admin"


@dataclass
class IssuedToken:
    token: str
    expires_at: datetime


@dataclass
class AdminIdentity:
    username: str
    role: str
    expires_at: Optional[datetime] = None


class TokenService:
    """
    Access gate for the API.

    Responsibilities:
    - Check admin credentials on login
    - Issue signed admin tokens
    - Verify tokens and classify callers as admin or public
    """

    def __init__(
        self,
        secret_key: str,
        admin_username: str,
        admin_password: str,
        ttl_minutes: int = 720,
    ):
        if not secret_key:
            raise ValueError("A token signing key is required")
        if not admin_password:
            raise ValueError("An admin password is required")
        self._secret_key = secret_key
        self._admin_username = admin_username
        self._admin_password = admin_password
        self.ttl = timedelta(minutes=ttl_minutes)

    def check_credentials(self, username: str, password: str) -> bool:
        user_ok = secrets.compare_digest(
            (username or "").encode("utf-8"), self._admin_username.encode("utf-8")
        )
        password_ok = secrets.compare_digest(
            (password or "").encode("utf-8"), self._admin_password.encode("utf-8")
        )
        return user_ok and password_ok

    def login(self, username: str, password: str) -> IssuedToken:
        if not self.check_credentials(username, password):
            logger.warning("Rejected admin login for user=%s", username)
            raise AuthError("Invalid credentials.")
        logger.info("Admin login: user=%s", username)
        return self.issue(username)

    def issue(self, username: str, now: Optional[datetime] = None) -> IssuedToken:
        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + self.ttl
        claims = {
            "sub": username,
            "role": ADMIN_ROLE,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: Optional[str]) -> AdminIdentity:
        """
        Decode and check an admin token.

        Raises:
            AuthError: If the token is missing, malformed, expired or not an admin token
        """
        if not token:
            raise AuthError("Missing token")
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except JWTError:
            raise AuthError("Invalid or expired token")

        if payload.get("role") != ADMIN_ROLE or not payload.get("sub"):
            raise AuthError("Invalid or expired token")

        exp = payload.get("exp")
        return AdminIdentity(
            username=str(payload["sub"]),
            role=ADMIN_ROLE,
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
        )

    def classify(self, token: Optional[str]) -> CallerRole:
        try:
            self.verify(token)
        except AuthError:
            return CallerRole.PUBLIC
        return CallerRole.ADMIN
