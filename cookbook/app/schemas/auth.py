from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    token: str
    expiresAt: datetime


class AdminMe(BaseModel):
    username: str
    role: str
    expiresAt: Optional[datetime] = None
