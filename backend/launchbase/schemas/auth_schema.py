"""Current-user response schema."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UserResponse(BaseModel):
    id: str
    email: str
    username: str
    auth_provider: str
    created_at: Optional[datetime] = None
