from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Login account for the dashboard (stand-in, not a security design)."""

    user_id: int
    username: str
    password_hash: str
    role: Role
    is_active: bool = True
