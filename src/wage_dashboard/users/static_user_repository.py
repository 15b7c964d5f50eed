from __future__ import annotations

from typing import Iterable, Optional

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .model import User
from .repository import UserRepository


class StaticUserRepository(UserRepository):
    """Accounts taken from settings (DEMO_USERS); passwords are hashed on load."""

    def __init__(self, accounts: Iterable[dict]):
        self._users: dict[str, User] = {}
        for index, account in enumerate(accounts, start=1):
            user = User(
                user_id=index,
                username=account["username"],
                password_hash=generate_password_hash(account["password"]),
                role=Role(account.get("role", Role.USER.value)),
            )
            self._users[user.username] = user

    def get_by_username(self, username: str) -> Optional[User]:
        return self._users.get(username)
