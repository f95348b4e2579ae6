"""
In-memory user store keyed by email, ignoring case.
"""

import logging
from typing import Dict, Optional

from ..exceptions import DuplicateResourceError
from ..models.user import UserModel

logger = logging.getLogger(__name__)


class UserStore:
    """Registered users keyed by lower-cased email."""

    def __init__(self):
        self._users: Dict[str, UserModel] = {}

    def __len__(self) -> int:
        return len(self._users)

    def add(self, user: UserModel) -> None:
        """
        Register a user.

        Raises:
            DuplicateResourceError: If the email is already registered
        """
        key = user.email.lower()
        if key in self._users:
            raise DuplicateResourceError("Email already registered")
        self._users[key] = user
        logger.debug("Stored %s %s", user.role.value, user.email)

    def get(self, email: str) -> Optional[UserModel]:
        return self._users.get(email.lower())
