"""
Registration, login sessions and password changes.

Passwords are stored as SHA-256 hex digests; sessions are opaque tokens held
in memory for the lifetime of the service.
"""

import hashlib
import logging
import uuid
from typing import Dict, Optional

from ..exceptions import AuthenticationError, InvalidInputError, NotFoundError
from ..models.enums import UserRole
from ..models.user import FrequentFlyerProfile, ManagerProfile, UserModel
from ..store import UserStore
from ..utils import validators

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest().upper()


def check_user_fields(name: str, age: int, email: str, mobile: str, password: str) -> None:
    """
    Validate the fields every user registers with.

    Raises:
        InvalidInputError: Naming the first invalid field
    """
    if not validators.valid_name(name):
        raise InvalidInputError("Invalid Name")
    if not validators.valid_age(age):
        raise InvalidInputError("Invalid Age")
    if not validators.valid_email(email):
        raise InvalidInputError("Invalid Email")
    if not validators.valid_mobile(mobile):
        raise InvalidInputError("Invalid Mobile")
    if not validators.valid_password(password):
        raise InvalidInputError("Invalid Password")


class AuthService:
    """User registration and session management."""

    def __init__(self, users: UserStore):
        self.users = users
        self._sessions: Dict[str, str] = {}

    def _register(self, role: UserRole, name, age, email, mobile, password, **profile) -> UserModel:
        user = UserModel(
            role=role,
            name=name,
            age=age,
            email=email,
            mobile=mobile,
            password_hash=hash_password(password),
            **profile,
        )
        self.users.add(user)
        logger.info("Registered %s %s", role.value, email)
        return user

    def register_traveller(self, name: str, age: int, email: str, mobile: str, password: str) -> UserModel:
        check_user_fields(name, age, email, mobile, password)
        return self._register(UserRole.TRAVELLER, name, age, email, mobile, password)

    def register_frequent_flyer(
        self,
        name: str,
        age: int,
        email: str,
        mobile: str,
        password: str,
        ff_number: str,
        points: int = 0,
    ) -> UserModel:
        check_user_fields(name, age, email, mobile, password)
        if not validators.valid_ff_number(ff_number):
            raise InvalidInputError("Invalid Frequent Flyer Number")
        if not validators.valid_ff_points(points):
            raise InvalidInputError("Invalid Frequent Flyer Points")
        return self._register(
            UserRole.FREQUENT_FLYER, name, age, email, mobile, password,
            frequent_flyer=FrequentFlyerProfile(ff_number=ff_number, points=points),
        )

    def register_manager(
        self, name: str, age: int, email: str, mobile: str, password: str, staff_id: str
    ) -> UserModel:
        check_user_fields(name, age, email, mobile, password)
        if not validators.valid_staff_id(staff_id):
            raise InvalidInputError("Invalid Staff ID")
        return self._register(
            UserRole.FLIGHT_MANAGER, name, age, email, mobile, password,
            manager=ManagerProfile(staff_id=staff_id),
        )

    def email_exists(self, email: str) -> bool:
        return self.users.get(email) is not None

    def check_password(self, email: str, password: str) -> bool:
        user = self.users.get(email)
        return user is not None and user.password_hash == hash_password(password)

    def login(self, email: str, password: str) -> str:
        """
        Open a session for email.

        Returns:
            str: Session token for current_user() and logout()

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        if not self.check_password(email, password):
            logger.debug("Failed login for %s", email)
            raise AuthenticationError("Invalid credentials")
        token = uuid.uuid4().hex
        self._sessions[token] = email
        return token

    def logout(self, token: str) -> None:
        self._sessions.pop(token, None)

    def is_logged_in(self, token: str) -> bool:
        return token in self._sessions

    def current_user(self, token: str) -> Optional[UserModel]:
        email = self._sessions.get(token)
        return self.users.get(email) if email is not None else None

    def change_password(self, email: str, old_password: str, new_password: str) -> None:
        user = self.users.get(email)
        if user is None:
            raise NotFoundError("No such user")
        if not validators.valid_password(new_password):
            raise InvalidInputError("Invalid Password")
        if user.password_hash != hash_password(old_password):
            raise AuthenticationError("Entered password does not match existing password.")
        user.password_hash = hash_password(new_password)
        logger.info("Password changed for %s", email)
