# in-memory user directory and the current session
from typing import Iterable, List, Optional

from store.errors import AuthFailure, ValidationFailure
from store.models import User
from utils.logger import get_logger

_logger = get_logger(__name__)

DEMO_USER = User(username="demo_user", email="user@example.com", password="password123")


class AuthRegistry:
    """
    Users are compared as plain values; there is no hashing here.
    At most one user is logged in at a time.
    """

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._users: List[User] = list(users) if users is not None else [DEMO_USER]
        self.current_user: Optional[User] = None

    @property
    def users(self) -> List[User]:
        return list(self._users)

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users:
            if user.email == email:
                return user
        return None

    def login(self, email: str, password: str) -> User:
        """Raises AuthFailure on a wrong email or password; the session is unchanged."""
        for user in self._users:
            if user.email == email and user.password == password:
                self.current_user = user
                _logger.info(f"User '{user.username}' logged in.")
                return user
        _logger.info("Rejected login attempt.")
        raise AuthFailure("Invalid email or password")

    def signup(self, username: str, email: str, password: str) -> User:
        """Register and log in straight away. Emails are unique (case-sensitive)."""
        if self.find_by_email(email) is not None:
            raise ValidationFailure("User with this email already exists", field="email")
        user = User(username=username, email=email, password=password)
        self._users.append(user)
        self.current_user = user
        _logger.info(f"Registered and logged in '{username}'.")
        return user

    def logout(self) -> Optional[User]:
        """Returns the user that was logged in, if any."""
        user, self.current_user = self.current_user, None
        if user:
            _logger.info(f"User '{user.username}' logged out.")
        return user
