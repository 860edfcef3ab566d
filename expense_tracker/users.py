"""In-memory user directory.

Users exist only for the lifetime of the process.  Passwords are kept and
compared as plain text; the directory is append-only.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .errors import DuplicateEmail, InvalidCredentials, InvalidInput

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class User:
    name: str
    email: str
    password: str = field(repr=False)
    id: str = field(default_factory=_new_id)


class UserDirectory:
    """Registered users, in registration order."""

    def __init__(self) -> None:
        self._users: List[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users))

    def find_by_email(self, email: str) -> Optional[User]:
        # Exact, case-sensitive match
        for user in self._users:
            if user.email == email:
                return user
        return None

    def register(self, name: str, email: str, password: str) -> User:
        """Create and store a new user.

        Raises:
            InvalidInput: If any field is empty or only whitespace
            DuplicateEmail: If the email is already registered
        """
        if not all(value and value.strip() for value in (name, email, password)):
            logger.warning("Registration rejected: missing fields")
            raise InvalidInput()
        if self.find_by_email(email) is not None:
            logger.warning("Registration rejected: %s already registered", email)
            raise DuplicateEmail()
        user = User(name=name, email=email, password=password)
        self._users.append(user)
        logger.info("Registered user %s (%s)", user.id, user.email)
        return user

    def authenticate(self, email: str, password: str) -> User:
        for user in self._users:
            if user.email == email and user.password == password:
                logger.info("Authenticated %s", email)
                return user
        logger.warning("Failed login for %s", email)
        raise InvalidCredentials()
