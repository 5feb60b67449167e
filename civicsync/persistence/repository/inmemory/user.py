"""In-memory user repository."""

from typing import Iterable, Optional, Sequence

from civicsync.domain.model.user import User
from civicsync.domain.repository.user import UserRepository
from civicsync.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository.

    Holds users for the lifetime of the process.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[UserId, User] = {user.id: user for user in users}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email, ignoring case."""
        wanted = email.lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def count(self) -> int:
        """Count all users."""
        return len(self._users)
