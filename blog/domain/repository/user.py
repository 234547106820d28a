"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.user import User
from blog.domain.value import UserId


class UserRepository(ABC):
    """Storage of user accounts.

    Lookups return None when nothing matches; they never raise for a miss.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Exact, case-sensitive username match."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Match on the lower-cased email address."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create the user, or replace the stored account with the same id."""
        pass
