"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import ColumnElement, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users table access.

    Username and email uniqueness is enforced by unique constraints as well
    as by the registration checks in UserService.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find_one(self, condition: ColumnElement[bool]) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(condition))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        return await self._find_one(users_table.c.username == username)

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_one(users_table.c.email == email.lower())

    async def save(self, user: User) -> User:
        """Insert the user, or overwrite the stored row with the same id.

        ``created_at`` is never overwritten.
        """
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key not in ("id", "created_at")
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
