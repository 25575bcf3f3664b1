"""PostgreSQL implementation of User repository."""

from typing import List, Optional

import logfire
from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.model import User
from devconnect.domain.repository import UserRepository
from devconnect.domain.value import UserId
from devconnect.persistence.mappers import row_to_user, user_to_dict
from devconnect.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users table access; one row per account."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find_one(self, condition: ColumnElement[bool]) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(condition))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> List[User]:
        if not user_ids:
            return []
        result = await self.session.execute(
            select(users_table).where(users_table.c.id.in_(user_ids))
        )
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_one(users_table.c.email == email)

    async def save(self, user: User) -> User:
        with logfire.span("user_repository.save", user_id=str(user.id)):
            values = user_to_dict(user)
            stmt = insert(users_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return user

    async def delete(self, user_id: UserId) -> bool:
        with logfire.span("user_repository.delete", user_id=str(user_id)):
            result = await self.session.execute(
                delete(users_table).where(users_table.c.id == user_id)
            )
            return result.rowcount > 0
