from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.definitions import User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    # The hashid is derived from the primary key and written by HashIdService only.
    protected_attrs = BaseRepository.protected_attrs | {"hashid"}

    def __init__(self, session: AsyncSession):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Retrieves a User by their unique email (login ID)."""
        stmt = select(User).where(User.email == email)
        return (await self.session.scalars(stmt)).one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return (await self.session.scalars(stmt)).one_or_none()