from collections.abc import Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.utils import apply_dict_updates
from app.models import Base


class BaseRepository[ModelT: Base]:
    """
    Generic data access for a single mapped model. All writes flush but never
    commit; the transaction boundary belongs to the caller.
    """

    # Attributes a caller may never mass-assign; the database or a service owns them.
    protected_attrs: frozenset[str] = frozenset({"id", "created_at", "created_by"})

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self.session = session
        self.model = model

    def has_column(self, column: str) -> bool:
        return column in self.model.__table__.columns

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        """Retrieves a row by its primary key."""
        return await self.session.get(self.model, entity_id)

    async def get_by_column(self, column: str, value: Any) -> ModelT | None:
        """Retrieves the single row whose (unique) column equals the given value."""
        stmt = select(self.model).where(self.model.__table__.columns[column] == value)
        return (await self.session.scalars(stmt)).one_or_none()

    async def create(self, create_data: dict[str, Any]) -> ModelT:
        """Creates a new row and flushes it so the primary key is assigned."""
        entity = apply_dict_updates(self.model(), create_data, self.protected_attrs)
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def update(
        self, entity: ModelT, update_data: dict[str, Any], excluded_attrs: Iterable[str] | None = None
    ) -> ModelT:
        """
        Applies the given fields to an already persisted row and flushes the change.
        Fields in ``protected_attrs`` are skipped unless ``excluded_attrs`` overrides them.
        """
        if excluded_attrs is None:
            excluded_attrs = self.protected_attrs
        apply_dict_updates(entity, update_data, excluded_attrs)
        await self.session.flush()
        return entity
