import logging

from app.core.hashids import HashIdCodec, HashIdLookup
from app.exceptions import ConfigurationError, NotFoundError
from app.models import Base
from app.repositories import BaseRepository

logger = logging.getLogger(__name__)

HASHID_COLUMN = "hashid"


class HashIdService[ModelT: Base]:
    """
    Connects the hashid codec to one entity type: produces an entity's public
    identifier, persists it once after creation, and resolves public identifiers
    back to rows.
    """

    def __init__(
        self,
        codec: HashIdCodec,
        repository: BaseRepository[ModelT],
        column: str = HASHID_COLUMN,
        lookup: HashIdLookup = HashIdLookup.PRIMARY_KEY,
    ):
        self._codec = codec
        self._repository = repository
        self._column = column
        self._lookup = lookup
        self._has_column = repository.has_column(column)

        if lookup is HashIdLookup.COLUMN and not self._has_column:
            raise ConfigurationError(
                f"{repository.model.__name__} has no '{column}' column to look up hashids by."
            )

    # --- 1. PRODUCING THE PUBLIC IDENTIFIER ---

    def get_hashid(self, entity: ModelT) -> str:
        """
        Returns the stored hashid, or encodes the primary key on the fly when the
        column is missing or still empty. Never writes.
        """
        stored = getattr(entity, self._column, None) if self._has_column else None
        if stored:
            return stored

        return self._codec.encode(entity.id)

    async def materialize(self, entity: ModelT) -> bool:
        """
        Persists the hashid of a freshly created entity. Does nothing if the entity
        type has no hashid column or the value is already set.

        Returns:
            True if the column was written.
        """
        if not self._has_column or getattr(entity, self._column):
            return False

        hashid = self._codec.encode(entity.id)
        excluded = self._repository.protected_attrs - {self._column}
        await self._repository.update(entity, {self._column: hashid}, excluded_attrs=excluded)
        logger.debug("Materialized hashid %s for %s", hashid, type(entity).__name__)
        return True

    # --- 2. RESOLVING A PUBLIC IDENTIFIER ---

    def get_id(self, hashid: str) -> int | None:
        """Decodes a hashid to its primary key without touching storage."""
        return self._codec.decode(hashid)

    async def resolve(self, hashid: str) -> ModelT:
        """
        Loads the entity a hashid refers to.

        Raises:
            NotFoundError: If the hashid does not decode under the current
                configuration, or no such row exists. Strings that fail to
                decode never reach the database.
        """
        entity_id = self._codec.decode(hashid)
        if entity_id is None:
            logger.debug("Rejected undecodable hashid %r", hashid)
            raise NotFoundError.for_model(self._repository.model)

        if self._lookup is HashIdLookup.COLUMN:
            entity = await self._find_by_column(hashid, entity_id)
        else:
            entity = await self._repository.get_by_id(entity_id)

        if entity is None:
            raise NotFoundError.for_model(self._repository.model)
        return entity

    async def _find_by_column(self, hashid: str, entity_id: int) -> ModelT | None:
        entity = await self._repository.get_by_column(self._column, hashid)
        if entity is not None:
            return entity

        # Rows created before the column was populated only match by primary key.
        legacy = await self._repository.get_by_id(entity_id)
        if legacy is not None and not getattr(legacy, self._column):
            return legacy
        return None
