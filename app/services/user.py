import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.events import EventDispatcher, UserRegistered
from app.core.security.password import hash_password
from app.exceptions.http import ConflictError, ValidationError
from app.models.definitions import User
from app.repositories import UserRepository
from app.schemas import RegisterUserRequest, UserResponse

from .hashid import HashIdService

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        session: AsyncSession,
        user_repo: UserRepository,
        hashids: HashIdService[User],
        events: EventDispatcher,
    ):
        self._session = session
        self._user_repo = user_repo
        self._hashids = hashids
        self._events = events

    # --- 1. USER REGISTRATION (Atomic Operation) ---

    async def register_user(self, data: RegisterUserRequest) -> UserResponse:
        """
        Registers a new user ATOMICALLY: the identity row and its hashid are
        committed together, then UserRegistered is dispatched. A failing listener
        is logged and does not undo or fail the committed registration.

        Expects a session without an open transaction.
        """

        if not data.password:
            raise ValidationError("Password is required for user registration.")

        # --- START ATOMIC TRANSACTION ---
        async with self._session.begin():

            if await self._user_repo.get_by_email(data.email):
                raise ConflictError("User with this email already exists.")

            if await self._user_repo.get_by_username(data.username):
                raise ConflictError("User with this username already exists.")

            new_user_data = data.model_dump(exclude={"password"})
            new_user_data["password_hash"] = hash_password(data.password)
            created_user: User = await self._user_repo.create(new_user_data)

            # The primary key exists only after the flush in create().
            await self._hashids.materialize(created_user)

            # --- END ATOMIC TRANSACTION ---

        try:
            await self._events.dispatch(
                UserRegistered(user_id=created_user.id, hashid=created_user.hashid, email=created_user.email)
            )
        except Exception:
            logger.exception("UserRegistered listeners failed for user %s", created_user.hashid)

        return self.to_response(created_user)

    # --- 2. SERIALIZATION ---

    def to_response(self, user: User) -> UserResponse:
        return UserResponse.from_user(user, self._hashids.get_hashid(user))
