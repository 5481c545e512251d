"""
FastAPI dependencies. Shared objects (codec, session factory, event dispatcher)
live on ``app.state`` and are built once by ``create_app``.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import session_scope
from app.models.definitions import User
from app.repositories import UserRepository
from app.services import HashIdService, UserService


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One session per request, committed after the handler returns."""
    async with session_scope(request.app.state.session_factory) as session:
        yield session


def get_user_repository(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return UserRepository(session)


def get_user_hashids(
    request: Request, user_repo: UserRepository = Depends(get_user_repository)
) -> HashIdService[User]:
    state = request.app.state
    return HashIdService(state.hashid_codec, user_repo, lookup=state.settings.hashid_lookup)


def get_user_service(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    user_repo: UserRepository = Depends(get_user_repository),
    hashids: HashIdService[User] = Depends(get_user_hashids),
) -> UserService:
    return UserService(session, user_repo, hashids, request.app.state.events)


async def resolve_user(hashid: str, hashids: HashIdService[User] = Depends(get_user_hashids)) -> User:
    """
    Binds a '{hashid}' path parameter to a User. Unknown or undecodable hashids
    raise NotFoundError, which the exception handler renders as a 404.
    """
    return await hashids.resolve(hashid)
