"""
User API routes. Route prefix: /api/v1/users
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_user_service, resolve_user
from app.models.definitions import User
from app.schemas import UserResponse
from app.services import UserService

router = APIRouter(tags=["users"])


@router.get("/{hashid}", response_model=UserResponse)
async def get_user(
    user: User = Depends(resolve_user), service: UserService = Depends(get_user_service)
) -> UserResponse:
    return service.to_response(user)
