"""
Auth API routes. Route prefix: /api/v1/auth
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_user_service
from app.schemas import RegisterUserRequest, UserResponse
from app.services import UserService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterUserRequest, service: UserService = Depends(get_user_service)) -> UserResponse:
    """Register a new user and return it, identified by its hashid."""
    return await service.register_user(data)
