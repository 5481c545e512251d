from .user import RegisterUserRequest, UserResponse

__all__ = ["RegisterUserRequest", "UserResponse"]
