from users_api.models.user import User, UserResponse

__all__ = [
    "User",
    "UserResponse",
]
