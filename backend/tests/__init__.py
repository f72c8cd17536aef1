# Force SQLModel table registration at test discovery time
# This ensures the users table is registered before any test database creation
from users_api.models.user import User  # noqa: F401
