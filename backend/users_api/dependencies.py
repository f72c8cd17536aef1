"""
Dependency providers for the users routes.

The controller receives a ``UserService`` which receives a
``UserRepository`` bound to the request's session. Tests replace any
link in this chain through ``app.dependency_overrides``.
"""

from fastapi import Depends
from sqlmodel import Session

from users_api.database import get_session
from users_api.repositories.user_repository import UserRepository
from users_api.services.user_service import UserService


def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)


def get_user_service(repository: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repository)
