"""
User business rules.

``UserService`` turns repository outcomes into service envelopes. Missing
rows become 404 failures. Any exception from the repository is logged
with its operation context and reported as a 500 failure with a generic
message, so storage details never reach the client.
"""

import logging
from http import HTTPStatus
from typing import List

from users_api.errors import NotFoundError
from users_api.models.user import UserResponse
from users_api.repositories.user_repository import UserFields, UserRepository
from users_api.responses import ServiceFailure, ServiceResponse, ServiceSuccess

logger = logging.getLogger(__name__)


def _not_found(user_id=None) -> ServiceFailure:
    return ServiceFailure(message=str(NotFoundError("User", user_id)), status_code=HTTPStatus.NOT_FOUND)


def _internal_error(message: str) -> ServiceFailure:
    return ServiceFailure(message=message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def find_all(self) -> ServiceResponse[List[UserResponse]]:
        """Retrieve all users"""
        try:
            users = self.repository.find_all()
            if not users:
                return ServiceFailure(message="No Users found", status_code=HTTPStatus.NOT_FOUND)
            return ServiceSuccess(message="Users found", response_object=[UserResponse.from_entity(u) for u in users])
        except Exception as e:
            logger.error("Error finding all users: %s", e)
            return _internal_error("An error occurred while retrieving users.")

    def find_by_id(self, user_id: int) -> ServiceResponse[UserResponse]:
        """Retrieve a single user by id"""
        try:
            user = self.repository.find_by_id(user_id)
            if not user:
                return _not_found(user_id)
            return ServiceSuccess(message="User found", response_object=UserResponse.from_entity(user))
        except Exception as e:
            logger.error("Error finding user with id %s: %s", user_id, e)
            return _internal_error("An error occurred while finding user.")

    def create(self, fields: UserFields) -> ServiceResponse[UserResponse]:
        try:
            user = self.repository.create(fields)
            return ServiceSuccess(
                message="User created successfully",
                response_object=UserResponse.from_entity(user),
                status_code=HTTPStatus.CREATED,
            )
        except Exception as e:
            logger.error("Error creating user: %s", e)
            return _internal_error("An error occurred while creating user.")

    def update(self, user_id: int, fields: UserFields) -> ServiceResponse[UserResponse]:
        try:
            user = self.repository.update(user_id, fields)
            if not user:
                return _not_found(user_id)
            return ServiceSuccess(message="User updated successfully", response_object=UserResponse.from_entity(user))
        except Exception as e:
            logger.error("Error updating user with id %s: %s", user_id, e)
            return _internal_error("An error occurred while updating user.")

    def delete(self, user_id: int) -> ServiceResponse[None]:
        try:
            deleted = self.repository.delete(user_id)
            if not deleted:
                return _not_found(user_id)
            return ServiceSuccess(message="User deleted successfully", response_object=None)
        except Exception as e:
            logger.error("Error deleting user with id %s: %s", user_id, e)
            return _internal_error("An error occurred while deleting user.")
