"""
User API Routes
Validates path and body input, dispatches to UserService and writes the
service envelope as the HTTP response.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from users_api.dependencies import get_user_service
from users_api.responses import bad_request, handle_service_response
from users_api.services.user_service import UserService
from users_api.validation import parse_user_id, validate_create_body, validate_update_body

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_ID_MESSAGE = "Invalid user ID format"
INVALID_USER_MESSAGE = "Invalid user data"
INVALID_REQUEST_MESSAGE = "Invalid request data"


@router.get("/users")
def get_users(service: UserService = Depends(get_user_service)):
    """List all users"""
    return handle_service_response(service.find_all())


@router.get("/users/{user_id}")
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Get a user by ID"""
    parsed = parse_user_id(user_id)
    if not parsed.ok:
        logger.debug("Rejected user id %r: %s", user_id, parsed.errors)
        return bad_request(INVALID_ID_MESSAGE)
    return handle_service_response(service.find_by_id(parsed.value))


@router.post("/users")
def create_user(body: Any = Body(default=None), service: UserService = Depends(get_user_service)):
    """Create a new user"""
    validated = validate_create_body(body)
    if not validated.ok:
        logger.debug("Rejected create body: %s", validated.errors)
        return bad_request(INVALID_USER_MESSAGE)
    return handle_service_response(service.create(validated.value))


@router.put("/users/{user_id}")
@router.patch("/users/{user_id}")
def update_user(user_id: str, body: Any = Body(default=None), service: UserService = Depends(get_user_service)):
    """
    Update a user's name, email or age.

    Omitted fields are left unchanged; an empty body only refreshes updatedAt.
    """
    parsed = parse_user_id(user_id)
    validated = validate_update_body(body)
    if not parsed.ok or not validated.ok:
        logger.debug("Rejected update for id %r: %s", user_id, parsed.errors + validated.errors)
        return bad_request(INVALID_REQUEST_MESSAGE)
    return handle_service_response(service.update(parsed.value, validated.value))


@router.delete("/users/{user_id}")
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Delete a user"""
    parsed = parse_user_id(user_id)
    if not parsed.ok:
        logger.debug("Rejected user id %r: %s", user_id, parsed.errors)
        return bad_request(INVALID_ID_MESSAGE)
    return handle_service_response(service.delete(parsed.value))
