import json
from datetime import datetime
from http import HTTPStatus

from users_api.models.user import UserResponse
from users_api.responses import ServiceFailure, ServiceSuccess, bad_request, handle_service_response


def _body(response) -> dict:
    return json.loads(response.body)


def test_success_envelope_renames_payload_to_data():
    stamp = datetime(2026, 1, 15, 12, 0, 0)
    dto = UserResponse(id=1, name="Alice", email="alice@example.com", age=42, created_at=stamp, updated_at=stamp)

    response = handle_service_response(ServiceSuccess(message="User found", response_object=dto))

    assert response.status_code == 200
    assert _body(response) == {
        "success": True,
        "message": "User found",
        "data": {
            "id": 1,
            "name": "Alice",
            "email": "alice@example.com",
            "age": 42,
            "createdAt": "2026-01-15T12:00:00",
            "updatedAt": "2026-01-15T12:00:00",
        },
        "statusCode": 200,
    }


def test_success_envelope_uses_given_status():
    response = handle_service_response(
        ServiceSuccess(message="User created successfully", response_object=None, status_code=HTTPStatus.CREATED)
    )

    assert response.status_code == 201
    assert _body(response)["statusCode"] == 201


def test_failure_envelope_has_null_data():
    failure = ServiceFailure(message="User not found", status_code=HTTPStatus.NOT_FOUND)

    response = handle_service_response(failure)

    assert failure.response_object is None
    assert response.status_code == 404
    assert _body(response) == {"success": False, "message": "User not found", "data": None, "statusCode": 404}


def test_bad_request():
    response = bad_request("Invalid user data")

    assert response.status_code == 400
    assert _body(response) == {"success": False, "message": "Invalid user data", "data": None, "statusCode": 400}
