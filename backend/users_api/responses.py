"""
Service response envelope and the HTTP response writer.

Every service operation returns either a ``ServiceSuccess`` carrying a
typed payload or a ``ServiceFailure`` carrying only a message and status.
``handle_service_response`` turns either one into the public JSON body::

    {"success": bool, "message": str, "data": T | null, "statusCode": int}
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Generic, Literal, TypeVar, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceSuccess(Generic[T]):
    message: str
    response_object: T
    status_code: int = HTTPStatus.OK
    success: Literal[True] = True


@dataclass(frozen=True)
class ServiceFailure:
    message: str
    status_code: int
    success: Literal[False] = False

    @property
    def response_object(self) -> None:
        return None


ServiceResponse = Union[ServiceSuccess[T], ServiceFailure]


def envelope_body(response: "ServiceResponse[Any]") -> dict:
    return {
        "success": response.success,
        "message": response.message,
        "data": jsonable_encoder(response.response_object, by_alias=True),
        "statusCode": int(response.status_code),
    }


def handle_service_response(response: "ServiceResponse[Any]") -> JSONResponse:
    """Write an envelope as an HTTP response, using its status code"""
    return JSONResponse(status_code=int(response.status_code), content=envelope_body(response))


def bad_request(message: str) -> JSONResponse:
    """400 envelope for input rejected before reaching the service"""
    return handle_service_response(ServiceFailure(message=message, status_code=HTTPStatus.BAD_REQUEST))
