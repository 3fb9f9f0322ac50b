# app/services/errors.py
from dataclasses import dataclass
from typing import Any, Union

from app.models import OutboundResponse

METHOD_NOT_ALLOWED = "Method Not Allowed"
API_KEY_MISSING = "Server configuration error: API key missing."
INTERNAL_ERROR = "Internal Server Error"
INVALID_UPSTREAM = "Failed to get valid response from Gemini API"


@dataclass(frozen=True)
class MethodNotAllowed:
    pass


@dataclass(frozen=True)
class ConfigurationMissing:
    pass


@dataclass(frozen=True)
class ParseError:
    details: str


@dataclass(frozen=True)
class NetworkError:
    details: str


@dataclass(frozen=True)
class UpstreamShapeError:
    details: Any


@dataclass(frozen=True)
class UnhandledFailure:
    details: str


ProxyError = Union[
    MethodNotAllowed, ConfigurationMissing, ParseError, NetworkError, UpstreamShapeError, UnhandledFailure
]


def to_response(error: ProxyError) -> OutboundResponse:
    """Map an error variant to the status code and JSON body the client sees."""
    if isinstance(error, MethodNotAllowed):
        return OutboundResponse.json_body(405, {"error": METHOD_NOT_ALLOWED})
    if isinstance(error, ConfigurationMissing):
        return OutboundResponse.json_body(500, {"error": API_KEY_MISSING})
    if isinstance(error, UpstreamShapeError):
        return OutboundResponse.json_body(500, {"error": INVALID_UPSTREAM, "details": error.details})
    # ParseError, NetworkError, UnhandledFailure
    return OutboundResponse.json_body(500, {"error": INTERNAL_ERROR, "details": error.details})
