"""
Error Normalizer
Turns a raw HTTP response into a typed model or one of the unified errors
"""

import json
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from registrar.api.exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    SerializationError,
)
from registrar.api.transport import RawResponse
from registrar.utils.logger import get_logger


logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

ERROR_STATUS = "ERROR"
UNKNOWN_API_ERROR = "Unknown API error"


def normalize(
    raw: RawResponse,
    model: Optional[Type[M]] = None
) -> Optional[M]:
    """
    Classify a response and, on success, parse it into `model`.

    A top-level {"status": "ERROR", "message": "..."} payload is an API
    error at any HTTP status, whichever registrar sent it. Other status
    values (e.g. "SUCCESS", a domain status) are data.

    Args:
        raw: Status code and body returned by the transport
        model: Expected response model; None when no body is expected

    Returns:
        Parsed model instance, or None when `model` is None

    Raises:
        SerializationError: Body is not JSON or does not fit `model`
        APIError: The registrar rejected the request
    """
    if not raw.body.strip():
        if not raw.ok:
            raise _api_error(raw.status_code, UNKNOWN_API_ERROR, {})
        if model is None:
            return None
        raise SerializationError(
            f"Expected a {model.__name__} body but the response was empty",
            status_code=raw.status_code
        )

    try:
        payload = json.loads(raw.body)
    except ValueError as e:
        raise SerializationError(
            f"Response body is not valid JSON: {str(e)}",
            status_code=raw.status_code
        ) from e

    if isinstance(payload, dict):
        status = payload.get("status")
        if isinstance(status, str) and status.upper() == ERROR_STATUS:
            raise _api_error(raw.status_code, _message(payload), payload)

    if not raw.ok:
        if isinstance(payload, dict):
            raise _api_error(raw.status_code, _message(payload, default=raw.body), payload)
        raise _api_error(raw.status_code, raw.body, {"body": payload})

    if model is None:
        return None

    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise SerializationError(
            f"Unexpected response shape for {model.__name__}: {str(e)}",
            status_code=raw.status_code,
            response_data=payload if isinstance(payload, dict) else {"body": payload}
        ) from e


def _message(payload: Dict[str, Any], default: str = UNKNOWN_API_ERROR) -> str:
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    return default


def _api_error(status_code: int, message: str, payload: Dict[str, Any]) -> APIError:
    if status_code in (401, 403):
        error_class = AuthenticationError
    elif status_code == 404:
        error_class = NotFoundError
    elif status_code == 429:
        error_class = RateLimitError
    else:
        error_class = APIError

    logger.warning(f"Registrar rejected request (HTTP {status_code}): {message}")
    return error_class(message, status_code=status_code, response_data=payload)
