"""
Response decoder - Classifies and parses Authware responses.

Success statuses decode into the payload type the call site expects.
Everything else decodes into the DefaultResponse envelope and is raised
as an ApiError carrying the first validation error, or the envelope
message when there are none. A body that fails to decode always wins
over the status classification.
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from authware.api.models import DefaultResponse
from authware.domain.exceptions import ApiError, MalformedResponse

T = TypeVar("T", bound=BaseModel)

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})


def decode_response(status_code: int, content: bytes, response_model: type[T]) -> T | None:
    """
    Decode a raw response into the expected payload.

    Args:
        status_code: HTTP status code of the response
        content: Raw response body
        response_model: Model to decode successful responses into

    Returns:
        Decoded payload, or None for a success response without a body

    Raises:
        ApiError: For any non-success status code
        MalformedResponse: If the body cannot be decoded
    """
    if status_code in SUCCESS_STATUS_CODES:
        if not content.strip():
            return None
        return _parse(response_model, content)

    envelope = _parse(DefaultResponse, content)
    # Only the first validation error is reported
    message = envelope.errors[0] if envelope.errors else envelope.message
    raise ApiError(
        message,
        status_code=status_code,
        code=envelope.code,
        errors=envelope.errors,
    )


def _parse(model: type[T], content: bytes) -> T:
    try:
        return model.model_validate_json(content)
    except ValidationError as e:
        raise MalformedResponse(f"could not decode {model.__name__} from response body") from e
