"""Envelope decoding.

Every catalog response body except a 404 follows the same wrapper::

    {"code": 200, "message": "...", "results": <payload>}

``code == 200`` is the only success signal. Any other code surfaces
``message`` as an ``ApiError`` and ``results`` is ignored. The payload is
validated in strict mode into whatever shape the caller asks for: a
missing or mistyped field (``"7"`` for an int, ``true`` for a code) is a
``DecodeFailure``, never silently coerced.
"""

from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from pycomicget.errors import ApiError, DecodeFailure, NotFound

T = TypeVar("T")

SUCCESS_CODE = 200


class Envelope(BaseModel):
    """The uniform response wrapper."""

    code: int
    message: str
    results: Any = None


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def parse_envelope(body: str) -> Envelope:
    """Parse a response body into an Envelope.

    Raises:
        DecodeFailure: If the body is not JSON, not an object, or lacks
            ``code``/``message``
    """
    try:
        return Envelope.model_validate_json(body, strict=True)
    except ValidationError as e:
        raise DecodeFailure(f"Malformed response envelope: {e}") from e


def decode(status: int, body: str, shape: Type[T], url: str = "") -> T:
    """Interpret a raw status/body pair as a payload of type ``shape``.

    The 404 check runs before the body is looked at.

    Args:
        status: HTTP status code
        body: Response body text
        shape: Target payload type (model, generic page, dict type, ...)
        url: Request URL, used in error messages only

    Returns:
        ``results`` validated as ``shape``

    Raises:
        NotFound: status is 404
        DecodeFailure: malformed envelope, or results do not match shape
        ApiError: envelope code is not 200
    """
    if status == 404:
        raise NotFound(url or None)

    envelope = parse_envelope(body)
    if envelope.code != SUCCESS_CODE:
        raise ApiError(envelope.message, code=envelope.code)

    try:
        return _adapter(shape).validate_python(envelope.results, strict=True)
    except ValidationError as e:
        raise DecodeFailure(f"Unexpected results shape for {shape!r}: {e}") from e
