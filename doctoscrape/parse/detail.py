"""Decode the detail endpoint JSON payload."""
import orjson
from pydantic import ValidationError

from doctoscrape.errors import JsonDecodeError
from doctoscrape.parse.models import DetailResponse


def parse_detail(center_id: str, body: bytes | str) -> DetailResponse:
    """
    Decode a detail payload into a DetailResponse.
    Unknown fields are ignored; invalid JSON or a missing/mistyped
    required field raises JsonDecodeError.
    """
    try:
        data = orjson.loads(body)
    except orjson.JSONDecodeError as e:
        raise JsonDecodeError(center_id, f"not JSON ({e})") from e

    if not isinstance(data, dict):
        raise JsonDecodeError(center_id, f"expected an object, got {type(data).__name__}")

    try:
        return DetailResponse.model_validate(data)
    except ValidationError as e:
        raise JsonDecodeError(center_id, f"{e.error_count()} validation error(s): {e.errors()[0]['loc']}") from e
