"""
Shape-tolerant decoding of keyed API payloads.

The Amtraker API answers with a JSON object keyed by train number or
station code when it has results, and with an empty JSON array when it has
none. Both shapes are normalized into a plain dictionary here.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def decode_keyed_map(payload: Any, decode_entry: Callable[[Any], T]) -> Dict[str, T]:
    """
    Decode a keyed map payload that may also arrive as an empty array.

    Args:
        payload: Parsed JSON body
        decode_entry: Callable turning one map value into a typed entry

    Returns:
        Dict[str, T]: Decoded entries keyed by their original keys

    Raises:
        ValueError: If the payload is neither an object nor an empty array
    """
    if isinstance(payload, dict):
        return {str(key): decode_entry(value) for key, value in payload.items()}

    if isinstance(payload, list):
        if not payload:
            logger.debug("Empty array payload decoded as empty map")
            return {}
        raise ValueError(
            f"Expected an object or an empty array, got an array of {len(payload)} items"
        )

    raise ValueError(
        f"Expected an object or an empty array, got {type(payload).__name__}"
    )


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp carrying a UTC offset."""
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")

    timestamp = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if timestamp.tzinfo is None:
        raise ValueError(f"Timestamp has no UTC offset: {value}")
    return timestamp


def parse_optional_timestamp(value: Any) -> Optional[datetime]:
    """Parse a timestamp the API may omit before it is known."""
    if value is None or value == "":
        return None
    return parse_timestamp(value)


def require(data: Any, key: str) -> Any:
    """Fetch a required key from a JSON object."""
    if not isinstance(data, dict):
        raise TypeError(f"Expected an object, got {type(data).__name__}")
    if key not in data:
        raise KeyError(f"Missing required field '{key}'")
    return data[key]


def require_str(data: Any, key: str) -> str:
    """Fetch a required string field."""
    value = require(data, key)
    if not isinstance(value, str):
        raise TypeError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def require_float(data: Any, key: str) -> float:
    """Fetch a required numeric field as a float."""
    value = require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Field '{key}' must be a number, got {type(value).__name__}")
    return float(value)


def require_int(data: Any, key: str) -> int:
    """Fetch a required non-negative integer field."""
    value = require(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Field '{key}' must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Field '{key}' must not be negative: {value}")
    return value


def require_bool(data: Any, key: str) -> bool:
    """Fetch a required boolean field."""
    value = require(data, key)
    if not isinstance(value, bool):
        raise TypeError(f"Field '{key}' must be a boolean, got {type(value).__name__}")
    return value


def require_list(data: Any, key: str) -> list:
    """Fetch a required array field."""
    value = require(data, key)
    if not isinstance(value, list):
        raise TypeError(f"Field '{key}' must be an array, got {type(value).__name__}")
    return value
