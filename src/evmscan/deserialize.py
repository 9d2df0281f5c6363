"""
Adapters from the explorer's string-encoded JSON fields to native types.

Every numeric field in an explorer response arrives as a decimal string.
Adapters raise ValueError/TypeError on malformed input; the envelope decoder
turns those into JSON decode errors.
"""
from typing import Any, List

UINT256_MAX = 2**256 - 1
CONSTRUCTOR_ARGUMENT_WIDTH = 64


def _require_str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}.")
    return value


def to_int(value: Any, field: str = "value") -> int:
    text = _require_str(value, field).strip()
    try:
        return int(text, 10)
    except ValueError as exc:
        raise ValueError(f"{field} is not a decimal integer: {value!r}.") from exc


def to_float(value: Any, field: str = "value") -> float:
    text = _require_str(value, field).strip()
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"{field} is not a decimal number: {value!r}.") from exc


def to_bool(value: Any, field: str = "value") -> bool:
    # "1" is true, anything else false.
    return _require_str(value, field).strip() == "1"


def to_uint256(value: Any, field: str = "value") -> int:
    parsed = to_int(value, field)
    if parsed < 0 or parsed > UINT256_MAX:
        raise ValueError(f"{field} is out of uint256 range.")
    return parsed


def to_constructor_arguments(value: Any, field: str = "ConstructorArguments") -> List[str]:
    """Split an ABI-encoded constructor argument blob into 32-byte words."""
    blob = _require_str(value, field).strip()
    if not blob:
        return []
    if len(blob) % CONSTRUCTOR_ARGUMENT_WIDTH != 0:
        raise ValueError(
            f"{field} length {len(blob)} is not a multiple of {CONSTRUCTOR_ARGUMENT_WIDTH} hex chars."
        )
    return [
        blob[i : i + CONSTRUCTOR_ARGUMENT_WIDTH]
        for i in range(0, len(blob), CONSTRUCTOR_ARGUMENT_WIDTH)
    ]
