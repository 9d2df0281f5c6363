"""
Typed view of the explorer's response envelope.

Every endpoint answers with `{"status": "1"|"0", "message": ..., "result": ...}`
where `result` carries either the payload or an error string. Nothing in the
body tags which one it is, so the decoder tries the success shape first and
falls back to the failure shape (a string or null).
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from .errors import ApiResponseError, JsonParsingError

T = TypeVar("T")

STATUS_OK = "1"

_DECODE_ERRORS = (ValueError, TypeError, KeyError, AttributeError)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    message: Optional[str] = None


EnvelopeResult = Union[Success[T], Failure]


@dataclass(frozen=True)
class Envelope(Generic[T]):
    status: str
    message: str
    result: EnvelopeResult

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK

    def failure_detail(self) -> str:
        """Upstream message, plus the result text when the payload is failure-shaped."""
        if isinstance(self.result, Failure):
            text = self.result.message
        else:
            # String payloads (getabi) decode as success even when they carry the error.
            text = self.result.value if isinstance(self.result.value, str) else None
        if text:
            return f"message:{self.message}, result:{text}"
        return f"message:{self.message}"


def list_of(decode_item: Callable[[Any], T]) -> Callable[[Any], List[T]]:
    def decode(raw: Any) -> List[T]:
        if not isinstance(raw, list):
            raise TypeError(f"expected a list, got {type(raw).__name__}")
        return [decode_item(item) for item in raw]

    return decode


def decode_result(raw: Any, decode_success: Callable[[Any], T]) -> EnvelopeResult:
    try:
        return Success(decode_success(raw))
    except _DECODE_ERRORS as exc:
        success_error = exc

    if raw is None or isinstance(raw, str):
        return Failure(raw)

    raise JsonParsingError(
        f"result matches neither success nor failure shape: {success_error}"
    )


def decode_envelope(payload: Any, decode_success: Callable[[Any], T]) -> Envelope[T]:
    if not isinstance(payload, dict):
        raise JsonParsingError("response is not a JSON object")

    status = payload.get("status")
    message = payload.get("message")
    if not isinstance(status, str) or not isinstance(message, str):
        raise JsonParsingError("response is missing 'status' or 'message'")

    return Envelope(
        status=status,
        message=message,
        result=decode_result(payload.get("result"), decode_success),
    )


def unwrap(envelope: Envelope[T]) -> T:
    """Return the success payload, or raise for failure status or a mismatched payload."""
    if not envelope.is_ok:
        raise ApiResponseError(envelope.failure_detail())

    result = envelope.result
    if isinstance(result, Success):
        return result.value

    if result.message:
        raise ApiResponseError(f"un-expected error for success case ({result.message})")
    raise ApiResponseError("un-expected error for success case")
