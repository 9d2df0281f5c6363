"""Error types raised by the explorer client."""
from typing import Optional


class EvmScanError(Exception):
    """Base exception for all explorer client errors."""
    pass


class InternalGenericError(EvmScanError):
    """Unexpected internal failure, e.g. while building a request."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        if detail:
            super().__init__(f"Error internal operation ({detail})")
        else:
            super().__init__("Error internal operation")


class UrlParsingError(EvmScanError):
    """Request URL could not be parsed."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        super().__init__("Error internal from parsing Url" + (f" ({detail})" if detail else ""))


class HttpRequestError(EvmScanError):
    """HTTP request could not be sent (connection, DNS, TLS, timeout)."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        if detail:
            super().__init__(f"Error in sending HTTP request ({detail})")
        else:
            super().__init__("Error in sending HTTP request")


class JsonParsingError(EvmScanError):
    """Response body does not match the expected shape."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        if detail:
            super().__init__(f"Error in parsing JSON string ({detail})")
        else:
            super().__init__("Error in parsing JSON string")


class ApiResponseError(EvmScanError):
    """Upstream API reported a failure, or its response broke the envelope contract."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Error api response: {message}")


class HttpStatusError(ApiResponseError):
    """HTTP status other than 200."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Error API response, with HTTP {status_code} returned")


class UnverifiedContractError(ApiResponseError):
    """Source code query hit a contract whose source is not verified."""
    pass


class ParameterError(EvmScanError, ValueError):
    """Caller supplied an argument that violates a precondition."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        if detail:
            super().__init__(f"Error parameter ({detail})")
        else:
            super().__init__("Error parameter")
