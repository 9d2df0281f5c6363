import logging
from typing import Any, Dict, Optional

import requests

from .config import Context
from .errors import (
    HttpRequestError,
    HttpStatusError,
    InternalGenericError,
    JsonParsingError,
    UrlParsingError,
)

logger = logging.getLogger(__name__)


class EvmScanClient:
    """Thin wrapper around an explorer's `/api` endpoint. One request per call, no retry."""

    def __init__(self, context: Context, session: Optional[requests.Session] = None) -> None:
        self.context = context
        self.session = session if session is not None else requests.Session()

    def request(self, params: Dict[str, Any]) -> Any:
        """Issue a GET with `params` (apikey appended) and return the decoded JSON body."""
        merged = {**params, "apikey": self.context.api_key}
        url = self.context.api_url
        logger.debug(
            "GET %s module=%s action=%s page=%s",
            url,
            params.get("module"),
            params.get("action"),
            params.get("page"),
        )

        try:
            response = self.session.get(url, params=merged, timeout=self.context.request_timeout)
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as exc:
            raise UrlParsingError(str(exc)) from exc
        except requests.RequestException as exc:
            raise HttpRequestError(str(exc) or type(exc).__name__) from exc
        except (TypeError, ValueError) as exc:
            raise InternalGenericError(f"Error creating a HTTP request; err={exc}") from exc

        if response.status_code != 200:
            raise HttpStatusError(response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise JsonParsingError(str(exc)) from exc
