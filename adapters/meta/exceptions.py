from typing import Any, Optional

import httpx

UNKNOWN_TRACE_ID = "unknown"


class MetaAPIError(Exception):
    """Exception raised when a Meta Graph API call fails.

    Carries the provider's message and ``fbtrace_id`` natively so callers never
    have to re-parse an error string.
    """

    def __init__(
        self,
        message: str,
        fbtrace_id: str = UNKNOWN_TRACE_ID,
        status_code: int = 500,
        error_data: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.fbtrace_id = fbtrace_id
        self.status_code = status_code
        self.error_data = error_data or {}
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "MetaAPIError":
        """Build the error from a failed response, tolerating non-JSON bodies."""
        try:
            body = response.json()
        except ValueError:
            body = None
        return cls.from_body(body, response.status_code)

    @classmethod
    def from_body(cls, body: Any, status_code: int) -> "MetaAPIError":
        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            error = {}
        message = error.get("message")
        if not isinstance(message, str) or not message.strip():
            message = f"Request failed with status {status_code}"
        fbtrace_id = error.get("fbtrace_id")
        if not isinstance(fbtrace_id, (str, int)) or isinstance(fbtrace_id, bool) or fbtrace_id == "":
            fbtrace_id = UNKNOWN_TRACE_ID
        return cls(
            message=message,
            fbtrace_id=str(fbtrace_id),
            status_code=status_code,
            error_data=body if isinstance(body, dict) else None,
        )

    @classmethod
    def from_transport_error(cls, exc: httpx.HTTPError) -> "MetaAPIError":
        return cls(
            message=str(exc) or "Unknown network error",
            fbtrace_id=UNKNOWN_TRACE_ID,
            status_code=502,
        )
