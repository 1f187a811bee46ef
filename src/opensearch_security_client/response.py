"""
Response envelope returned by every endpoint.
"""

import json
from typing import Any, Dict, List, Optional

import httpx

from opensearch_security_client.exceptions import exception_from_response


class Response:
    """
    Raw result of a security API call.

    The envelope carries the status code, the undecoded body and the response
    headers exactly as the transport produced them.
    """

    def __init__(
        self,
        status_code: int,
        body: bytes = b"",
        headers: Optional[httpx.Headers] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.headers = headers if headers is not None else httpx.Headers()

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "Response":
        """Wrap an httpx response whose body has been read."""
        return cls(
            status_code=response.status_code,
            body=response.content,
            headers=response.headers,
        )

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")

    def is_error(self) -> bool:
        """Return True when the status code is greater than 299."""
        return self.status_code > 299

    def warnings(self) -> List[str]:
        """Return the values of the ``Warning`` response header."""
        return self.headers.get_list("Warning")

    def has_warnings(self) -> bool:
        return len(self.warnings()) > 0

    def raise_for_status(self) -> None:
        """
        Raise a SecurityClientError subclass for error responses.

        Raises:
            SecurityClientError: If ``is_error()`` is true
        """
        if not self.is_error():
            return

        details: Dict[str, Any] = {}
        try:
            data = json.loads(self.body)
        except ValueError:
            data = None

        if isinstance(data, dict):
            details = data
            error = data.get("error")
            if isinstance(error, dict):
                message = error.get("reason") or error.get("type") or self.text
            else:
                message = data.get("message") or error or self.text
        else:
            message = self.text or httpx.codes.get_reason_phrase(self.status_code)

        raise exception_from_response(self.status_code, str(message), details=details)

    def __str__(self) -> str:
        reason = httpx.codes.get_reason_phrase(self.status_code)
        status = f"[{self.status_code} {reason}]" if reason else f"[{self.status_code}]"
        if self.body:
            return f"{status} {self.text}"
        return status

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code}, body_length={len(self.body)})"
