"""
Base request value shared by all security endpoints.

Every endpoint follows the same contract: build a path from a fixed prefix,
attach the diagnostic query parameters, merge caller headers, optionally bind
a deadline, delegate to the transport and wrap its result. Endpoint modules
only choose the HTTP method, the path and the payload.
"""

from abc import abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Union
from urllib.parse import quote, urlencode
import asyncio
import json
import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from opensearch_security_client.http import Transport
from opensearch_security_client.response import Response

logger = logging.getLogger(__name__)

ROLES_MAPPING_PATH = "/_plugins/_security/api/rolesmapping/"

OPAQUE_ID_HEADER = "X-Opaque-Id"

HeaderTypes = Union[httpx.Headers, Mapping[str, str], Sequence[tuple]]

# Path characters left unescaped in a resource name
PATH_SAFE_CHARS = "/:@!$&'()*+,;="


def build_query(
    *,
    pretty: bool = False,
    human: bool = False,
    error_trace: bool = False,
    filter_path: Optional[Sequence[str]] = None,
) -> Dict[str, str]:
    """Collect the diagnostic query parameters that are set."""
    params: Dict[str, str] = {}
    if pretty:
        params["pretty"] = "true"
    if human:
        params["human"] = "true"
    if error_trace:
        params["error_trace"] = "true"
    if filter_path:
        params["filter_path"] = ",".join(filter_path)
    return params


def quote_name(name: str) -> str:
    """Escape a resource name for use as a path segment."""
    return quote(name, safe=PATH_SAFE_CHARS)


def encode_query(params: Mapping[str, str]) -> str:
    """URL-encode query parameters with keys in sorted order."""
    return urlencode(sorted(params.items()))


def merge_headers(base: httpx.Headers, extra: Optional[httpx.Headers]) -> httpx.Headers:
    """
    Merge caller headers into a request's headers.

    An empty base is replaced by the extra collection. Otherwise every extra
    value is appended next to the existing ones.
    """
    if not extra:
        return base
    if len(base) == 0:
        return httpx.Headers(extra)
    return httpx.Headers(list(base.multi_items()) + list(extra.multi_items()))


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Mapping):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def encode_body(body: Any) -> Optional[bytes]:
    """
    Encode a request payload.

    Pydantic models, mappings and sequences are sent as JSON, strings as
    UTF-8, bytes unchanged and readable objects are read fully.
    """
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    if hasattr(body, "read"):
        data = body.read()
        return data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return json.dumps(_jsonable(body)).encode("utf-8")


class SecurityRequest(BaseModel):
    """
    Abstract request value for a security API call.

    Subclasses set ``method`` and implement ``build_path``; request-specific
    fields (name, body) are declared on the subclass.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    method: ClassVar[str]

    pretty: bool = Field(False, description="Pretty-print the response body")
    human: bool = Field(False, description="Return statistical values in human-readable form")
    error_trace: bool = Field(False, description="Include stack traces for errors")
    filter_path: List[str] = Field(default_factory=list, description="Filter the properties of the response body")

    headers: Optional[httpx.Headers] = Field(None, description="Headers added to the HTTP request")
    opaque_id: Optional[str] = Field(None, description="Value for the X-Opaque-Id header")

    timeout: Optional[float] = Field(None, description="Deadline for the call in seconds")

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, value: Any) -> Any:
        if value is None or isinstance(value, httpx.Headers):
            return value
        return httpx.Headers(value)

    @field_validator("filter_path", mode="before")
    @classmethod
    def coerce_filter_path(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)

    @abstractmethod
    def build_path(self) -> str:
        """Return the request path."""
        ...

    def payload(self) -> Any:
        """Return the request body, if any."""
        return None

    # =========================================================================
    # Options
    # =========================================================================

    def with_header(self, headers: HeaderTypes) -> "SecurityRequest":
        """Add headers to the request. Existing values are kept."""
        self.headers = merge_headers(self.headers or httpx.Headers(), httpx.Headers(headers))
        return self

    def with_opaque_id(self, value: str) -> "SecurityRequest":
        """Set the X-Opaque-Id header, replacing any previous value."""
        self.opaque_id = value
        return self

    # =========================================================================
    # Request building
    # =========================================================================

    def query_params(self) -> Dict[str, str]:
        return build_query(
            pretty=self.pretty,
            human=self.human,
            error_trace=self.error_trace,
            filter_path=self.filter_path,
        )

    def request_headers(self) -> httpx.Headers:
        """Caller headers with the opaque id applied last."""
        headers = httpx.Headers(self.headers) if self.headers else httpx.Headers()
        if self.opaque_id is not None:
            headers[OPAQUE_ID_HEADER] = self.opaque_id
        return headers

    def build_request(self) -> httpx.Request:
        """Build the relative httpx request for this call."""
        params = self.query_params()
        if params:
            url = httpx.URL(self.build_path(), query=encode_query(params).encode("ascii"))
        else:
            url = httpx.URL(self.build_path())

        headers = merge_headers(httpx.Headers(), self.request_headers())

        return httpx.Request(
            self.method,
            url,
            headers=headers,
            content=encode_body(self.payload()),
        )

    async def perform(self, transport: Transport) -> Response:
        """
        Execute the request through the transport.

        Raises:
            asyncio.TimeoutError: If ``timeout`` is set and expires
            Exception: Whatever the transport raises, unchanged
        """
        request = self.build_request()
        logger.debug(f"{self.__class__.__name__}: {request.method} {request.url}")

        if self.timeout is not None:
            res = await asyncio.wait_for(transport.perform(request), self.timeout)
        else:
            res = await transport.perform(request)

        return Response.from_httpx(res)
