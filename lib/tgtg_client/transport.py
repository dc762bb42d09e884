from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, Field, ValidationError

from .config_types import ClientConfig
from .errors import ApiError, ArgumentError, AuthError, ConfigurationError, DecodeError, ErrorEntry
from .models import WireModel

logger = logging.getLogger(__name__)

MEDIA_TYPE = "application/json"

_BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})

T = TypeVar("T", bound=WireModel)

Timeout = float | httpx.Timeout | None


class ErrorBody(WireModel):
    errors: list[ErrorEntry] = Field(default_factory=list)


def encode_body(body: Any) -> bytes:
    if isinstance(body, BaseModel):
        return body.model_dump_json().encode("utf-8")
    return json.dumps(body).encode("utf-8")


class Transport:
    def __init__(self, cfg: ClientConfig, http_client: httpx.Client | None = None):
        self._cfg = cfg
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=cfg.timeout_s, follow_redirects=True)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def resolve_url(self, path: str) -> httpx.URL:
        try:
            base = httpx.URL(self._cfg.base_url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"invalid base URL {self._cfg.base_url!r}: {e}") from e
        if not base.scheme or not base.host:
            raise ConfigurationError(f"base URL {self._cfg.base_url!r} must be absolute")
        if not base.path.endswith("/"):
            raise ConfigurationError(f"base URL {self._cfg.base_url!r} must end with '/'")
        try:
            return base.join(path)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"invalid request path {path!r}: {e}") from e

    def build_request(self, method: str, path: str, body: Any | None = None) -> httpx.Request:
        """Create a request for ``path`` relative to the base URL.

        ``path`` has no leading "/" and is merged with the base URL the way a
        browser resolves a relative link. When given, ``body`` (a wire model or
        a plain JSON value) is JSON encoded for every method except
        GET, HEAD and OPTIONS.
        """
        method = method.upper()
        url = self.resolve_url(path)

        headers = httpx.Headers(self._cfg.headers)
        content: bytes | None = None
        if body is not None and method not in _BODYLESS_METHODS:
            try:
                content = encode_body(body)
            except (TypeError, ValueError) as e:
                raise ArgumentError("body", f"not JSON serializable: {e}") from e
            headers["Content-Type"] = MEDIA_TYPE
        headers["Accept"] = MEDIA_TYPE
        headers["User-Agent"] = self._cfg.user_agent

        return self._client.build_request(method, url, content=content, headers=headers)

    def execute(self, request: httpx.Request, target: type[T] | None = None, *, timeout: Timeout = None) -> T | None:
        """Send ``request`` and decode a 2xx body into ``target``.

        httpx errors (connect failures, timeouts) propagate unchanged. Non-2xx
        responses raise ApiError and are never decoded into ``target``. The
        decoded model keeps the raw response as ``.response``.
        """
        if timeout is not None:
            request.extensions["timeout"] = httpx.Timeout(timeout).as_dict()

        logger.debug("%s %s", request.method, request.url)
        r = self._client.send(request)
        logger.debug("%s %s -> %s", request.method, request.url, r.status_code)

        check_response_for_errors(r)
        if target is None:
            return None
        return decode_response(r, target)


def check_response_for_errors(r: httpx.Response) -> None:
    """Raise ApiError for any status outside 200-299.

    The error body is expected to be empty, ``null``,
    ``{"errors": [{"code", "message"}]}`` or plain text. Plain text (or JSON of
    another shape) becomes a single entry whose code is the raw body.
    """
    if 200 <= r.status_code <= 299:
        return

    content = r.read()
    errors: list[ErrorEntry] = []
    if content:
        try:
            errors = ErrorBody.model_validate_json(content).errors
        except ValidationError:
            errors = [ErrorEntry(code=content.decode("utf-8", errors="replace"))]

    logger.debug("%s %s failed with %s: %s", r.request.method, r.request.url, r.status_code, errors)
    if r.status_code in (401, 403):
        raise AuthError(r, errors)
    raise ApiError(r, errors)


def decode_response(r: httpx.Response, target: type[T]) -> T:
    if not r.content:
        raise DecodeError(f"{r.request.method} {r.request.url} returned an empty body", r)
    try:
        out = target.model_validate_json(r.content)
    except ValidationError as e:
        raise DecodeError(f"{r.request.method} {r.request.url} returned an unexpected body: {e}", r) from e
    out._response = r
    return out
