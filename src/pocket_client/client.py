"""Pocket v3 API client.

Requests are sent as JSON, but the OAuth endpoints answer with a URL-encoded
query string (``code=...``, ``access_token=...&username=...``) rather than
JSON. That asymmetry is how the service behaves and is kept as is.

Errors come back as a non-200 status with the reason in the ``X-Error``
header and a numeric code in ``X-Error-Code``.

The API base URL can be overridden with an environment variable, which is
mostly useful for pointing at a local stub:
    POCKET_API_BASE_URL
"""

import json
import logging
import os
import re
from dataclasses import asdict
from urllib.parse import parse_qsl

import httpx

from .errors import (
    ConfigurationError,
    EmptyResponseError,
    InvalidArgumentError,
    NonSuccessStatusError,
    ResponseDecodeError,
    TransportError,
)
from .models import AddInput, AuthorizeInput, AuthorizeResult, RequestTokenInput

logger = logging.getLogger(__name__)

API_BASE_URL = os.environ.get("POCKET_API_BASE_URL", "https://getpocket.com/v3")

# Where the end user is sent to approve the app. Values are substituted
# verbatim; callers pre-encode the redirect URI if it needs escaping.
AUTHORIZE_URL = (
    "https://getpocket.com/auth/authorize?request_token={}&redirect_uri={}"
)

ENDPOINT_ADD = "/add"
ENDPOINT_REQUEST_TOKEN = "/oauth/request"
ENDPOINT_AUTHORIZE = "/oauth/authorize"

X_ERROR_HEADER = "X-Error"
X_ERROR_CODE_HEADER = "X-Error-Code"

DEFAULT_TIMEOUT = 5.0

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class PocketClient:
    """Client for the Pocket v3 API.

    Holds no per-call state, so one instance can be shared between threads.
    Pass ``transport`` (or a complete ``http_client``) to change how requests
    are sent, e.g. for proxies, custom TLS or tests. The two are exclusive:
    a transport belongs to the client that is built around it.
    """

    def __init__(
        self,
        consumer_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ):
        if not consumer_key:
            raise ConfigurationError("consumer key is empty")
        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout}")
        if transport is not None and http_client is not None:
            raise ConfigurationError("pass either transport or http_client, not both")

        self._consumer_key = consumer_key
        self._timeout = timeout
        self._base_url = (base_url or API_BASE_URL).rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            headers={"User-Agent": "pocket-client"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def consumer_key(self) -> str:
        return self._consumer_key

    def get_request_token(
        self, redirect_uri: str, *, timeout: float | None = None
    ) -> str:
        """Obtain the request token used to start user authorization."""
        inp = RequestTokenInput(
            consumer_key=self._consumer_key,
            redirect_uri=redirect_uri,
        )

        values = self._do_http(ENDPOINT_REQUEST_TOKEN, asdict(inp), timeout=timeout)

        code = values.get("code", "")
        if not code:
            raise EmptyResponseError("code")
        return code

    def get_authorization_url(self, request_token: str, redirect_uri: str) -> str:
        """Build the link the user visits to approve the app."""
        if not request_token or not redirect_uri:
            raise InvalidArgumentError("request token and redirect URI are required")
        return AUTHORIZE_URL.format(request_token, redirect_uri)

    def authorize(
        self, request_token: str, *, timeout: float | None = None
    ) -> AuthorizeResult:
        """Exchange an approved request token for an access token."""
        if not request_token:
            raise InvalidArgumentError("request token is empty")

        inp = AuthorizeInput(consumer_key=self._consumer_key, code=request_token)
        values = self._do_http(ENDPOINT_AUTHORIZE, asdict(inp), timeout=timeout)

        access_token = values.get("access_token", "")
        if not access_token:
            raise EmptyResponseError("access_token")

        return AuthorizeResult(
            access_token=access_token,
            username=values.get("username", ""),
        )

    def add(self, item: AddInput, *, timeout: float | None = None) -> None:
        """Save a new item to the user's list."""
        item.validate()

        req = item.generate_request(self._consumer_key)
        self._do_http(ENDPOINT_ADD, req.to_payload(), timeout=timeout, decode=False)
        logger.info("Added %s", item.url)

    def _do_http(
        self,
        endpoint: str,
        body: dict,
        *,
        timeout: float | None = None,
        decode: bool = True,
    ) -> dict[str, str]:
        """POST ``body`` as JSON and return the decoded query-string response."""
        url = self._base_url + endpoint
        try:
            response = self._client.post(
                url,
                content=json.dumps(body).encode("utf-8"),
                headers={
                    "Content-Type": "application/json; charset=UTF-8",
                    "Accept": "application/json",
                },
                timeout=timeout if timeout is not None else self._timeout,
            )
        except httpx.RequestError as e:
            logger.debug("Request to %s failed: %s", endpoint, e)
            raise TransportError(f"request to {endpoint} failed: {e}") from e

        logger.debug("POST %s -> %d", endpoint, response.status_code)

        if response.status_code != 200:
            message = response.headers.get(X_ERROR_HEADER, "")
            code = response.headers.get(X_ERROR_CODE_HEADER)
            logger.warning(
                "Pocket returned %d for %s: %s", response.status_code, endpoint, message
            )
            raise NonSuccessStatusError(response.status_code, message, code)

        if not decode:
            return {}

        return parse_response(response.text)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def parse_response(body: str) -> dict[str, str]:
    """Parse a URL-encoded response body. The first value wins for repeated keys."""
    if not body:
        return {}
    if ";" in body:
        raise ResponseDecodeError("cannot decode response body: semicolon separator")
    bad = _BAD_ESCAPE.search(body)
    if bad:
        raise ResponseDecodeError(
            f"cannot decode response body: invalid escape at offset {bad.start()}"
        )

    # Empty segments are skipped, a key without "=" gets an empty value
    pairs = parse_qsl(body, keep_blank_values=True)

    values: dict[str, str] = {}
    for key, value in pairs:
        values.setdefault(key, value)
    return values
