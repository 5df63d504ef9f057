"""HTTP/JSON transport implementation for orchestrator API calls."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Final

import httpx

from bacalhau_client.domain import (
    BacalhauConnectionError,
    BacalhauDecodeError,
    BacalhauTimeoutError,
    BacalhauTransportError,
)

from .interfaces import JsonTransportPort, TransportConfig

logger = logging.getLogger(__name__)


class HttpJsonTransport(JsonTransportPort):
    """Transport issuing one `httpx` request per call and normalizing the response."""

    _CONTENT_TYPE: Final[str] = "application/json"

    def __init__(
        self,
        config: TransportConfig,
        client_factory: Callable[[], httpx.Client] | None = None,
    ):
        """Initialize transport with immutable endpoint configuration.

        Args:
            config: Endpoint coordinates and credentials.
            client_factory: Optional factory returning a fresh `httpx.Client` per request.

        Returns:
            None: Initializer does not return a value.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._config = config
        self._client_factory = client_factory or self._transport_default_client

    @property
    def config(self) -> TransportConfig:
        return self._config

    def transport_build_url(self, path: str) -> str:
        """Concatenate the configured base URL with a request path.

        Args:
            path: Path relative to the base URL.

        Returns:
            str: Absolute request URL.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return f"{self._config.base_url}{path}"

    def transport_build_headers(self) -> dict[str, str]:
        """Build request headers for the configured transport.

        The authorization header is only attached over secure transport, even
        when a token is configured.

        Returns:
            dict[str, str]: Request headers.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        headers = {"Content-Type": self._CONTENT_TYPE}
        if self._config.access_token and self._config.use_secure:
            headers["Authorization"] = f"Bearer {self._config.access_token}"
        return headers

    def transport_request(self, method: str, path: str, body: Any = None) -> Any:
        """Issue one HTTP request and return the parsed JSON response.

        Args:
            method: HTTP method.
            path: Path relative to the base URL, already percent-encoded.
            body: Optional request body; text is sent as-is, other values as JSON.

        Returns:
            Any: Parsed JSON response payload.

        Raises:
            BacalhauTransportError: Raised for non-success HTTP status.
            BacalhauDecodeError: Raised when a success body is not JSON.
            BacalhauTimeoutError: Raised when the request timed out.
            BacalhauConnectionError: Raised for other network failures.
        """

        url = self.transport_build_url(path)
        content = self._transport_encode_body(body)
        logger.debug("orchestrator request method=%s path=%s", method, path)

        try:
            with self._client_factory() as client:
                response = client.request(
                    method,
                    url,
                    headers=self.transport_build_headers(),
                    content=content,
                )
                response_text = response.text
        except httpx.TimeoutException as error:
            raise BacalhauTimeoutError(f"Orchestrator request timed out: {method} {path}") from error
        except httpx.RequestError as error:
            raise BacalhauConnectionError(f"Orchestrator request failed: {method} {path}: {error}") from error

        logger.debug("orchestrator response method=%s path=%s status=%s", method, path, response.status_code)
        if not response.is_success:
            logger.warning("orchestrator returned HTTP %s for %s %s", response.status_code, method, path)
            raise BacalhauTransportError(
                f"HTTP {response.status_code}: {response_text}",
                status_code=response.status_code,
                response_text=response_text,
            )

        try:
            return json.loads(response_text)
        except json.JSONDecodeError as error:
            logger.warning("orchestrator returned undecodable body for %s %s", method, path)
            raise BacalhauDecodeError(
                f"Invalid JSON response: {response_text}",
                response_text=response_text,
            ) from error

    def _transport_encode_body(self, body: Any) -> str | None:
        if body is None or body == "":
            return None
        if isinstance(body, str):
            return body
        return json.dumps(body)

    def _transport_default_client(self) -> httpx.Client:
        return httpx.Client(timeout=self._config.request_timeout_seconds)
