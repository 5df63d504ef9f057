"""Typed interfaces for adapter-layer responsibilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Protocol


@dataclass(frozen=True)
class TransportConfig:
    """Immutable endpoint coordinates for orchestrator HTTP access.

    Attributes:
        host: Orchestrator host name or address.
        port: Orchestrator API port.
        use_secure: Whether to use HTTPS instead of HTTP.
        access_token: Bearer token, sent only over secure transport.
        request_timeout_seconds: Timeout applied by the underlying HTTP client.
    """

    host: str
    port: int
    use_secure: bool = False
    access_token: str = ""
    request_timeout_seconds: float = 30.0

    def __post_init__(self) -> None:
        if not self.host.strip():
            raise ValueError("host must not be blank")
        if self.port < 1 or self.port > 65535:
            raise ValueError("port must be in range 1..65535")
        if self.request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

    @property
    def base_url(self) -> str:
        """Return `scheme://host:port` for the configured endpoint.

        Returns:
            str: Base URL without trailing slash.

        Raises:
            RuntimeError: This property does not raise runtime errors.
        """

        scheme = "https" if self.use_secure else "http"
        return f"{scheme}://{self.host}:{self.port}"


class JsonTransportPort(Protocol):
    """Port definition for issuing one JSON request against the orchestrator."""

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
            BacalhauConnectionError: Raised when no response was received.
        """
