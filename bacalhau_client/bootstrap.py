"""Client bootstrap wiring from explicit coordinates or validated settings."""

from __future__ import annotations

from bacalhau_client.adapters import HttpJsonTransport, TransportConfig
from bacalhau_client.config import BacalhauSettings, config_load_settings
from bacalhau_client.jobs import BacalhauClient


def bootstrap_create_client(
    host: str,
    port: int,
    use_secure: bool = False,
    access_token: str = "",
    request_timeout_seconds: float = 30.0,
) -> BacalhauClient:
    """Assemble a client for explicit endpoint coordinates.

    Args:
        host: Orchestrator host name or address.
        port: Orchestrator API port.
        use_secure: Whether to use HTTPS.
        access_token: Bearer token, only sent over HTTPS.
        request_timeout_seconds: HTTP request timeout in seconds.

    Returns:
        BacalhauClient: Client wired to an HTTP transport.

    Raises:
        ValueError: Raised when endpoint coordinates are invalid.
    """

    transport_config = TransportConfig(
        host=host,
        port=port,
        use_secure=use_secure,
        access_token=access_token,
        request_timeout_seconds=request_timeout_seconds,
    )
    return BacalhauClient(transport=HttpJsonTransport(config=transport_config))


def bootstrap_create_client_from_settings(settings: BacalhauSettings | None = None) -> BacalhauClient:
    """Assemble a client from environment-backed settings.

    Args:
        settings: Optional preloaded settings; loaded from the environment when omitted.

    Returns:
        BacalhauClient: Client wired to an HTTP transport.

    Raises:
        SettingsLoadError: Raised when settings validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return bootstrap_create_client(
        host=resolved_settings.bacalhau_api_host,
        port=resolved_settings.bacalhau_api_port,
        use_secure=resolved_settings.bacalhau_use_secure,
        access_token=resolved_settings.bacalhau_access_token,
        request_timeout_seconds=resolved_settings.bacalhau_request_timeout_seconds,
    )
