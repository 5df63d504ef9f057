"""Python client library for the Bacalhau orchestrator HTTP API."""

from .adapters import HttpJsonTransport, TransportConfig
from .bootstrap import bootstrap_create_client, bootstrap_create_client_from_settings
from .domain import (
	BacalhauClientError,
	BacalhauConnectionError,
	BacalhauDecodeError,
	BacalhauFormatError,
	BacalhauNotFoundError,
	BacalhauShapeError,
	BacalhauTimeoutError,
	BacalhauTransportError,
	BacalhauValidationError,
	JobResult,
	JobSpecFormat,
)
from .jobs import BacalhauClient

__all__ = [
	"BacalhauClient",
	"BacalhauClientError",
	"BacalhauConnectionError",
	"BacalhauDecodeError",
	"BacalhauFormatError",
	"BacalhauNotFoundError",
	"BacalhauShapeError",
	"BacalhauTimeoutError",
	"BacalhauTransportError",
	"BacalhauValidationError",
	"HttpJsonTransport",
	"JobResult",
	"JobSpecFormat",
	"TransportConfig",
	"bootstrap_create_client",
	"bootstrap_create_client_from_settings",
]
