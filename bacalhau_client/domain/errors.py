"""Project-native typed exceptions for orchestrator client failures."""

from __future__ import annotations


class BacalhauClientError(Exception):
    """Base exception for every failure surfaced by the client library."""


class BacalhauValidationError(BacalhauClientError, ValueError):
    """Caller input rejected locally before any network call is attempted."""


class BacalhauFormatError(BacalhauClientError, ValueError):
    """Job specification text could not be parsed or re-encoded."""


class BacalhauConnectionError(BacalhauClientError, ConnectionError):
    """Request never produced an HTTP response from the orchestrator."""


class BacalhauTimeoutError(BacalhauConnectionError, TimeoutError):
    """Underlying request mechanism timed out before a response arrived."""


class BacalhauTransportError(BacalhauClientError, ConnectionError):
    """Orchestrator answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code returned by the orchestrator.
        response_text: Raw response body text, unparsed.
    """

    def __init__(self, message: str, status_code: int, response_text: str):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class BacalhauDecodeError(BacalhauClientError, ValueError):
    """Orchestrator answered with success status but an unparsable JSON body.

    Attributes:
        response_text: Raw response body text that failed to parse.
    """

    def __init__(self, message: str, response_text: str):
        super().__init__(message)
        self.response_text = response_text


class BacalhauShapeError(BacalhauClientError, RuntimeError):
    """Response payload is missing the structure the client relies on."""


class BacalhauNotFoundError(BacalhauClientError, LookupError):
    """Well-formed response carried no item satisfying the requested lookup."""
