"""Job-layer package exposing the orchestrator operations façade."""

from .client import BacalhauClient

__all__ = ["BacalhauClient"]
