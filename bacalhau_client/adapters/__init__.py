"""Adapter layer package for orchestrator transport boundaries."""

from .http_transport import HttpJsonTransport
from .interfaces import JsonTransportPort, TransportConfig

__all__ = [
	"HttpJsonTransport",
	"JsonTransportPort",
	"TransportConfig",
]
