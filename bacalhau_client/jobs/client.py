"""Job operations façade over the orchestrator HTTP API."""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

from bacalhau_client.adapters import JsonTransportPort
from bacalhau_client.domain import (
    BacalhauValidationError,
    JobResult,
    JobSpecFormat,
    domain_encode_query_params,
    domain_extract_job_result,
    domain_normalize_job_spec,
    domain_resolve_job_spec_format,
)

logger = logging.getLogger(__name__)


class BacalhauClient:
    """Client exposing node inquiry, job lifecycle and result retrieval operations.

    The client holds only its transport; every operation issues at most one
    request and surfaces the first failure unchanged.
    """

    _ORCHESTRATOR_PREFIX: Final[str] = "/api/v1/orchestrator"
    _AGENT_PREFIX: Final[str] = "/api/v1/agent"

    def __init__(self, transport: JsonTransportPort):
        self._transport = transport

    def client_list_nodes(self) -> Any:
        """Return the raw node listing payload."""

        return self._transport.transport_request("GET", f"{self._ORCHESTRATOR_PREFIX}/nodes")

    def client_get_node_info(self, node_id: str) -> Any:
        """Return the raw payload describing one node."""

        return self._transport.transport_request("GET", f"{self._ORCHESTRATOR_PREFIX}/nodes/{node_id}")

    def client_describe_job(self, job_id: str | None) -> Any:
        """Return the raw payload describing one job.

        Args:
            job_id: Job identifier.

        Returns:
            Any: Job description payload.

        Raises:
            BacalhauValidationError: Raised when job_id is empty, before any request.
        """

        if not job_id:
            raise BacalhauValidationError('"JobID" cannot be empty')
        return self._transport.transport_request("GET", f"{self._ORCHESTRATOR_PREFIX}/jobs/{job_id}")

    def client_create_job(self, job_spec_text: str, spec_format: str | JobSpecFormat = JobSpecFormat.JSON) -> Any:
        """Submit a job specification after normalizing it to wrapped JSON.

        Args:
            job_spec_text: Bare or wrapped job specification in JSON or YAML.
            spec_format: Declared encoding of `job_spec_text`.

        Returns:
            Any: Creation response, expected to carry the new job identifier.

        Raises:
            BacalhauValidationError: Raised when the declared format is unsupported.
            BacalhauFormatError: Raised when the specification text cannot be parsed.
        """

        resolved_format = domain_resolve_job_spec_format(spec_format)
        canonical_body = domain_normalize_job_spec(job_spec_text, resolved_format)
        logger.debug("submitting job specification format=%s", resolved_format.value)
        return self._transport.transport_request("PUT", f"{self._ORCHESTRATOR_PREFIX}/jobs", canonical_body)

    def client_stop_job(self, job_id: str, reason: str = "") -> Any:
        """Request the orchestrator to stop a job.

        Args:
            job_id: Job identifier.
            reason: Free-text reason recorded by the orchestrator.

        Returns:
            Any: Stop response payload.
        """

        return self._transport.transport_request(
            "DELETE",
            f"{self._ORCHESTRATOR_PREFIX}/jobs/{job_id}",
            {"reason": reason},
        )

    def client_get_job_history(self, job_id: str, params: Mapping[str, Any] | None = None) -> Any:
        """Return the raw job history payload filtered by query parameters.

        Args:
            job_id: Job identifier.
            params: Optional filter parameters; keys are lower-cased on the wire.

        Returns:
            Any: History payload.
        """

        query = domain_encode_query_params(params)
        return self._transport.transport_request("GET", f"{self._ORCHESTRATOR_PREFIX}/jobs/{job_id}/history{query}")

    def client_get_job_executions(self, job_id: str) -> Any:
        """Return the raw executions listing for one job."""

        return self._transport.transport_request("GET", f"{self._ORCHESTRATOR_PREFIX}/jobs/{job_id}/executions")

    def client_get_job_result(self, job_id: str) -> JobResult:
        """Return the output of the first execution that produced stdout.

        Args:
            job_id: Job identifier.

        Returns:
            JobResult: Job id, execution id and stdout of the first matching execution.

        Raises:
            BacalhauShapeError: Raised when the executions payload has no `Items` list.
            BacalhauNotFoundError: Raised when no execution has stdout yet.
        """

        executions_response = self.client_get_job_executions(job_id)
        return domain_extract_job_result(executions_response, job_id)

    def client_is_alive(self) -> Any:
        return self._transport.transport_request("GET", f"{self._AGENT_PREFIX}/alive")

    def client_get_bacalhau_version(self) -> Any:
        return self._transport.transport_request("GET", f"{self._AGENT_PREFIX}/version")

    def client_get_agent_node_info(self) -> Any:
        return self._transport.transport_request("GET", f"{self._AGENT_PREFIX}/node")
