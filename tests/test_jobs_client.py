"""Regression tests for the job operations façade."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from bacalhau_client.adapters import HttpJsonTransport, TransportConfig
from bacalhau_client.domain import (
    BacalhauFormatError,
    BacalhauNotFoundError,
    BacalhauShapeError,
    BacalhauTransportError,
    BacalhauValidationError,
    JobResult,
)
from bacalhau_client.jobs import BacalhauClient
import bacalhau_client.jobs.client as client_module


class _RecordingTransport:
    """Test double recording every request and returning one canned payload."""

    def __init__(self, response: Any = None):
        self.calls: list[tuple[str, str, Any]] = []
        self._response = {} if response is None else response

    def transport_request(self, method: str, path: str, body: Any = None) -> Any:
        """Record one request and return the canned payload.

        Args:
            method: HTTP method.
            path: Request path.
            body: Optional request body.

        Returns:
            Any: Canned response payload.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        self.calls.append((method, path, body))
        return self._response


class _FailingTransport:
    """Test double that always fails with an HTTP error."""

    def transport_request(self, method: str, path: str, body: Any = None) -> Any:
        raise BacalhauTransportError("HTTP 404: not found", status_code=404, response_text="not found")


@pytest.mark.parametrize(
    ("operation_name", "arguments", "expected_path"),
    [
        ("client_list_nodes", (), "/api/v1/orchestrator/nodes"),
        ("client_get_node_info", ("node-1",), "/api/v1/orchestrator/nodes/node-1"),
        ("client_describe_job", ("j1",), "/api/v1/orchestrator/jobs/j1"),
        ("client_get_job_executions", ("j1",), "/api/v1/orchestrator/jobs/j1/executions"),
        ("client_is_alive", (), "/api/v1/agent/alive"),
        ("client_get_bacalhau_version", (), "/api/v1/agent/version"),
        ("client_get_agent_node_info", (), "/api/v1/agent/node"),
    ],
)
def test_jobs_client_pass_through_operations_issue_one_get(
    operation_name: str,
    arguments: tuple[str, ...],
    expected_path: str,
) -> None:
    """Issue exactly one GET to the documented path and return the raw payload.

    Args:
        operation_name: Façade method name.
        arguments: Positional method arguments.
        expected_path: Documented request path.

    Returns:
        None: Assertions validate routing and pass-through behavior.

    Raises:
        AssertionError: Raised when routing or payload pass-through is incorrect.
    """

    payload = {"Items": [{"ID": "x"}]}
    transport = _RecordingTransport(response=payload)
    client = BacalhauClient(transport=transport)

    assert getattr(client, operation_name)(*arguments) is payload
    assert transport.calls == [("GET", expected_path, None)]


@pytest.mark.parametrize("job_id", ["", None])
def test_jobs_client_describe_job_rejects_empty_id_before_request(job_id: str | None) -> None:
    """Reject empty job id locally with zero transport invocations.

    Args:
        job_id: Empty job identifier variant.

    Returns:
        None: Assertions validate pre-request validation.

    Raises:
        AssertionError: Raised when a request is issued for an empty id.
    """

    transport = _RecordingTransport()
    client = BacalhauClient(transport=transport)

    with pytest.raises(BacalhauValidationError, match='"JobID" cannot be empty'):
        client.client_describe_job(job_id)

    assert transport.calls == []


def test_jobs_client_create_job_rejects_unknown_format_before_normalizing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reject unsupported format without invoking normalizer or transport.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate format validation ordering.

    Raises:
        AssertionError: Raised when normalizer or transport are invoked.
    """

    normalizer_calls: list[tuple[str, object]] = []

    def _recording_normalizer(job_spec_text: str, spec_format: object) -> str:
        normalizer_calls.append((job_spec_text, spec_format))
        return job_spec_text

    monkeypatch.setattr(client_module, "domain_normalize_job_spec", _recording_normalizer)
    transport = _RecordingTransport()
    client = BacalhauClient(transport=transport)

    with pytest.raises(BacalhauValidationError):
        client.client_create_job("<job/>", "xml")

    assert normalizer_calls == []
    assert transport.calls == []


def test_jobs_client_create_job_sends_identical_body_for_json_and_yaml() -> None:
    """Send the same canonical wrapped JSON via PUT for every input form.

    Returns:
        None: Assertions validate canonical submission body.

    Raises:
        AssertionError: Raised when bodies differ across input forms.
    """

    transport = _RecordingTransport(response={"JobID": "j-new"})
    client = BacalhauClient(transport=transport)

    assert client.client_create_job('{"Name": "x", "Count": 1}') == {"JobID": "j-new"}
    client.client_create_job('{"Job": {"Name": "x", "Count": 1}}', "json")
    client.client_create_job("Name: x\nCount: 1\n", "yaml")
    client.client_create_job("Job:\n  Name: x\n  Count: 1\n", "yaml")

    expected_call = ("PUT", "/api/v1/orchestrator/jobs", '{"Job":{"Name":"x","Count":1}}')
    assert transport.calls == [expected_call] * 4


def test_jobs_client_create_job_surfaces_format_error_without_request() -> None:
    transport = _RecordingTransport()
    client = BacalhauClient(transport=transport)

    with pytest.raises(BacalhauFormatError):
        client.client_create_job("Name: [x", "yaml")

    assert transport.calls == []


def test_jobs_client_stop_job_sends_reason_body() -> None:
    transport = _RecordingTransport()
    client = BacalhauClient(transport=transport)

    client.client_stop_job("j1")
    client.client_stop_job("j2", reason="no longer needed")

    assert transport.calls == [
        ("DELETE", "/api/v1/orchestrator/jobs/j1", {"reason": ""}),
        ("DELETE", "/api/v1/orchestrator/jobs/j2", {"reason": "no longer needed"}),
    ]


def test_jobs_client_get_job_history_appends_encoded_query() -> None:
    """Append lower-cased query suffix to the history path.

    Returns:
        None: Assertions validate history query encoding.

    Raises:
        AssertionError: Raised when query suffix is incorrect.
    """

    transport = _RecordingTransport()
    client = BacalhauClient(transport=transport)

    client.client_get_job_history("j1", {"Limit": 10, "State": "Running"})
    client.client_get_job_history("j1")

    assert transport.calls == [
        ("GET", "/api/v1/orchestrator/jobs/j1/history?limit=10&state=Running", None),
        ("GET", "/api/v1/orchestrator/jobs/j1/history", None),
    ]


def test_jobs_client_get_job_result_extracts_first_stdout() -> None:
    transport = _RecordingTransport(
        response={"Items": [{"ID": "e1"}, {"ID": "e2", "RunOutput": {"Stdout": "hello"}}]}
    )
    client = BacalhauClient(transport=transport)

    assert client.client_get_job_result("job1") == JobResult(job_id="job1", execution_id="e2", stdout="hello")
    assert transport.calls == [("GET", "/api/v1/orchestrator/jobs/job1/executions", None)]


def test_jobs_client_get_job_result_distinguishes_not_found_and_shape_errors() -> None:
    """Surface not-found and shape failures as distinct typed errors.

    Returns:
        None: Assertions validate result error taxonomy.

    Raises:
        AssertionError: Raised when failures are conflated.
    """

    with pytest.raises(BacalhauNotFoundError):
        BacalhauClient(transport=_RecordingTransport(response={"Items": [{"ID": "e1"}]})).client_get_job_result("j1")

    with pytest.raises(BacalhauShapeError):
        BacalhauClient(transport=_RecordingTransport(response={"Execs": []})).client_get_job_result("j1")


def test_jobs_client_propagates_transport_failure_unchanged() -> None:
    client = BacalhauClient(transport=_FailingTransport())

    with pytest.raises(BacalhauTransportError) as error_info:
        client.client_get_job_result("j1")

    assert error_info.value.status_code == 404
    assert error_info.value.response_text == "not found"


def test_jobs_client_create_job_over_http_transport_sends_canonical_body() -> None:
    """Submit a bare YAML job end-to-end through the HTTP transport.

    Returns:
        None: Assertions validate the wire request issued by job creation.

    Raises:
        AssertionError: Raised when the wire request is incorrect.
    """

    captured_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json={"JobID": "j-123"})

    transport = HttpJsonTransport(
        config=TransportConfig(host="localhost", port=1234),
        client_factory=lambda: httpx.Client(transport=httpx.MockTransport(_handler)),
    )
    client = BacalhauClient(transport=transport)

    assert client.client_create_job("Name: x\nType: batch\n", "yaml") == {"JobID": "j-123"}
    assert captured_requests[0].method == "PUT"
    assert str(captured_requests[0].url) == "http://localhost:1234/api/v1/orchestrator/jobs"
    assert captured_requests[0].content == b'{"Job":{"Name":"x","Type":"batch"}}'
