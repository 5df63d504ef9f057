"""Job result extraction from orchestrator execution listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import BacalhauNotFoundError, BacalhauShapeError


@dataclass(frozen=True)
class JobResult:
    """Projection of the first execution that produced standard output.

    Attributes:
        job_id: Job identifier supplied by the caller.
        execution_id: Identifier of the selected execution, None when the item carries no `ID`.
        stdout: Standard-output text of the selected execution.
    """

    job_id: str
    execution_id: str | None
    stdout: str

    def to_payload(self) -> dict[str, str | None]:
        """Return the result in the orchestrator's field naming.

        Returns:
            dict[str, str | None]: Mapping with `JobID`, `ExecutionID` and `Stdout` keys.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return {"JobID": self.job_id, "ExecutionID": self.execution_id, "Stdout": self.stdout}


def domain_extract_job_result(executions_response: Any, job_id: str) -> JobResult:
    """Select the first execution, in listed order, carrying non-empty stdout.

    Args:
        executions_response: Parsed executions listing payload.
        job_id: Job identifier the listing belongs to.

    Returns:
        JobResult: Result built from the first matching execution.

    Raises:
        BacalhauShapeError: Raised when the payload has no list-typed `Items` field.
        BacalhauNotFoundError: Raised when no execution carries stdout.
    """

    items = executions_response.get("Items") if isinstance(executions_response, dict) else None
    if not isinstance(items, list):
        raise BacalhauShapeError("Unexpected job executions response structure")

    for item in items:
        stdout = _domain_execution_stdout(item)
        if stdout:
            return JobResult(job_id=job_id, execution_id=item.get("ID"), stdout=stdout)

    raise BacalhauNotFoundError("No executions with stdout found")


def _domain_execution_stdout(item: Any) -> str | None:
    if not isinstance(item, dict):
        return None
    run_output = item.get("RunOutput")
    if not isinstance(run_output, dict):
        return None
    stdout = run_output.get("Stdout")
    return stdout if isinstance(stdout, str) else None
