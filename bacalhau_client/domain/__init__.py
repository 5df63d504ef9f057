"""Domain models and pure transformations used across client layer boundaries."""

from .errors import (
	BacalhauClientError,
	BacalhauConnectionError,
	BacalhauDecodeError,
	BacalhauFormatError,
	BacalhauNotFoundError,
	BacalhauShapeError,
	BacalhauTimeoutError,
	BacalhauTransportError,
	BacalhauValidationError,
)
from .execution_results import JobResult, domain_extract_job_result
from .job_spec import (
	JOB_ENVELOPE_KEY,
	BareJobSpec,
	JobSpec,
	JobSpecFormat,
	WrappedJobSpec,
	domain_classify_job_spec,
	domain_convert_yaml_to_json,
	domain_job_spec_is_wrapped,
	domain_normalize_job_spec,
	domain_resolve_job_spec_format,
	domain_wrap_job_json,
)
from .query_params import domain_encode_query_params

__all__ = [
	"JOB_ENVELOPE_KEY",
	"BacalhauClientError",
	"BacalhauConnectionError",
	"BacalhauDecodeError",
	"BacalhauFormatError",
	"BacalhauNotFoundError",
	"BacalhauShapeError",
	"BacalhauTimeoutError",
	"BacalhauTransportError",
	"BacalhauValidationError",
	"BareJobSpec",
	"JobResult",
	"JobSpec",
	"JobSpecFormat",
	"WrappedJobSpec",
	"domain_classify_job_spec",
	"domain_convert_yaml_to_json",
	"domain_encode_query_params",
	"domain_extract_job_result",
	"domain_job_spec_is_wrapped",
	"domain_normalize_job_spec",
	"domain_resolve_job_spec_format",
	"domain_wrap_job_json",
]
