"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class BacalhauSettings(BaseSettings):
    """Settings for the command-line surface and bootstrap wiring.

    Environment variable names map directly to field names in uppercase.
    Example: `bacalhau_api_host` reads from `BACALHAU_API_HOST`.

    Attributes:
        bacalhau_api_host: Orchestrator host name or address.
        bacalhau_api_port: Orchestrator API port.
        bacalhau_use_secure: Whether to use HTTPS.
        bacalhau_access_token: Bearer token, only sent over HTTPS.
        bacalhau_request_timeout_seconds: HTTP request timeout in seconds.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    bacalhau_api_host: str = Field(default="localhost", min_length=1)
    bacalhau_api_port: int = Field(default=1234, ge=1, le=65535)
    bacalhau_use_secure: bool = Field(default=False)
    bacalhau_access_token: str = Field(default="")
    bacalhau_request_timeout_seconds: float = Field(default=30.0, gt=0)
    log_level: str = Field(default="WARNING")

    @field_validator("bacalhau_api_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return normalized_value


def config_load_settings() -> BacalhauSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        BacalhauSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return BacalhauSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
