"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime and GA4 access.

    Environment variable names map directly to field names in uppercase.
    Example: `upstream_timeout_seconds` reads from `UPSTREAM_TIMEOUT_SECONDS`.

    Attributes:
        environment_name: Runtime environment label.
        host: Host interface for web server binding.
        port: Web server port.
        google_application_credentials: Path to the service account key file.
        log_level: Root logging level name.
        upstream_timeout_seconds: Timeout applied to every GA4 API call.
        batch_max_concurrency: Maximum concurrent property fetches per batch, 0 disables the cap.
        cors_allow_origins: Origins allowed by the CORS middleware.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    google_application_credentials: str = Field(default="service-account-key.json", min_length=1)
    log_level: str = Field(default="INFO")
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)
    batch_max_concurrency: int = Field(default=10, ge=0)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("google_application_credentials")
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
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log level: {value}")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
