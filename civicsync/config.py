"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # JWT settings
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 7

    # Password hashing
    bcrypt_rounds: int = 10
    min_password_length: int = 6


class UploadSettings(BaseModel):
    """Image upload configuration."""

    # Directory images are written to (created on startup if missing)
    directory: str = "uploads"

    # Public path the directory is served under
    url_prefix: str = "/uploads"

    max_size_bytes: int = 5 * 1024 * 1024
    allowed_extensions: list[str] = [".jpeg", ".jpg", ".png", ".gif"]


class PaginationSettings(BaseModel):
    """Issue feed pagination defaults."""

    default_page: int = 1
    default_limit: int = 10


class AnalyticsSettings(BaseModel):
    """Analytics aggregation configuration."""

    # Number of calendar days in the submissions histogram (ending today)
    daily_window_days: int = 7

    top_issues_per_category: int = 5
    recent_issues: int = 5


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://<host>
        """
        if self.host in ("localhost", "0.0.0.0"):
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            # Production uses standard ports (80/443)
            return f"{self.protocol}://{self.host}"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL allowed for CORS.

        In development: http://localhost:3000
        In production: https://<frontend_host>
        """
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        else:
            return f"{self.protocol}://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

    Development (default):
        HOST=localhost
        PORT=8000
        ENVIRONMENT=development
        -> API: http://localhost:8000
        -> Frontend: http://localhost:3000

    Production:
        HOST=api.civicsync.example
        ENVIRONMENT=production
        FRONTEND_HOST=civicsync.example
        AUTH__JWT_SECRET=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows AUTH__JWT_SECRET syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Load the fixed sample users/issues/votes into the store at startup
    seed_sample_data: bool = True

    # Nested settings
    auth: AuthSettings = AuthSettings()
    uploads: UploadSettings = UploadSettings()
    pagination: PaginationSettings = PaginationSettings()
    analytics: AnalyticsSettings = AnalyticsSettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol=protocol,
            frontend_host=self.frontend_host,
        )

        return self
