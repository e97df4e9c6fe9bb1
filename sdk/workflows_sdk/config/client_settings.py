"""Settings for the workflows API client."""

from typing import Any, Optional

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkflowClientSettings(BaseSettings):
    """Configuration for connecting to the workflows backend."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    backend_url: HttpUrl = Field(
        default="https://api.novu.co/v1",
        title="Backend URL",
        description="Base URL that workflow resource paths are joined onto.",
        alias="WORKFLOWS_API_URL",
    )
    api_key: Optional[str] = Field(
        default=None,
        title="API Key",
        description="Key sent in the Authorization header as 'ApiKey <key>'.",
        alias="WORKFLOWS_API_KEY",
    )
    timeout_seconds: float = Field(
        default=30.0,
        title="Request Timeout",
        description="Default timeout in seconds for each request.",
        alias="WORKFLOWS_API_TIMEOUT_SECONDS",
    )

    # --- Service Toggles ---
    use_mock_transport: bool = Field(
        default=False,
        title="Use Mock Transport",
        description="Return an in-memory transport instead of issuing HTTP calls.",
        alias="WORKFLOWS_USE_MOCK_TRANSPORT",
    )

    @field_validator("use_mock_transport", mode="before")
    @classmethod
    def parse_use_mock_transport(cls, value: Any) -> bool:
        """Ensure the toggle is parsed as a boolean from string."""
        if isinstance(value, str):
            return value.lower() in {"true", "1", "yes", "on"}
        return bool(value)
