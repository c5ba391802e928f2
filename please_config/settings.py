"""Runtime settings for the loader, read from ``PLEASE_CONFIG_*`` environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_CONFIG_BYTES = 1024 * 1024


class LoaderSettings(BaseSettings):
    """Settings that control how configuration documents are fetched.

    Example:
        PLEASE_CONFIG_MAX_CONFIG_BYTES=65536
        PLEASE_CONFIG_GITHUB_API_URL=https://github.example.com/api/v3
    """

    model_config = SettingsConfigDict(
        env_prefix="PLEASE_CONFIG_",
        case_sensitive=False,
    )

    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(default=True, description="Render log events as JSON lines instead of console text")
    max_config_bytes: int = Field(
        default=DEFAULT_MAX_CONFIG_BYTES,
        ge=1,
        description="Largest remote config payload accepted, in decoded bytes",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub API base URL (override for GitHub Enterprise)",
    )


def get_settings() -> LoaderSettings:
    """Read settings from the current environment."""
    return LoaderSettings()
