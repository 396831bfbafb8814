"""Action inputs, read from INPUT_* environment variables (or .env for local runs)."""

from urllib.parse import urlsplit

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class JccSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Jira credentials
    email: str
    token: SecretStr
    url: str  # https://your-domain.atlassian.net

    # Comment text
    success: str
    failed: str

    label: str  # skip label, "" disables skipping
    status: str  # upstream step status, only "success" picks the success text

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"expected an http(s) base URL, got '{value}'")
        return value.rstrip("/")


def get_settings() -> JccSettings:
    """Return the inputs for this invocation.

    Raises pydantic.ValidationError when an input is missing or malformed.
    """
    return JccSettings()  # type: ignore[call-arg]
