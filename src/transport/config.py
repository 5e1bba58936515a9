"""Transport schedule configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class TransportConfig(BaseSettings):
    """Transport schedule configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Source spreadsheet (URL or local path)
    schedule_source: str = Field(
        default="Transport Schedule Final Exam Semester-Summer-2025.xlsx",
        description="URL or file path of the transport schedule workbook",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for fetching the workbook over HTTP",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "TRANSPORT_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: TransportConfig | None = None


def get_config() -> TransportConfig:
    """Get the transport configuration singleton.

    Returns:
        TransportConfig: Transport configuration instance
    """
    global _config
    if _config is None:
        _config = TransportConfig()
    return _config
