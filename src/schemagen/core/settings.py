# Logging adapter for application-wide logging
from schemagen.adapters.logging_adapter import LoggingAdapter

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from rich import print

from schemagen.core.config import DEFAULT_NAMESPACE
from schemagen.core.interfaces.logging import LoggingPort

# using pydantic_settings to manage environment variables
# and do automatic type casting in a central place
class SchemagenSettings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore"  # ignore unrelated environment variables
    }
    SCHEMAGEN_LOG_LEVEL: str = "INFO"
    # Hide per-attempt retry messages even at DEBUG level
    SCHEMAGEN_QUIET_RETRIES: bool = False
    # Schema used when no path is given on the command line
    SCHEMAGEN_SCHEMA_FILE: Optional[Path] = None
    SCHEMAGEN_NAMESPACE: str = DEFAULT_NAMESPACE
    # Milliseconds between clipboard write attempts, e.g. "[500, 400, 200]".
    # Empty means the shared default schedule.
    SCHEMAGEN_CLIPBOARD_RETRY_SCHEDULE: list[float] = Field(default_factory=list)

    @field_validator("SCHEMAGEN_NAMESPACE", mode="before")
    def strip_namespace(cls, value: str) -> str:
        """Surrounding whitespace is never part of a namespace."""
        return value.strip() if isinstance(value, str) else value

    def print_settings(self, logger: LoggingPort):
        """Prints the settings for debugging purposes"""
        logger.info("schemagen settings:")
        print(self)


app_settings = SchemagenSettings()

logger: LoggingPort = LoggingAdapter("schemagen", app_settings.SCHEMAGEN_LOG_LEVEL)


def set_logger(new_logger: LoggingPort) -> None:
    """Swap the application logger (called once by the composition root)."""
    global logger
    logger = new_logger


def get_logger() -> LoggingPort:
    return logger
