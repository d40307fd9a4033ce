"""Configuration models for core domain components.

This module provides Pydantic-based configuration classes for the retry
executor and the code generation session, enabling dependency injection and
testability.
"""

from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, Field, PositiveFloat, field_validator

# Milliseconds to wait after the first, second and third failed attempt.
# Shared by every caller, so it must stay an immutable tuple.
DEFAULT_BACKOFF_SCHEDULE: Tuple[int, ...] = (500, 400, 200)

DEFAULT_NAMESPACE = "YourNamespace"


class RetryPolicy(BaseModel):
    """Backoff schedule for one retry invocation.

    Each entry is the wait (milliseconds) inserted after the matching failed
    attempt. A schedule of length N allows at most N+1 attempts: N guarded
    ones plus a final unguarded attempt.

    Attributes:
        schedule: Ordered wait durations in milliseconds; empty or missing
            falls back to DEFAULT_BACKOFF_SCHEDULE
    """

    schedule: Tuple[PositiveFloat, ...] = Field(
        default=DEFAULT_BACKOFF_SCHEDULE,
        description="Wait in milliseconds after each failed guarded attempt, in order"
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("schedule", mode="before")
    @classmethod
    def default_when_empty(cls, value):
        if value is None:
            return DEFAULT_BACKOFF_SCHEDULE
        if isinstance(value, (str, bytes)):
            # let pydantic reject it instead of iterating characters
            return value
        value = tuple(value)
        if not value:
            return DEFAULT_BACKOFF_SCHEDULE
        return value

    @classmethod
    def from_schedule(cls, schedule: Optional[Iterable[float]] = None) -> "RetryPolicy":
        """Build a policy from a caller-supplied schedule (None/empty -> default)."""
        return cls(schedule=schedule)

    @property
    def max_attempts(self) -> int:
        return len(self.schedule) + 1

    @property
    def waits_in_seconds(self) -> Tuple[float, ...]:
        return tuple(ms / 1000 for ms in self.schedule)


class CodegenConfig(BaseModel):
    """Configuration for CodegenManager behavior.

    Attributes:
        namespace: Namespace handed to the code generator for new sessions
        clipboard_retry: Backoff schedule used when writing to the clipboard
    """

    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        min_length=1,
        description="Namespace written into generated code"
    )

    clipboard_retry: RetryPolicy = Field(
        default_factory=RetryPolicy,
        description="Retry schedule for clipboard writes (defaults to the shared schedule)"
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @classmethod
    def from_app_settings(cls, settings) -> "CodegenConfig":
        """Factory method to construct config from a SchemagenSettings instance.

        Args:
            settings: SchemagenSettings instance from core.settings

        Returns:
            CodegenConfig with values from app settings
        """
        return cls(
            namespace=settings.SCHEMAGEN_NAMESPACE,
            clipboard_retry=RetryPolicy.from_schedule(
                settings.SCHEMAGEN_CLIPBOARD_RETRY_SCHEDULE
            ),
        )
