"""Ready-made transient filters for RetryPort callers."""

from typing import Type

from schemagen.core.interfaces.retry import TransientFilter


def retry_on(*exception_types: Type[Exception]) -> TransientFilter:
    """Treat only the given exception types as transient."""
    if not exception_types:
        raise ValueError("retry_on() needs at least one exception type")

    def _is_transient(exc: Exception) -> bool:
        return isinstance(exc, exception_types)

    return _is_transient


def fail_fast_on(*exception_types: Type[Exception]) -> TransientFilter:
    """Treat every failure as transient except the given exception types."""
    if not exception_types:
        raise ValueError("fail_fast_on() needs at least one exception type")

    def _is_transient(exc: Exception) -> bool:
        return not isinstance(exc, exception_types)

    return _is_transient
