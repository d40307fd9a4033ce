from typing import Awaitable, Callable, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")

# True -> the failure is worth another attempt, False -> fail fast.
TransientFilter = Callable[[Exception], bool]

# Waiters receive the wait in seconds.
Sleeper = Callable[[float], None]
AsyncSleeper = Callable[[float], Awaitable[None]]


class RetryPort(Protocol):
    """Abstract retry interface for blocking and async operations.

    Implementations walk a backoff schedule (milliseconds) and re-invoke a
    zero-argument operation on failure. After the schedule is exhausted one
    final attempt is made whose outcome is returned or raised verbatim.
    The contract keeps the core decoupled from a specific library (tenacity/backoff).
    """

    def run_sync(
        self,
        operation: Callable[[], T],
        transient_filter: Optional[TransientFilter] = None,
        schedule: Optional[Sequence[float]] = None,
    ) -> T:  # pragma: no cover - protocol
        """Run a blocking callable with retry semantics.

        Args:
            operation: Zero-argument callable; its return value is passed through.
            transient_filter: Optional classifier; returning False re-raises at once.
            schedule: Wait in milliseconds after each failed attempt (None/empty -> default).
        Returns:
            Result of the successful invocation.
        Raises:
            InvalidOperationError: operation is missing, before any attempt.
            Propagates the last exception unchanged when every attempt fails.
        """
        ...

    def run_async(
        self,
        operation: Callable[[], Awaitable[T]],
        transient_filter: Optional[TransientFilter] = None,
        schedule: Optional[Sequence[float]] = None,
    ) -> Awaitable[T]:  # pragma: no cover - protocol
        """Run an async callable with retry semantics.

        Same contract as run_sync, but waits suspend instead of blocking.
        A missing operation is rejected when this method is called, not when
        the returned awaitable is awaited.
        """
        ...
