import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    before_sleep_log,
    stop_after_attempt,
    wait_chain,
    wait_fixed,
)
from tenacity.retry import retry_base

from schemagen.core.config import RetryPolicy
from schemagen.core.exceptions import InvalidOperationError
from schemagen.core.interfaces.retry import AsyncSleeper, Sleeper, TransientFilter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class retry_if_transient(retry_base):
    """Retry strategy that consults the transient filter on guarded attempts only.

    Once the guarded attempts are used up the filter is skipped: the stop
    condition ends the loop and ``reraise`` surfaces the last failure as-is.
    Failures that are not ``Exception`` instances (KeyboardInterrupt,
    CancelledError, ...) are never retried.
    """

    def __init__(
        self,
        guarded_attempts: int,
        transient_filter: Optional[TransientFilter] = None,
    ) -> None:
        self.guarded_attempts = guarded_attempts
        self.transient_filter = transient_filter

    def __call__(self, retry_state: RetryCallState) -> bool:
        outcome = retry_state.outcome
        if outcome is None or not outcome.failed:
            return False
        exc = outcome.exception()
        if not isinstance(exc, Exception):
            return False
        if retry_state.attempt_number > self.guarded_attempts:
            return True
        if self.transient_filter is None:
            return True
        return bool(self.transient_filter(exc))


def _require_operation(operation: Any) -> None:
    if operation is None or not callable(operation):
        raise InvalidOperationError(
            f"operation must be a zero-argument callable, got {operation!r}"
        )


def _retrying_kwargs(
    transient_filter: Optional[TransientFilter],
    schedule: Optional[Sequence[float]],
) -> Dict[str, Any]:
    """Translate a backoff schedule + filter into tenacity policy arguments.

    Shared by the blocking and the async path so the schedule walk exists once.
    """
    policy = RetryPolicy.from_schedule(schedule)
    return dict(
        stop=stop_after_attempt(policy.max_attempts),
        wait=wait_chain(*(wait_fixed(seconds) for seconds in policy.waits_in_seconds)),
        retry=retry_if_transient(len(policy.schedule), transient_filter),
        before_sleep=before_sleep_log(logger, logging.DEBUG),
        reraise=True,
    )


class RetryExecutor:
    """Tenacity-based retry executor implementing RetryPort.

    Walks a millisecond backoff schedule (default 500, 400, 200), re-invoking
    the operation after each transient failure, then makes one final attempt
    whose outcome is passed through untouched. The waiter is injected:
    ``sleep`` blocks the calling thread for run_sync, ``async_sleep`` suspends
    the current task for run_async. Holds no per-call state, so one instance
    can be shared freely.
    """

    def __init__(
        self,
        sleep: Sleeper = time.sleep,
        async_sleep: AsyncSleeper = asyncio.sleep,
    ) -> None:
        self.sleep = sleep
        self.async_sleep = async_sleep

    def run_sync(
        self,
        operation: Callable[[], T],
        transient_filter: Optional[TransientFilter] = None,
        schedule: Optional[Sequence[float]] = None,
    ) -> T:
        _require_operation(operation)
        retrying = Retrying(
            sleep=self.sleep, **_retrying_kwargs(transient_filter, schedule)
        )
        return retrying(operation)

    def run_async(
        self,
        operation: Callable[[], Awaitable[T]],
        transient_filter: Optional[TransientFilter] = None,
        schedule: Optional[Sequence[float]] = None,
    ) -> Awaitable[T]:
        # validated here, not inside a coroutine, so misuse fails at call time
        _require_operation(operation)
        retrying = AsyncRetrying(
            sleep=self.async_sleep, **_retrying_kwargs(transient_filter, schedule)
        )
        return retrying(operation)


_default_executor = RetryExecutor()


def run_sync(
    operation: Callable[[], T],
    transient_filter: Optional[TransientFilter] = None,
    schedule: Optional[Sequence[float]] = None,
) -> T:
    """Retry a blocking operation with the process-wide executor."""
    return _default_executor.run_sync(operation, transient_filter, schedule)


def run_async(
    operation: Callable[[], Awaitable[T]],
    transient_filter: Optional[TransientFilter] = None,
    schedule: Optional[Sequence[float]] = None,
) -> Awaitable[T]:
    """Retry an async operation with the process-wide executor."""
    return _default_executor.run_async(operation, transient_filter, schedule)
