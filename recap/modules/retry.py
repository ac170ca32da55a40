from typing import Awaitable, Callable, TypeVar

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from recap.env import provider_retry_attempts
from recap.logs import get_logger

log = get_logger(__name__)

T = TypeVar('T')


def _log_retry(retry_state):
    log.warning(
        f'Provider call failed on attempt {retry_state.attempt_number}, retrying: {retry_state.outcome.exception()}'
    )


async def call_with_retries(
    fn: Callable[..., Awaitable[T]],
    *args,
    retry_on: tuple[type[BaseException], ...],
    attempts: int | None = None,
    wait: wait_base | None = None,
    **kwargs,
) -> T:
    """
    Calls a provider with exponential backoff on transient failures.

    With the default single attempt this is a plain call. Only the exception types in
    **retry_on** are retried, anything else (and the last failure) is re-raised untouched.
    """

    attempts = max(attempts if attempts is not None else provider_retry_attempts, 1)

    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait or wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(retry_on),
        before_sleep=_log_retry,
        reraise=True,
    ):
        with attempt:
            result = await fn(*args, **kwargs)

    return result


__all__ = ['call_with_retries']
