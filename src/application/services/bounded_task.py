"""Bounded background execution with a single-result channel.

``run_bounded`` starts the operation as its own asyncio task. The task puts
exactly one ``Result`` into a one-slot queue; the calling coroutine drains
that queue under a timeout and only then returns. When the wait elapses the
task is cancelled and the caller receives
``Failure(RemoteConnectionError(code=BACKEND_TIMEOUT))``.

Callers never see an exception from the operation: failures are turned into
data by ``on_error`` (the pure ``classify_failure`` by default). Session side
effects belong to the caller, applied after draining via
``ErrorClassifier.handle``.

Usage:
    result = await run_bounded(
        lambda: api.list_all(header),
        timeout=settings.resource_load_timeout_seconds,
    )
    if isinstance(result, Failure):
        classifier.handle(result.error, operation="list_pages")
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from src.application.services.error_classifier import classify_failure
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import RemoteCallError, RemoteConnectionError

T = TypeVar("T")


async def _produce(
    operation: Callable[[], Awaitable[T]],
    channel: "asyncio.Queue[Result[T, RemoteCallError]]",
    on_error: Callable[[Exception], RemoteCallError],
) -> None:
    try:
        value = await operation()
    except Exception as e:
        channel.put_nowait(Failure(error=on_error(e)))
    else:
        channel.put_nowait(Success(value=value))


async def run_bounded(
    operation: Callable[[], Awaitable[T]],
    *,
    timeout: float,
    on_error: Callable[[Exception], RemoteCallError] = classify_failure,
) -> Result[T, RemoteCallError]:
    """Run ``operation`` off the calling coroutine, waiting at most ``timeout``.

    Args:
        operation: Zero-argument coroutine factory.
        timeout: Seconds to wait for the single result.
        on_error: Maps an exception raised by the operation to an error.

    Returns:
        Result[T, RemoteCallError]: Exactly one outcome, never raises for
        operation failures.
    """
    channel: asyncio.Queue[Result[T, RemoteCallError]] = asyncio.Queue(maxsize=1)
    task = asyncio.create_task(_produce(operation, channel, on_error))

    try:
        return await asyncio.wait_for(channel.get(), timeout=timeout)
    except TimeoutError:
        task.cancel()
        return Failure(
            error=RemoteConnectionError(
                code=ErrorCode.BACKEND_TIMEOUT,
                message="Backend connection failed",
                details={"timeout_seconds": str(timeout)},
            )
        )
    finally:
        if not task.done():
            task.cancel()
