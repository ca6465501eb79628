import asyncio
from typing import Awaitable, TypeVar

import structlog

from src.exceptions.language_model import RequestTimeoutError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


async def run_with_deadline(call: Awaitable[T], deadline: float, operation: str = "request") -> T:
    """
    Race an external call against a deadline timer.

    The call is scheduled as its own task and the caller waits for whichever
    finishes first: the task or the timer. When the timer wins the task is
    cancelled and its eventual outcome is never read.

    Args:
        call: Awaitable performing the external request
        deadline: Seconds to wait before giving up
        operation: Name used in log events

    Returns:
        The call's result

    Raises:
        RequestTimeoutError: If the deadline elapses first
        Exception: Whatever the call itself raised, if it finished in time
    """
    task = asyncio.ensure_future(call)

    try:
        done, _ = await asyncio.wait({task}, timeout=deadline)
    except asyncio.CancelledError:
        task.cancel()
        raise

    if task not in done:
        task.cancel()
        logger.warning("Deadline elapsed before call completed", operation=operation, deadline_seconds=deadline)
        raise RequestTimeoutError("request timed out")

    return task.result()
