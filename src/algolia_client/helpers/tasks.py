"""Polling of asynchronous server-side tasks.

Indexing calls return as soon as the operation is queued. The task poller
checks the task status on a fixed interval until it is published.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable

from algolia_client.exceptions import TaskTimeoutError
from algolia_client.models.search import TaskStatus

logger = logging.getLogger(__name__)


async def wait_for_task(
    get_task: Callable[[int], Awaitable[TaskStatus]],
    task_id: int,
    interval: float,
    max_retries: int | None = None,
    timeout: float | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> TaskStatus:
    """Poll a task until the server reports it as published.

    Args:
        get_task: Coroutine function fetching the status of a task.
        task_id: The task to wait for.
        interval: Seconds to sleep between two polls.
        max_retries: Maximum number of polls, unlimited when None.
        timeout: Maximum seconds to wait, unlimited when None.
        sleep: Sleep coroutine, injectable for tests.

    Returns:
        The last (published) task status.

    Raises:
        ValueError: If task_id is empty.
        TaskTimeoutError: If max_retries or timeout is exceeded.
    """
    if not task_id:
        raise ValueError("taskID cannot be empty")

    started = time.monotonic()
    attempts = 0
    while True:
        task = await get_task(task_id)
        attempts += 1
        if task.is_published:
            logger.debug("Task %s published after %d polls", task_id, attempts)
            return task

        if max_retries is not None and attempts >= max_retries:
            raise TaskTimeoutError(task_id, attempts)
        if timeout is not None and time.monotonic() - started >= timeout:
            raise TaskTimeoutError(task_id, attempts)

        await sleep(interval)
