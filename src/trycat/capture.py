from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

from .result import Result, err, ok

logger = logging.getLogger(__name__)

T = TypeVar("T")


def trys(fn: Callable[[], T]) -> Result[T, Exception]:
    """Call ``fn`` and wrap its return value in ``Ok`` or its exception in ``Err``.

    Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
    ``SystemExit`` and other ``BaseException`` subclasses propagate.
    """
    try:
        value: T = fn()
    except Exception as exc:
        logger.debug("trys captured %r from %r", exc, fn)
        return err(exc)
    return ok(value)


async def tryp(awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await ``awaitable`` and wrap its outcome in ``Ok`` or ``Err``.

    Accepts coroutines, futures, tasks and any other awaitable. The returned
    coroutine does not raise for ``Exception`` subclasses;
    ``asyncio.CancelledError`` still propagates to the caller.
    """
    try:
        value: T = await awaitable
    except Exception as exc:
        logger.debug("tryp captured %r from %r", exc, awaitable)
        return err(exc)
    return ok(value)
