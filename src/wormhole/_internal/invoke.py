"""Invoke helpers — call sync or async units uniformly.

Middleware units, route handlers and param hooks can be ``def`` or
``async def``. Any code that calls a user-provided callable must handle
both cases. This module provides a single helper so the sync/async check
lives in exactly one place.

Usage::

    from wormhole._internal.invoke import invoke

    result = await invoke(unit, ctx, next)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    A sync unit may hand back ``next(ctx)`` unawaited; the coroutine it
    returns is awaited here::

        def tag(ctx, next):
            ctx.state["tagged"] = True
            return next(ctx)
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
