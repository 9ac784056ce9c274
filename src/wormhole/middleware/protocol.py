"""Middleware protocol and Next type alias.

A middleware unit is any callable matching::

    async def my_mw(ctx: RequestContext, next: Next) -> Any: ...

No base class required. The framework checks the shape, not the lineage.

Code before ``await next(ctx)`` runs on the way in, code after it runs on
the way out. A unit that returns without calling ``next`` short-circuits
everything downstream.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeAlias

from wormhole.context import RequestContext

# The continuation: everything downstream still to run for this request
Next: TypeAlias = Callable[[RequestContext], Awaitable[Any]]


class Middleware(Protocol):
    """Protocol for wormhole middleware units.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(ctx, next):
            start = time.monotonic()
            result = await next(ctx)
            ctx.state["elapsed"] = time.monotonic() - start
            return result

        # Class middleware
        class RequireUser:
            async def __call__(self, ctx, next):
                if "user" not in ctx.state:
                    return "denied"
                return await next(ctx)
    """

    async def __call__(self, ctx: RequestContext, next: Next) -> Any: ...
