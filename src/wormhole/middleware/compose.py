"""Chain executor — fold an ordered list of units into one unit.

``compose([a, b, c])`` returns a unit that runs ``a``, whose ``next``
runs ``b``, whose ``next`` runs ``c``, whose ``next`` is the continuation
handed to the composed unit. Composing an empty sequence yields a unit
that simply calls its continuation.
"""

from collections.abc import Iterable
from typing import Any

from wormhole._internal.invoke import invoke
from wormhole._internal.types import Handler
from wormhole.context import RequestContext
from wormhole.errors import ChainError
from wormhole.middleware.protocol import Next


def compose(units: Iterable[Handler]) -> Handler:
    """Compose *units* into a single ``(ctx, next)`` unit.

    Each unit may call its ``next`` at most once; a second call raises
    ``ChainError``. Errors raised by units propagate unchanged.
    """
    chain = tuple(units)
    for unit in chain:
        if not callable(unit):
            msg = f"Middleware must be callable, got {type(unit).__name__}"
            raise TypeError(msg)

    async def composed(ctx: RequestContext, next: Next) -> Any:
        index = -1

        async def dispatch(i: int, ctx: RequestContext) -> Any:
            nonlocal index
            if i <= index:
                msg = "next() called multiple times"
                raise ChainError(msg)
            index = i
            if i == len(chain):
                return await invoke(next, ctx)

            async def step(ctx: RequestContext) -> Any:
                return await dispatch(i + 1, ctx)

            return await invoke(chain[i], ctx, step)

        return await dispatch(0, ctx)

    return composed
