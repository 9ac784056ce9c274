"""Middleware — Protocol-based, no inheritance required.

A middleware unit is any callable matching:
    async def mw(ctx: RequestContext, next: Next) -> Any

compose -- fold an ordered list of units into one unit
"""

from wormhole.middleware.compose import compose
from wormhole.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "Next",
    "compose",
]
