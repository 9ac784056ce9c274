"""Custom Middleware — function and class middleware examples.

Demonstrates:
- Function middleware (timing — records elapsed time on the way out)
- Class middleware (token check — short-circuits without calling next)
- Route-level middleware chains that share ctx.state

Run:
    cd examples/custom_middleware && python app.py
"""

import time
from typing import Any

from wormhole import Router
from wormhole.middleware.protocol import Next
from wormhole.testing import call

router = Router()


# ---------------------------------------------------------------------------
# Function middleware — timing
# ---------------------------------------------------------------------------


async def timing(ctx, next: Next) -> Any:
    """Record how long the rest of the chain took."""
    start = time.monotonic()
    result = await next(ctx)
    ctx.state["elapsed"] = time.monotonic() - start
    return result


# ---------------------------------------------------------------------------
# Class middleware — token check
# ---------------------------------------------------------------------------


class RequireToken:
    """Stop the chain unless the request carries the expected token."""

    def __init__(self, token: str) -> None:
        self.token = token

    async def __call__(self, ctx, next: Next) -> Any:
        if ctx.state.get("token") != self.token:
            return "denied"
        return await next(ctx)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


def load_user(ctx, next: Next) -> Any:
    # Sync middleware: hand back the continuation for the chain to await
    ctx.state["user"] = ctx.params["uname"]
    return next(ctx)


async def profile(ctx, next: Next) -> str:
    return f"profile of {ctx.state['user']}"


async def secret(ctx, next: Next) -> str:
    return "the secret"


router.use(timing)
router.get("/users/:uname", load_user, profile)
router.get("/secret", RequireToken("s3cr3t"), secret)


if __name__ == "__main__":
    print(call(router, "GET", "/users/ada").result)
    print(call(router, "GET", "/secret").result)
    print(call(router, "GET", "/secret", state={"token": "s3cr3t"}).result)
