"""Test client for routers and middleware units.

Drives a unit with a synthetic ``Context`` and a terminal continuation
that records whether the request fell all the way through. No server,
no HTTP.
"""

from dataclasses import dataclass
from functools import partial
from typing import Any

import anyio

from wormhole._internal.invoke import invoke
from wormhole._internal.types import Handler
from wormhole.context import Context
from wormhole.routing.router import Router


@dataclass(frozen=True, slots=True)
class Dispatched:
    """What happened to one request.

    ``fell_through`` is True when the terminal continuation ran, i.e. no
    unit short-circuited. A host would typically answer 404 here.
    """

    context: Context
    result: Any
    fell_through: bool

    @property
    def params(self) -> dict[str, str]:
        return self.context.params


async def dispatch(
    unit: Handler | Router,
    method: str,
    path: str,
    *,
    query: str = "",
    state: dict[str, Any] | None = None,
) -> Dispatched:
    """Run *unit* for one request and report the outcome.

    A ``Router`` is turned into its unit with ``middleware()``.
    """
    if isinstance(unit, Router):
        unit = unit.middleware()

    ctx = Context(method, path, query=query, state=dict(state or {}))
    reached = False

    async def fall_through(ctx: Context) -> None:
        nonlocal reached
        reached = True

    result = await invoke(unit, ctx, fall_through)
    return Dispatched(context=ctx, result=result, fell_through=reached)


def call(unit: Handler | Router, method: str, path: str, **kwargs: Any) -> Dispatched:
    """Synchronous ``dispatch`` for tests that don't run an event loop."""
    return anyio.run(partial(dispatch, unit, method, path, **kwargs))


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client bound to one router or unit.

    Usage::

        client = TestClient(router)
        outcome = await client.get("/users/42")
        assert outcome.params == {"id": "42"}
    """

    __slots__ = ("unit",)

    def __init__(self, unit: Handler | Router) -> None:
        self.unit = unit.middleware() if isinstance(unit, Router) else unit

    async def request(self, method: str, path: str, **kwargs: Any) -> Dispatched:
        return await dispatch(self.unit, method, path, **kwargs)

    async def get(self, path: str, **kwargs: Any) -> Dispatched:
        """Send a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Dispatched:
        """Send a POST request."""
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Dispatched:
        """Send a PUT request."""
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Dispatched:
        """Send a PATCH request."""
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Dispatched:
        """Send a DELETE request."""
        return await self.request("DELETE", path, **kwargs)
