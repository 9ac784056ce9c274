"""Request context — the per-request object routing reads and writes.

The router only ever touches three attributes:

- ``method`` and ``path`` are read to decide whether a route matches.
- ``params`` is written before a matched stack runs, and read by param
  hooks.

Any object with those attributes works (see ``RequestContext``). The
concrete ``Context`` dataclass is what ``wormhole.testing`` builds and is
a reasonable default for hosts that don't bring their own.

Thread safety:
    A context belongs to exactly one request. Routers and routes never
    store per-request state, so no locks are needed.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol


class RequestContext(Protocol):
    """Structural protocol for objects the router can dispatch."""

    method: str
    path: str
    params: dict[str, str]


@dataclass(slots=True)
class Context:
    """A mutable, request-scoped context.

    ``path`` is already normalized and carries no query string. ``query``
    is kept verbatim; routing never parses or rewrites it.

    Usage::

        ctx = Context("GET", "/users/42", query="page=2")
        await unit(ctx, next)
        ctx.params  # {"id": "42"}
    """

    method: str
    path: str
    query: str = ""
    params: dict[str, str] = field(default_factory=dict)
    state: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"<Context {self.method} {self.path!r} params={self.params!r}>"
