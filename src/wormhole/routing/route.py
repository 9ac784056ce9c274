"""Route — one verb set + path template + handler chain binding."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from wormhole._internal.types import Handler
from wormhole.context import RequestContext
from wormhole.errors import InvalidRouteError
from wormhole.middleware.compose import compose
from wormhole.middleware.protocol import Next
from wormhole.routing.pattern import MatchOptions, PathMatcher, compile_pattern, join_paths


class Route:
    """A path template bound to a set of verbs and a handler chain.

    The matcher is always compiled from ``join_paths(prefix, template)``.
    ``prefix`` only changes through ``mount_to``, which recompiles. Callers
    that must keep the original call ``clone()`` first.

    Usage::

        route = Route("/api", "/users/:id", ["GET"], [show_user])
        route.matches("get", "/api/users/42")   # True
        route.parse_params("/api/users/42")      # {"id": "42"}
    """

    __slots__ = ("handlers", "matcher", "options", "prefix", "template", "verbs")

    def __init__(
        self,
        prefix: str,
        template: str,
        verbs: Iterable[str],
        handlers: Iterable[Handler],
        options: MatchOptions | None = None,
    ) -> None:
        if not isinstance(template, str):
            msg = f"Route template must be a string, got {type(template).__name__}"
            raise InvalidRouteError(msg)
        if isinstance(verbs, str):
            msg = f"Route verbs must be a collection of strings, got {verbs!r}"
            raise InvalidRouteError(msg)
        verbs = tuple(verbs)
        if not verbs:
            msg = f"Route {template!r} needs at least one verb"
            raise InvalidRouteError(msg)
        for verb in verbs:
            if not isinstance(verb, str):
                msg = f"Route verbs must be strings, got {verb!r}"
                raise InvalidRouteError(msg)
        handlers = tuple(handlers)
        if not handlers:
            msg = f"Route {template!r} needs at least one handler"
            raise InvalidRouteError(msg)
        for handler in handlers:
            if not callable(handler):
                msg = f"Route {template!r} handlers must be callable, got {handler!r}"
                raise InvalidRouteError(msg)

        self.prefix = prefix
        self.template = template
        self.verbs = frozenset(verb.lower() for verb in verbs)
        self.handlers = handlers
        self.options = options if options is not None else MatchOptions()
        self.matcher: PathMatcher
        self.compile()

    @property
    def path(self) -> str:
        """The resolved path this route matches (prefix + template)."""
        return join_paths(self.prefix, self.template)

    def compile(self) -> Route:
        """Recompile the matcher from the current prefix and template."""
        self.matcher = compile_pattern(self.path, self.options)
        return self

    def clone(self) -> Route:
        """Return an independent copy. Handlers are shared, not copied."""
        return Route(self.prefix, self.template, self.verbs, self.handlers, self.options)

    def mount_to(self, prefix: str) -> Route:
        """Put this route under *prefix*. Mutates in place."""
        self.prefix = join_paths(prefix, self.prefix)
        return self.compile()

    def matches(self, method: str, path: str) -> bool:
        if method.lower() not in self.verbs:
            return False
        return self.matcher.matches(path)

    def parse_params(self, path: str) -> dict[str, str]:
        """Map parameter names to captured values, in template order.

        Call only after ``matches`` returned True for this path. Optional
        parameters that did not participate are left out. A name captured
        twice, say ``:id`` in both a mount prefix and the template, keeps
        the later value.
        """
        return {name: value for name, value in self.matcher.extract(path) if value is not None}

    def middleware(self) -> Handler:
        """Wrap the handler chain so it only runs when this route matches."""
        chain = compose(self.handlers)

        async def route_middleware(ctx: RequestContext, next: Next) -> Any:
            if not self.matches(ctx.method, ctx.path):
                return await next(ctx)
            return await chain(ctx, next)

        return route_middleware

    def __repr__(self) -> str:
        verbs = ",".join(sorted(self.verbs))
        return f"<Route {verbs} {self.path!r}>"
