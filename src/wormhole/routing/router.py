"""Router — an ordered stack of routes and middleware, mountable into other routers.

A router keeps two lists:

- ``stack``: what runs, in registration order. Each entry is a ``Route``,
  an opaque middleware unit, or a ``RouterMiddleware`` handle for a
  mounted child.
- ``routes``: every route reachable through this router, including those
  of mounted children, transitively. Only used to decide whether the
  router matches a request at all.

A request enters the router's unit, the first matching route in
``routes`` sets ``ctx.params``, and the whole stack runs. If nothing
matches, the router calls ``next`` and is otherwise invisible.
"""

from __future__ import annotations

import logging
from typing import Any, TypeAlias

from wormhole._internal.invoke import invoke
from wormhole._internal.types import Handler, ParamHook
from wormhole.config import RouterConfig
from wormhole.context import RequestContext
from wormhole.errors import InvalidRouteError
from wormhole.middleware.compose import compose
from wormhole.middleware.protocol import Next
from wormhole.routing.methods import HTTP_METHODS
from wormhole.routing.pattern import join_paths
from wormhole.routing.route import Route

logger = logging.getLogger("wormhole.routing")

StackEntry: TypeAlias = "Route | RouterMiddleware | Handler"


class RouterMiddleware:
    """The unit a router hands to its host, tagged with the router itself.

    ``Router.use`` recognizes this type and mounts ``router`` instead of
    treating the handle as opaque middleware.
    """

    __slots__ = ("_chain", "router")

    def __init__(self, router: Router, chain: Handler) -> None:
        self.router = router
        self._chain = chain

    async def __call__(self, ctx: RequestContext, next: Next) -> Any:
        route = self.router.find(ctx.method, ctx.path)
        if route is None:
            logger.debug("%s %s skipped %r", ctx.method, ctx.path, self.router)
            return await next(ctx)

        ctx.params = route.parse_params(ctx.path)
        logger.debug("%s %s matched %r params=%r", ctx.method, ctx.path, route, ctx.params)
        return await self._chain(ctx, next)

    def __repr__(self) -> str:
        return f"<RouterMiddleware {self.router!r}>"


class Router:
    """An ordered collection of routes and middleware.

    Mutable during setup, read-only while serving requests.

    Usage::

        users = Router()
        users.get("/:uname", show_user)

        api = Router().prefix("/api")
        api.use(log_request)
        api.use(users.middleware())

        unit = api.middleware()
        await unit(ctx, next)
    """

    __slots__ = ("_prefix", "_routes", "_stack", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config if config is not None else RouterConfig()
        self._prefix = self.config.prefix
        self._stack: list[StackEntry] = []
        self._routes: list[Route] = []

    # -- Introspection --

    @property
    def current_prefix(self) -> str:
        """The prefix the next registered route or mounted child gets."""
        return self._prefix

    @property
    def routes(self) -> tuple[Route, ...]:
        """Every route reachable through this router, in match order."""
        return tuple(self._routes)

    @property
    def stack(self) -> tuple[StackEntry, ...]:
        return tuple(self._stack)

    def find(self, method: str, path: str) -> Route | None:
        """Return the first reachable route matching *method* and *path*."""
        for route in self._routes:
            if route.matches(method, path):
                return route
        return None

    # -- Registration --

    def register(self, template: str, verbs: list[str], handlers: list[Handler]) -> Router:
        """Register a handler chain for *verbs* under *template*.

        The route captures the router's current prefix. Later ``prefix()``
        calls don't affect it.
        """
        if not isinstance(verbs, (list, tuple)):
            msg = f"verbs must be a list of strings, got {type(verbs).__name__}"
            raise InvalidRouteError(msg)
        if not isinstance(handlers, (list, tuple)):
            msg = f"handlers must be a list of callables, got {type(handlers).__name__}"
            raise InvalidRouteError(msg)

        route = Route(self._prefix, template, verbs, handlers, self.config.match_options)
        self._stack.append(route)
        self._routes.append(route)
        logger.debug("Registered %r", route)
        return self

    def get(self, *args: Any) -> Router:
        return self._register_verbs(("get",), args)

    def post(self, *args: Any) -> Router:
        return self._register_verbs(("post",), args)

    def put(self, *args: Any) -> Router:
        return self._register_verbs(("put",), args)

    def patch(self, *args: Any) -> Router:
        return self._register_verbs(("patch",), args)

    def delete(self, *args: Any) -> Router:
        return self._register_verbs(("delete",), args)

    def head(self, *args: Any) -> Router:
        return self._register_verbs(("head",), args)

    def options(self, *args: Any) -> Router:
        return self._register_verbs(("options",), args)

    def trace(self, *args: Any) -> Router:
        return self._register_verbs(("trace",), args)

    def connect(self, *args: Any) -> Router:
        return self._register_verbs(("connect",), args)

    def all(self, *args: Any) -> Router:
        """Register a handler chain for every verb in ``HTTP_METHODS``."""
        return self._register_verbs(HTTP_METHODS, args)

    def _register_verbs(self, verbs: tuple[str, ...], args: tuple[Any, ...]) -> Router:
        # get(handler, ...) registers against the router's own prefix
        if args and isinstance(args[0], str):
            template, handlers = args[0], args[1:]
        else:
            template, handlers = "/", args
        return self.register(template, list(verbs), _flatten(handlers))

    def use(self, *entries: Any) -> Router:
        """Append middleware, or mount routers.

        A ``RouterMiddleware`` (what ``Router.middleware()`` returns) or a
        ``Router`` is mounted. Anything else is appended as-is.
        """
        for entry in entries:
            if isinstance(entry, RouterMiddleware):
                self.mount(entry.router)
            elif isinstance(entry, Router):
                self.mount(entry)
            elif callable(entry):
                self._stack.append(entry)
            else:
                msg = f"Middleware must be callable, got {type(entry).__name__}"
                raise InvalidRouteError(msg)
        return self

    def prefix(self, prefix: str) -> Router:
        """Set the prefix for routes and children registered from now on."""
        if not isinstance(prefix, str):
            msg = f"prefix must be a string, got {type(prefix).__name__}"
            raise InvalidRouteError(msg)
        self._prefix = prefix
        return self

    def param(self, name: str, hook: ParamHook) -> Router:
        """Run *hook* whenever the matched params contain *name*.

        The hook is called as ``hook(ctx, value, next)`` and decides whether
        to continue. It sits in the stack like any other middleware: a
        route registered earlier that doesn't call ``next`` keeps it from
        ever running.
        """
        if not isinstance(name, str):
            msg = f"param name must be a string, got {type(name).__name__}"
            raise InvalidRouteError(msg)
        if not callable(hook):
            msg = f"param hook for {name!r} must be callable"
            raise InvalidRouteError(msg)

        async def param_middleware(ctx: RequestContext, next: Next) -> Any:
            params = getattr(ctx, "params", None) or {}
            if name not in params:
                return await next(ctx)
            return await invoke(hook, ctx, params[name], next)

        self._stack.append(param_middleware)
        return self

    # -- Composition --

    def mount(self, child: Router) -> Router:
        """Mount a prefix-adjusted copy of *child* under the current prefix.

        *child* itself is never modified, so it can be mounted elsewhere
        or used directly as well.
        """
        adjusted = child.clone().mount_to(self._prefix)
        self._stack.append(adjusted.middleware())
        self._routes.extend(adjusted._routes)
        logger.debug("Mounted %r at %r", child, self._prefix or "/")
        return self

    def mount_to(self, prefix: str) -> Router:
        """Move this router and everything reachable from it under *prefix*.

        Mutates in place. Only ``mount`` calls this, on a fresh clone.
        """
        for route in self._routes:
            route.mount_to(prefix)
        self._shift_prefix(prefix)
        return self

    def _shift_prefix(self, prefix: str) -> None:
        # Routes are shared with the parent's list and were already moved
        self._prefix = join_paths(prefix, self._prefix)
        for entry in self._stack:
            if isinstance(entry, RouterMiddleware):
                entry.router._shift_prefix(prefix)

    def clone(self) -> Router:
        """Return a structural copy safe to mount somewhere else.

        Routes are cloned once each, so the copy's stack and route list
        keep pointing at the same objects. Mounted children are cloned
        along with them. Opaque middleware is shared.
        """
        return self._clone({})

    def _clone(self, memo: dict[int, Route]) -> Router:
        copy = Router(self.config)
        copy._prefix = self._prefix
        for entry in self._stack:
            if isinstance(entry, Route):
                copy._stack.append(_clone_route(entry, memo))
            elif isinstance(entry, RouterMiddleware):
                copy._stack.append(entry.router._clone(memo).middleware())
            else:
                copy._stack.append(entry)
        copy._routes = [_clone_route(route, memo) for route in self._routes]
        return copy

    def middleware(self) -> RouterMiddleware:
        """Compose the current stack into a single unit.

        The stack is snapshotted now; the route list used for matching is
        read live.
        """
        units = [entry.middleware() if isinstance(entry, Route) else entry for entry in self._stack]
        return RouterMiddleware(self, compose(units))

    def __repr__(self) -> str:
        return f"<Router prefix={self._prefix!r} routes={len(self._routes)}>"


def _verb_method(verb: str) -> Any:
    def register_verb(self: Router, *args: Any) -> Router:
        return self._register_verbs((verb,), args)

    register_verb.__name__ = verb.replace("-", "_")
    register_verb.__qualname__ = f"Router.{register_verb.__name__}"
    register_verb.__doc__ = f"Register a handler chain for {verb.upper()}."
    return register_verb


# get, post and friends are spelled out on the class; every other verb
# ("m-search" as m_search) gets a generated method
for _verb in HTTP_METHODS:
    if not hasattr(Router, _verb.replace("-", "_")):
        setattr(Router, _verb.replace("-", "_"), _verb_method(_verb))


def _clone_route(route: Route, memo: dict[int, Route]) -> Route:
    key = id(route)
    if key not in memo:
        memo[key] = route.clone()
    return memo[key]


def _flatten(handlers: tuple[Any, ...]) -> list[Handler]:
    flat: list[Handler] = []
    for handler in handlers:
        if isinstance(handler, (list, tuple)):
            flat.extend(handler)
        else:
            flat.append(handler)
    return flat
