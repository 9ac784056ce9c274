"""Wormhole — a mountable request router and middleware composer.

Decides which handler chains run for a request's method and path,
extracts path parameters, and runs the matched chain with explicit
``next`` continuations.

Basic usage::

    from wormhole import Router

    router = Router()

    async def show_user(ctx, next):
        return f"user {ctx.params['uname']}"

    router.get("/users/:uname", show_user)

    unit = router.middleware()
    result = await unit(ctx, next)

Nesting::

    api = Router().prefix("/api")
    api.use(router.middleware())   # routes now live under /api/users/...
"""

__version__ = "0.1.0"
__all__ = [
    "ChainError",
    "ConfigurationError",
    "Context",
    "HTTP_METHODS",
    "InvalidRouteError",
    "MatchOptions",
    "Middleware",
    "Next",
    "PathMatcher",
    "PatternCompileError",
    "RequestContext",
    "Route",
    "Router",
    "RouterConfig",
    "RouterMiddleware",
    "WormholeError",
    "compile_pattern",
    "compose",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wormhole`` fast while providing a clean top-level API.
    """
    if name in ("Router", "RouterMiddleware"):
        from wormhole.routing import router as _router

        return getattr(_router, name)

    if name == "Route":
        from wormhole.routing.route import Route

        return Route

    if name in ("MatchOptions", "PathMatcher", "compile_pattern"):
        from wormhole.routing import pattern as _pattern

        return getattr(_pattern, name)

    if name == "HTTP_METHODS":
        from wormhole.routing.methods import HTTP_METHODS

        return HTTP_METHODS

    if name == "RouterConfig":
        from wormhole.config import RouterConfig

        return RouterConfig

    if name in ("Context", "RequestContext"):
        from wormhole import context as _ctx

        return getattr(_ctx, name)

    if name in ("Middleware", "Next", "compose"):
        from wormhole import middleware as _mw

        return getattr(_mw, name)

    if name in (
        "ChainError",
        "ConfigurationError",
        "InvalidRouteError",
        "PatternCompileError",
        "WormholeError",
    ):
        from wormhole import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
