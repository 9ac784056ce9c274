"""``wormhole routes`` — list registered routes.

Resolves an import string to a Router and prints every reachable route,
including those of mounted children, in match order.
"""

import argparse
import logging
import sys

from wormhole.cli._resolve import resolve_router
from wormhole.routing.methods import HTTP_METHODS
from wormhole.routing.route import Route

logger = logging.getLogger("wormhole.cli")


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATH / HANDLER table for ``args.router``."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    logger.debug("Resolved %r with %d routes", router, len(routes))
    if not routes:
        print("No routes registered.")
        return

    rows = [(_format_verbs(route), route.path, _format_handlers(route)) for route in routes]

    # Column widths
    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_methods + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for methods_str, path, handlers in rows:
        print(fmt.format(methods_str, path, handlers))


def _format_verbs(route: Route) -> str:
    if route.verbs >= frozenset(HTTP_METHODS):
        return "ALL"
    return ", ".join(sorted(verb.upper() for verb in route.verbs))


def _format_handlers(route: Route) -> str:
    return " -> ".join(getattr(h, "__name__", type(h).__name__) for h in route.handlers)
