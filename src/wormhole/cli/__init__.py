"""Wormhole CLI — route table introspection.

Entry point registered as ``wormhole`` in ``pyproject.toml``::

    [project.scripts]
    wormhole = "wormhole.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wormhole`` command."""
    parser = argparse.ArgumentParser(
        prog="wormhole",
        description="Wormhole — a mountable request router and middleware composer.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wormhole routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    routes_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log routing decisions while resolving",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wormhole.cli._routes import run_routes

        run_routes(args)
