"""Router import resolution — resolves ``"module:attribute"`` strings to Routers.

Used by ``wormhole routes`` to locate a Router from a user-supplied
import string.
"""

import importlib

from wormhole.routing.router import Router, RouterMiddleware


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a wormhole Router.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"router"`` (e.g. ``"myapp"`` resolves to
    ``myapp.router``).

    A ``RouterMiddleware`` resolves to the router it was built from. Any
    other callable is treated as a factory and called once.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Router.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if isinstance(obj, RouterMiddleware):
        obj = obj.router
    elif callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Router):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a wormhole.Router"
        raise TypeError(msg)

    return obj
