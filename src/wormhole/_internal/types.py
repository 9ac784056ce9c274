"""Shared type aliases used across wormhole modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler or opaque middleware — (ctx, next) -> result, sync or async
Handler: TypeAlias = Callable[..., Any]

# Param hook — (ctx, value, next) -> result, sync or async
ParamHook: TypeAlias = Callable[..., Any]
