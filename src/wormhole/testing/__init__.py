"""Test utilities for wormhole routers.

Provides a test client, a one-shot dispatcher, and outcome assertions::

    from wormhole.testing import TestClient, assert_params
"""

from wormhole.testing.assertions import assert_fell_through, assert_handled, assert_params
from wormhole.testing.client import Dispatched, TestClient, call, dispatch

__all__ = [
    "Dispatched",
    "TestClient",
    "assert_fell_through",
    "assert_handled",
    "assert_params",
    "call",
    "dispatch",
]
