"""Shared pytest configuration for wormhole tests."""

import pytest


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
