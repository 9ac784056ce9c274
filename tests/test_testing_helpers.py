"""Tests for wormhole.testing — dispatch, call, TestClient, assertions."""

import pytest

from wormhole.routing.router import Router
from wormhole.testing import (
    TestClient,
    assert_fell_through,
    assert_handled,
    assert_params,
    call,
    dispatch,
)


async def show(ctx, next):
    return dict(ctx.params)


def _router() -> Router:
    return Router().get("/users/:uname/comments/:id", show).post("/users", show)


@pytest.mark.anyio
class TestDispatch:
    async def test_router_is_turned_into_unit(self) -> None:
        outcome = await dispatch(_router(), "GET", "/users/foo/comments/42")
        assert outcome.result == {"uname": "foo", "id": "42"}
        assert not outcome.fell_through

    async def test_plain_unit(self) -> None:
        async def unit(ctx, next):
            return "plain"

        assert (await dispatch(unit, "GET", "/")).result == "plain"

    async def test_fall_through(self) -> None:
        outcome = await dispatch(_router(), "GET", "/nowhere")
        assert outcome.fell_through
        assert outcome.result is None

    async def test_state_is_copied(self) -> None:
        async def unit(ctx, next):
            ctx.state["seen"] = True
            return ctx.state["user"]

        state = {"user": "foo"}
        outcome = await dispatch(unit, "GET", "/", state=state)
        assert outcome.result == "foo"
        assert state == {"user": "foo"}


@pytest.mark.anyio
class TestClientVerbs:
    async def test_get(self) -> None:
        client = TestClient(_router())
        assert (await client.get("/users/foo/comments/1")).params == {"uname": "foo", "id": "1"}

    async def test_post(self) -> None:
        client = TestClient(_router())
        assert_handled(await client.post("/users"))

    async def test_wrong_verb_falls_through(self) -> None:
        client = TestClient(_router())
        assert_fell_through(await client.delete("/users"))
        assert_fell_through(await client.put("/users"))
        assert_fell_through(await client.patch("/users"))

    async def test_request(self) -> None:
        client = TestClient(_router())
        assert_handled(await client.request("post", "/users"))


class TestCall:
    def test_sync_call(self) -> None:
        outcome = call(_router(), "GET", "/users/foo/comments/42")
        assert_params(outcome, {"uname": "foo", "id": "42"})


class TestAssertions:
    def test_assert_params_is_order_sensitive(self) -> None:
        outcome = call(_router(), "GET", "/users/foo/comments/42")
        with pytest.raises(AssertionError, match="Expected params"):
            assert_params(outcome, {"id": "42", "uname": "foo"})

    def test_assert_handled_fails_on_fall_through(self) -> None:
        outcome = call(_router(), "GET", "/nowhere")
        with pytest.raises(AssertionError, match="to be handled"):
            assert_handled(outcome)

    def test_assert_fell_through_fails_when_handled(self) -> None:
        outcome = call(_router(), "POST", "/users")
        with pytest.raises(AssertionError, match="to fall through"):
            assert_fell_through(outcome)
