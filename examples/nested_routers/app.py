"""Nested Routers — prefixes, mounting, and param hooks.

Demonstrates:
- A child router mounted under a parameterized parent prefix
- The same child router mounted under two different parents
- A param hook that loads a record whenever ":uname" is in the path

Run:
    cd examples/nested_routers && python app.py
"""

from wormhole import Router
from wormhole.testing import call

USERS = {"ada": "Ada Lovelace", "alan": "Alan Turing"}


# -- Child: comments on anything --

comments = Router()


async def show_comment(ctx, next):
    return {"params": dict(ctx.params), "user": ctx.state.get("user")}


comments.get("/comments/:cid", show_comment)


# -- Users: a param hook, then routes --

users = Router()


async def load_user(ctx, uname, next):
    if uname not in USERS:
        return "no such user"
    ctx.state["user"] = USERS[uname]
    return await next(ctx)


async def show_user(ctx, next):
    return ctx.state["user"]


users.param("uname", load_user)
users.get("/users/:uname", show_user)
users.prefix("/users/:uname").use(comments.middleware())


# -- Top level --

router = Router().prefix("/api")
router.use(users)
router.prefix("/api/posts/:pid").use(comments)


if __name__ == "__main__":
    paths = (
        "/api/users/ada",
        "/api/users/bob",
        "/api/users/ada/comments/7",
        "/api/posts/3/comments/9",
    )
    for path in paths:
        print(f"GET {path} -> {call(router, 'GET', path).result!r}")
