"""Hello World — the smallest wormhole router.

One GET route on "/". Every other request falls through untouched.

Run:
    cd examples/hello && python app.py
"""

from wormhole import Router
from wormhole.testing import call

router = Router()


async def index(ctx, next):
    return "ok"


async def greet(ctx, next):
    return f"Hello, {ctx.params['name']}!"


router.get("/", index)
router.get("/hello/:name", greet)


if __name__ == "__main__":
    for path in ("/", "/hello/world", "/other"):
        outcome = call(router, "GET", path)
        status = "fell through" if outcome.fell_through else repr(outcome.result)
        print(f"GET {path} -> {status}")
