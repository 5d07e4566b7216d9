from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .config import GREETING, VERSION

# No docs or schema routes: only the two paths below are served.
app = FastAPI(title="helloserver", version=VERSION, docs_url=None, redoc_url=None, openapi_url=None)


class TextHandler:
    """ASGI endpoint answering every request with a fixed ``text/plain`` body.

    Registered as a raw ASGI app so the router places no restriction on the
    request method; the request itself is never read.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    async def __call__(self, scope, receive, send) -> None:
        await PlainTextResponse(self.text)(scope, receive, send)


# === Greeting & version ===

root = TextHandler(GREETING)
version = TextHandler(VERSION)

app.router.add_route("/", root)
app.router.add_route("/version", version)
