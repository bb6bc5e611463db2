from typing import Iterable

from fastapi.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class RouteOptionsCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that leaves OPTIONS on selected paths to their own routes.

    Those routes answer every OPTIONS request, browser preflights included,
    with an empty 200 and fixed CORS headers.
    """

    def __init__(self, app: ASGIApp, options_paths: Iterable[str] = (), **kwargs):
        super().__init__(app, **kwargs)
        self.options_paths = frozenset(options_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "OPTIONS" and scope["path"] in self.options_paths:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
