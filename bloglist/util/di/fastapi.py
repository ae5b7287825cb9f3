"""Per-request dishka container for the bloglist FastAPI app."""

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from dishka import AsyncContainer

from bloglist.util.di.scope import Scope as BloglistScope


class ContainerMiddleware:
    """Opens a Scope.UOW container around each HTTP request.

    The request container lives on `request.state.dishka_container`, where
    DishkaRoute looks it up. Closing it commits the request's session.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request = Request(scope, receive=receive, send=send)
        async with request.app.state.dishka_container(
            {Request: request},
            scope=BloglistScope.UOW,
        ) as request_container:
            request.state.dishka_container = request_container
            return await self.app(scope, receive, send)


def setup_dishka(container: AsyncContainer, app) -> None:
    """Attach the app-scoped container and the per-request middleware."""
    app.add_middleware(ContainerMiddleware)
    app.state.dishka_container = container
