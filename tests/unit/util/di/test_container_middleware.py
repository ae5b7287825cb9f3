"""Tests for the per-request container middleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from bloglist.util.di.fastapi import ContainerMiddleware, setup_dishka


class TestContainerMiddleware:
    @pytest.mark.asyncio
    async def test_lifespan_passes_through_without_container(self):
        app = AsyncMock()
        middleware = ContainerMiddleware(app)
        scope = {"type": "lifespan"}
        receive, send = AsyncMock(), AsyncMock()

        await middleware(scope, receive, send)

        app.assert_awaited_once_with(scope, receive, send)

    @pytest.mark.asyncio
    async def test_websocket_is_not_given_a_container(self):
        app = AsyncMock()
        middleware = ContainerMiddleware(app)
        scope = {"type": "websocket", "app": MagicMock()}

        await middleware(scope, AsyncMock(), AsyncMock())

        scope["app"].state.dishka_container.assert_not_called()
        app.assert_awaited_once()


def test_setup_dishka_stores_container():
    app = MagicMock()
    container = MagicMock()

    setup_dishka(container, app)

    assert app.state.dishka_container is container
    app.add_middleware.assert_called_once_with(ContainerMiddleware)
