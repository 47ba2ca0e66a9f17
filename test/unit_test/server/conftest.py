from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


@pytest.fixture
def app() -> FastAPI:
    """A freshly built application with default settings."""
    from restservice.server.core.config import Settings
    from restservice.server.main import create_app

    return create_app(Settings())


@pytest_asyncio.fixture(name="client")
async def client_fixture(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client talking to the application in-process.

    ASGITransport does not run the lifespan, so no startup logging happens here.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
