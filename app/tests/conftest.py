from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from app.db.init_db import default_channels
from app.db.repository import MemoryChannelRepository
from app.main import create_app
from app.services.channel_store import ChannelStore


@pytest.fixture
def repository() -> MemoryChannelRepository:
    return MemoryChannelRepository(default_channels())


@pytest.fixture
def store(repository: MemoryChannelRepository) -> ChannelStore:
    return ChannelStore.load(repository)


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<!doctype html><title>Channel Directory</title>", encoding="utf-8")
    (public / "app.js").write_text("console.log('directory');", encoding="utf-8")
    return public


@pytest.fixture
def app(store: ChannelStore, static_dir: Path) -> FastAPI:
    return create_app(store, static_dir=static_dir)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
