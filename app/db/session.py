from fastapi import Request

from app.core.config import settings
from app.db.init_db import default_channels
from app.db.repository import JsonFileChannelRepository
from app.services.channel_store import ChannelStore


def create_store() -> ChannelStore:
    """Load the channel store from the configured data file."""

    repository = JsonFileChannelRepository(settings.data_file, defaults=default_channels)
    return ChannelStore.load(repository)


def get_channel_store(request: Request) -> ChannelStore:
    """FastAPI dependency that returns the app-owned channel store."""

    return request.app.state.channel_store
