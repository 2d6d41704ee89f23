"""API endpoints for browsing and registering directory channels."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from app.db.models import Channel
from app.db.session import get_channel_store
from app.schema.channel import (
    ChannelCheckResponse,
    ChannelCreateRequest,
    ChannelResponse,
    MessageResponse,
)
from app.services.channel_store import ChannelStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["channels"])


def _to_response(channel: Channel) -> ChannelResponse:
    return ChannelResponse(
        id=channel.id,
        name=channel.name,
        url=channel.url,
        category=channel.category,
        official=channel.official,
        created_at=channel.created_at,
    )


@router.get(
    "/check/{username}",
    response_model=ChannelCheckResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
)
async def check_channel(username: str, store: ChannelStore = Depends(get_channel_store)) -> ChannelCheckResponse:
    channel = store.get_by_handle(username)
    return ChannelCheckResponse(
        id=channel.id,
        name=channel.name,
        url=channel.url,
        official=channel.official,
        category=channel.category,
    )


@router.get("/channels", response_model=list[ChannelResponse], response_model_exclude_none=True)
async def list_directory_channels(store: ChannelStore = Depends(get_channel_store)) -> list[ChannelResponse]:
    return [_to_response(channel) for channel in store.list_channels()]


@router.post(
    "/channels",
    response_model=ChannelResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def create_channel(
    payload: ChannelCreateRequest,
    store: ChannelStore = Depends(get_channel_store),
) -> ChannelResponse:
    channel = store.create_channel(
        name=payload.name,
        url=payload.url,
        category=payload.category,
        verification_code=payload.verification_code,
    )
    if payload.official and not channel.official:
        logger.info("Ignoring client-supplied official flag for %s", channel.url)
    return _to_response(channel)
