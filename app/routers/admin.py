"""Read-only directory overview for operators."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.db.session import get_channel_store
from app.schema.channel import AdminInfoResponse
from app.services.channel_store import ChannelStore

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/info", response_model=AdminInfoResponse)
async def admin_info(store: ChannelStore = Depends(get_channel_store)) -> AdminInfoResponse:
    summary = store.summary()
    return AdminInfoResponse(
        total_channels=summary.total_channels,
        official_channels=summary.official_channels,
        verification_instructions=summary.verification_instructions,
    )
