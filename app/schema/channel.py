"""Pydantic models for the channel directory API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChannelCreateRequest(BaseModel):
    """Inbound payload to register a channel.

    ``name`` and ``url`` are optional here so that missing values are reported
    as a 400 with a message rather than a schema error. ``official`` is accepted
    for older clients but has no effect.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    url: str | None = Field(None, description="Channel handle, conventionally `@name`")
    category: str | None = None
    official: Any = None
    verification_code: Any = Field(None, alias="verificationCode")


class ChannelResponse(BaseModel):
    """Full channel record as stored in the directory."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    url: str
    category: str
    official: bool
    created_at: datetime | None = Field(None, alias="createdAt")


class ChannelCheckResponse(BaseModel):
    """Result of a handle lookup."""

    id: int
    name: str
    url: str
    official: bool
    category: str


class AdminInfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_channels: int = Field(alias="totalChannels")
    official_channels: int = Field(alias="officialChannels")
    verification_instructions: str = Field(alias="verificationInstructions")


class MessageResponse(BaseModel):
    message: str
