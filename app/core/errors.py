"""Domain errors raised by the channel directory and mapped to HTTP responses."""

from __future__ import annotations

from fastapi import status


class ChannelDirectoryError(Exception):
    """Base class for errors surfaced to API clients as ``{"message": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR


class ChannelValidationError(ChannelDirectoryError):
    """Raised when a create request lacks a required field."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateChannelError(ChannelDirectoryError):
    """Raised when a channel with the same handle is already registered."""

    status_code = status.HTTP_400_BAD_REQUEST


class ChannelNotFoundError(ChannelDirectoryError):
    status_code = status.HTTP_404_NOT_FOUND
