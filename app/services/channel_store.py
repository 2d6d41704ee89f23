"""In-memory channel collection backed by a repository."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

from app.core.config import VERIFICATION_CODE, VERIFICATION_INSTRUCTIONS
from app.core.errors import ChannelNotFoundError, ChannelValidationError, DuplicateChannelError
from app.db.models import DEFAULT_CATEGORY, Channel, normalize_handle
from app.db.repository import ChannelRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DirectorySummary:
    total_channels: int
    official_channels: int
    verification_instructions: str


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_verification_code(code: object, *, expected: str = VERIFICATION_CODE) -> bool:
    if not isinstance(code, str) or not code:
        return False
    return hmac.compare_digest(code.encode(), expected.encode())


class ChannelStore:
    """Owns the channel collection for the lifetime of the app.

    Reads are served from memory. Each successful create appends one channel and
    hands the full collection to the repository. A failed save is logged and the
    channel stays registered in memory.
    """

    def __init__(
        self,
        repository: ChannelRepository,
        channels: Sequence[Channel] | None = None,
        *,
        verification_code: str = VERIFICATION_CODE,
    ) -> None:
        self.repository = repository
        self._channels: list[Channel] = list(channels or [])
        self._verification_code = verification_code

    @classmethod
    def load(cls, repository: ChannelRepository, **kwargs) -> ChannelStore:
        channels = repository.load()
        logger.info("Loaded channel directory", extra={"count": len(channels)})
        return cls(repository, channels, **kwargs)

    def list_channels(self) -> list[Channel]:
        """Return all channels in insertion order."""

        return list(self._channels)

    def find_by_handle(self, username: str) -> Channel | None:
        handle = normalize_handle(username)
        for channel in self._channels:
            if channel.handle == handle:
                return channel
        return None

    def get_by_handle(self, username: str) -> Channel:
        channel = self.find_by_handle(username)
        if channel is None:
            raise ChannelNotFoundError("Channel not found in the directory")
        return channel

    def next_id(self) -> int:
        if not self._channels:
            return 1
        return max(channel.id for channel in self._channels) + 1

    def create_channel(
        self,
        *,
        name: str | None,
        url: str | None,
        category: str | None = None,
        verification_code: object = None,
    ) -> Channel:
        """Register a new channel and persist the collection.

        ``official`` is granted only when ``verification_code`` matches the
        server-held secret.
        """

        if _is_blank(name) or _is_blank(url):
            raise ChannelValidationError("Channel name and URL are required")

        if self.find_by_handle(url) is not None:
            logger.info("Rejected duplicate channel", extra={"url": url})
            raise DuplicateChannelError("A channel with this URL already exists")

        channel = Channel(
            id=self.next_id(),
            name=name,
            url=url,
            category=category or DEFAULT_CATEGORY,
            official=is_valid_verification_code(verification_code, expected=self._verification_code),
            created_at=datetime.now(timezone.utc),
        )
        self._channels.append(channel)
        logger.info(
            "Registered channel",
            extra={"channel_id": channel.id, "url": channel.url, "official": channel.official},
        )

        try:
            self.repository.save(self._channels)
        except OSError:
            logger.exception("Failed to persist channel directory after creating %s", channel.url)

        return channel

    def summary(self) -> DirectorySummary:
        return DirectorySummary(
            total_channels=len(self._channels),
            official_channels=sum(1 for channel in self._channels if channel.official),
            verification_instructions=VERIFICATION_INSTRUCTIONS,
        )
