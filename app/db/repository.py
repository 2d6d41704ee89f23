"""Storage backends for the channel collection."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from app.db.models import Channel, ChannelList

logger = logging.getLogger(__name__)


class ChannelRepository(Protocol):
    """Loads and persists the whole channel collection at once."""

    def load(self) -> list[Channel]:
        ...

    def save(self, channels: Sequence[Channel]) -> None:
        ...


class JsonFileChannelRepository:
    """Keeps the collection as a pretty-printed JSON array in a single file.

    Every save rewrites the file in place. When the file is missing, ``load``
    returns the channels produced by ``defaults``. A file that cannot be read or
    validated is renamed to ``<name>.<timestamp>.corrupt`` before falling back to
    the defaults; if it cannot be moved aside, saving is refused so the original
    contents are never overwritten.
    """

    def __init__(self, path: Path, *, defaults: Callable[[], list[Channel]] | None = None) -> None:
        self.path = Path(path)
        self._defaults = defaults or list
        self._locked = False

    def load(self) -> list[Channel]:
        if not self.path.exists():
            logger.info("Data file %s not found; using default channels", self.path)
            return self._defaults()

        try:
            return ChannelList.validate_json(self.path.read_bytes())
        except (OSError, ValidationError):
            logger.exception("Failed to read channels from %s; using default channels", self.path)
            self._quarantine()
            return self._defaults()

    def _quarantine(self) -> None:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        backup = self.path.with_name(f"{self.path.name}.{stamp}.corrupt")
        try:
            self.path.rename(backup)
        except OSError:
            logger.exception("Could not move %s aside; saving is disabled", self.path)
            self._locked = True
            return
        logger.warning("Moved unreadable data file to %s", backup)

    def save(self, channels: Sequence[Channel]) -> None:
        if self._locked:
            raise OSError(f"Refusing to overwrite unreadable data file {self.path}")

        payload = [channel.to_dict() for channel in channels]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


class MemoryChannelRepository:
    """Repository that never touches disk; ``saved`` holds the last snapshot."""

    def __init__(self, channels: Iterable[Channel] = ()) -> None:
        self._initial = list(channels)
        self.saved: list[Channel] | None = None
        self.save_count = 0

    def load(self) -> list[Channel]:
        if self.saved is not None:
            return list(self.saved)
        return list(self._initial)

    def save(self, channels: Sequence[Channel]) -> None:
        self.saved = list(channels)
        self.save_count += 1
