import logging
from pathlib import Path

from app.core.config import settings
from app.db.models import Channel
from app.db.repository import JsonFileChannelRepository

logger = logging.getLogger(__name__)


def default_channels() -> list[Channel]:
    """Channels the directory starts with when no data file exists."""

    return [
        Channel(id=1, name="Telegram", url="@telegram", category="news", official=True),
        Channel(id=2, name="Stasya Games", url="@stasya_games", category="games"),
        Channel(id=3, name="Posti Stasi", url="@postistasi", category="entertainment"),
    ]


def seed_data_file(path: Path) -> bool:
    """Write the default channels to ``path`` unless it already exists."""

    if path.exists():
        logger.info("Data file %s already exists; leaving it untouched", path)
        return False

    JsonFileChannelRepository(path).save(default_channels())
    logger.info("Seeded %s with default channels", path)
    return True


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    seed_data_file(settings.data_file)
