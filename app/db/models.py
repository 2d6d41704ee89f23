from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

DEFAULT_CATEGORY = "other"


def normalize_handle(value: str) -> str:
    """Lowercase a channel url and drop one leading ``@``."""

    handle = value.lower()
    if handle.startswith("@"):
        return handle[1:]
    return handle


class Channel(BaseModel):
    """A directory entry as kept in memory and in the data file."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    url: str
    category: str = DEFAULT_CATEGORY
    official: bool = False
    created_at: datetime | None = Field(None, alias="createdAt")

    @field_validator("category", mode="before")
    @classmethod
    def _default_category(cls, value: Any) -> Any:
        return value or DEFAULT_CATEGORY

    @property
    def handle(self) -> str:
        return normalize_handle(self.url)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase shape stored in the data file."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


ChannelList = TypeAdapter(list[Channel])
