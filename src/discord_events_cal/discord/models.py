from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Annotated, Any

from pydantic import BaseModel, Field, PlainSerializer, PlainValidator

from discord_events_cal.common.snowflake import Snowflake, decode


def _validate_snowflake(value: Any) -> Snowflake:
    if isinstance(value, Snowflake):
        return value
    return decode(value)


SnowflakeField = Annotated[
    Snowflake,
    PlainValidator(_validate_snowflake),
    PlainSerializer(str, return_type=str),
]


class PrivacyLevel(IntEnum):
    GUILD_ONLY = 2


class EventStatus(IntEnum):
    SCHEDULED = 1
    ACTIVE = 2
    COMPLETED = 3
    CANCELLED = 4


class EntityType(IntEnum):
    STAGE = 1
    VOICE = 2
    EXTERNAL = 3


class User(BaseModel):
    id: SnowflakeField
    username: str
    discriminator: str
    avatar: str | None = None


class Guild(BaseModel):
    id: SnowflakeField
    name: str
    icon: str | None = None
    splash: str | None = None
    discovery_splash: str | None = None
    owner_id: SnowflakeField
    description: str | None = None


class Channel(BaseModel):
    id: SnowflakeField
    guild_id: SnowflakeField | None = None
    name: str | None = None
    topic: str | None = None


class EntityMetadata(BaseModel):
    location: str | None = None


class GuildEvent(BaseModel):
    id: SnowflakeField
    guild_id: SnowflakeField
    channel_id: SnowflakeField | None = None
    creator_id: SnowflakeField | None = None
    name: str
    description: str | None = None
    image: str | None = None
    scheduled_start_time: datetime
    scheduled_end_time: datetime | None = None
    privacy_level: PrivacyLevel
    status: EventStatus
    entity_type: EntityType
    entity_id: str | None = None
    entity_metadata: EntityMetadata | None = None
    creator: User | None = None


class GuildSnapshot(BaseModel):
    guild: Guild
    scheduled_events: list[GuildEvent] = Field(default_factory=list)
    channels: list[Channel] = Field(default_factory=list)

    def channel_index(self) -> dict[Snowflake, Channel]:
        return {channel.id: channel for channel in self.channels}
