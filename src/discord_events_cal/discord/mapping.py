from __future__ import annotations

import logging

from discord_events_cal.common.ics import Calendar, Event, Image, Organiser, UrlImage
from discord_events_cal.config.schema import ExportConfig
from discord_events_cal.discord.models import (
    Channel,
    EntityType,
    EventStatus,
    GuildEvent,
    GuildSnapshot,
    User,
)

DISCORD_CHANNELS_URL = "https://discord.com/channels"

logger = logging.getLogger(__name__)


def _location(event: GuildEvent, channel: Channel | None) -> str | None:
    if event.entity_type == EntityType.EXTERNAL:
        return event.entity_metadata.location if event.entity_metadata else None
    if channel is not None and channel.name is not None:
        return f"#{channel.name}"
    return None


def _organiser(event: GuildEvent, creator: User | None) -> Organiser:
    return Organiser(
        address=f"{DISCORD_CHANNELS_URL}/{event.guild_id}",
        common_name=f"{creator.username}#{creator.discriminator}" if creator else None,
        sent_by=f"{DISCORD_CHANNELS_URL}/@me/{creator.id}" if creator else None,
    )


def _images(event: GuildEvent, config: ExportConfig) -> tuple[Image, ...]:
    if not event.image:
        return ()
    cdn_base = str(config.cdn_base).rstrip("/")
    return (UrlImage(f"{cdn_base}/guild-events/{event.id}/{event.image}.png"),)


def event_to_ics(event: GuildEvent, channel: Channel | None, config: ExportConfig) -> Event:
    created = event.id.timestamp()
    description = event.description
    if description is None and channel is not None:
        description = channel.topic
    return Event(
        uid=f"{event.id}@e.{config.uid_domain}",
        timestamp=created,
        start=event.scheduled_start_time,
        end=event.scheduled_end_time,
        created=created,
        description=description,
        summary=event.name,
        location=_location(event, channel),
        organiser=_organiser(event, event.creator),
        status="CANCELLED" if event.status == EventStatus.CANCELLED else "CONFIRMED",
        images=_images(event, config),
    )


def build_guild_calendar(
    snapshot: GuildSnapshot, config: ExportConfig, calendar_url: str | None
) -> Calendar:
    channels = snapshot.channel_index()
    events: list[Event] = []
    for event in snapshot.scheduled_events:
        channel = None
        if event.channel_id is not None:
            channel = channels.get(event.channel_id)
            if channel is None:
                logger.debug("Channel %s for event %s not in snapshot", event.channel_id, event.id)
        events.append(event_to_ics(event, channel, config))

    guild = snapshot.guild
    return Calendar(
        product=f"{config.product_name} {config.product_version}",
        version="2.0",
        scale=config.calendar_scale,
        name=f"{guild.name} Events",
        description=guild.description,
        uid=f"{guild.id}@c.{config.uid_domain}",
        url=calendar_url,
        events=tuple(events),
    )
