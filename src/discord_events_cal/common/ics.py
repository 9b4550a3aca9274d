from __future__ import annotations

import base64
from dataclasses import dataclass
from datetime import datetime

from discord_events_cal.common.content_line import ContentLine, Parameter
from discord_events_cal.common.text import format_datetime


def _optional(name: str, value: str | None) -> list[ContentLine]:
    if value is None:
        return []
    return [ContentLine(name, value)]


def _optional_datetime(name: str, value: datetime | None) -> list[ContentLine]:
    if value is None:
        return []
    return [ContentLine(name, format_datetime(value))]


@dataclass(frozen=True)
class Organiser:
    address: str
    common_name: str | None = None
    sent_by: str | None = None

    def render(self) -> ContentLine:
        params: list[Parameter] = []
        if self.common_name is not None:
            params.append(Parameter("CN", (self.common_name,)))
        if self.sent_by is not None:
            params.append(Parameter("SENT-BY", (self.sent_by,)))
        return ContentLine("ORGANIZER", self.address, tuple(params))


@dataclass(frozen=True)
class UrlImage:
    url: str

    def render(self) -> ContentLine:
        return ContentLine("IMAGE", self.url, (Parameter("VALUE", ("URI",)),))


@dataclass(frozen=True)
class BinaryImage:
    data: bytes

    def render(self) -> ContentLine:
        return ContentLine(
            "IMAGE",
            base64.b64encode(self.data).decode("ascii"),
            (Parameter("VALUE", ("BINARY",)), Parameter("ENCODING", ("BASE64",))),
        )


Image = UrlImage | BinaryImage


@dataclass(frozen=True)
class Event:
    uid: str
    timestamp: datetime
    start: datetime
    end: datetime | None = None
    created: datetime | None = None
    description: str | None = None
    summary: str | None = None
    location: str | None = None
    organiser: Organiser | None = None
    status: str | None = None
    images: tuple[Image, ...] = ()

    def render(self) -> list[ContentLine]:
        lines = [
            ContentLine("BEGIN", "VEVENT"),
            ContentLine("UID", self.uid),
            ContentLine("DTSTAMP", format_datetime(self.timestamp)),
            ContentLine("DTSTART", format_datetime(self.start)),
        ]
        lines.extend(_optional_datetime("DTEND", self.end))
        lines.extend(_optional_datetime("CREATED", self.created))
        lines.extend(_optional("DESCRIPTION", self.description))
        lines.extend(_optional("SUMMARY", self.summary))
        lines.extend(_optional("LOCATION", self.location))
        if self.organiser is not None:
            lines.append(self.organiser.render())
        lines.extend(_optional("STATUS", self.status))
        lines.extend(image.render() for image in self.images)
        lines.append(ContentLine("END", "VEVENT"))
        return lines


@dataclass(frozen=True)
class Calendar:
    product: str
    version: str = "2.0"
    scale: str | None = None
    method: str | None = None
    name: str | None = None
    description: str | None = None
    uid: str | None = None
    url: str | None = None
    events: tuple[Event, ...] = ()

    def render(self) -> list[ContentLine]:
        lines = [
            ContentLine("BEGIN", "VCALENDAR"),
            ContentLine("PRODID", self.product),
            ContentLine("VERSION", self.version),
        ]
        lines.extend(_optional("CALSCALE", self.scale))
        lines.extend(_optional("METHOD", self.method))
        # Some clients only read NAME, others only X-WR-CALNAME.
        lines.extend(_optional("NAME", self.name))
        lines.extend(_optional("X-WR-CALNAME", self.name))
        lines.extend(_optional("DESCRIPTION", self.description))
        lines.extend(_optional("UID", self.uid))
        lines.extend(_optional("URL", self.url))
        for event in self.events:
            lines.extend(event.render())
        lines.append(ContentLine("END", "VCALENDAR"))
        return lines

    def serialize(self) -> str:
        return "".join(line.serialize() for line in self.render())


def build_ics(calendar: Calendar) -> str:
    return calendar.serialize()
