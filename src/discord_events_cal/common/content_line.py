from __future__ import annotations

from dataclasses import dataclass

from discord_events_cal.common.text import escape_text, quote_param_value

MAX_LINE_OCTETS = 75
CRLF = "\r\n"


@dataclass(frozen=True)
class Parameter:
    name: str
    values: tuple[str, ...]

    def serialize(self) -> str:
        return f"{self.name}={','.join(quote_param_value(v) for v in self.values)}"


@dataclass(frozen=True)
class ContentLine:
    """One logical iCalendar property.

    ``value`` is the raw, unescaped text; escaping, parameter quoting and
    folding all happen in :meth:`serialize`.
    """

    name: str
    value: str
    params: tuple[Parameter, ...] = ()

    def unfolded(self) -> str:
        params = "".join(f";{param.serialize()}" for param in self.params)
        return f"{self.name}{params}:{escape_text(self.value)}"

    def fold(self) -> list[str]:
        return fold_line(self.unfolded())

    def serialize(self) -> str:
        return "".join(f"{line}{CRLF}" for line in self.fold())


def _octets(char: str) -> int:
    return len(char.encode("utf-8", "surrogatepass"))


def fold_line(line: str, limit: int = MAX_LINE_OCTETS) -> list[str]:
    """Split ``line`` into physical lines of at most ``limit`` UTF-8 octets.

    Breaks fall between code points only. Every continuation line starts with
    a single space, which counts toward its limit.
    """
    physical: list[str] = []
    current: list[str] = []
    size = 0
    for char in line:
        width = _octets(char)
        if current and size + width > limit:
            physical.append("".join(current))
            current = [" "]
            size = 1
        current.append(char)
        size += width
    physical.append("".join(current))
    return physical


def unfold_lines(text: str) -> list[str]:
    logical: list[str] = []
    for line in text.split(CRLF):
        if line.startswith(" ") and logical:
            logical[-1] += line[1:]
        elif line:
            logical.append(line)
    return logical
