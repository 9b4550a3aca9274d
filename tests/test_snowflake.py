from datetime import UTC, datetime

import pytest

from discord_events_cal.common.snowflake import (
    MAX_SNOWFLAKE,
    Snowflake,
    SnowflakeParseError,
    decode,
)


def test_decode_documented_example() -> None:
    snowflake = decode("175928847299117063")
    # Bits 17-21 of this id hold 1; the worker/shard field follows the mask.
    assert snowflake.shard_id() == 1
    assert snowflake.process_id() == 0
    assert snowflake.sequence() == 7
    assert snowflake.timestamp() == datetime(2016, 4, 30, 11, 18, 25, 796000, tzinfo=UTC)


@pytest.mark.parametrize(
    "value",
    [0, 1, 0xFFF, 0x3E0000, 0x1F000, 175928847299117063, 2**63, MAX_SNOWFLAKE],
)
def test_fields_match_bit_layout(value: int) -> None:
    snowflake = decode(str(value))
    assert snowflake.value == value
    assert snowflake.sequence() == value & 0xFFF
    assert snowflake.process_id() == (value & 0x1F000) >> 12
    assert snowflake.shard_id() == (value & 0x3E0000) >> 17
    expected_ms = (value >> 22) + 1420070400000
    delta = snowflake.timestamp() - datetime(1970, 1, 1, tzinfo=UTC)
    assert delta.days * 86_400_000 + delta.seconds * 1000 + delta.microseconds // 1000 == expected_ms


def test_zero_decodes_to_discord_epoch() -> None:
    assert decode("0").timestamp() == datetime(2015, 1, 1, tzinfo=UTC)


def test_max_value_fields() -> None:
    snowflake = decode(str(MAX_SNOWFLAKE))
    assert snowflake.shard_id() == 31
    assert snowflake.process_id() == 31
    assert snowflake.sequence() == 4095


def test_decode_accepts_plus_and_leading_zeros() -> None:
    assert decode("+42") == Snowflake(42)
    assert decode("000042") == Snowflake(42)


@pytest.mark.parametrize(
    "raw",
    ["", "+", "-1", "12a", " 12", "12 ", "1_000", "1.5", "0x10", "١٢", str(MAX_SNOWFLAKE + 1)],
)
def test_decode_rejects_invalid(raw: str) -> None:
    with pytest.raises(SnowflakeParseError):
        decode(raw)


def test_decode_rejects_non_string() -> None:
    with pytest.raises(SnowflakeParseError):
        decode(42)  # type: ignore[arg-type]


def test_parse_error_is_value_error() -> None:
    assert issubclass(SnowflakeParseError, ValueError)


def test_str_is_decimal() -> None:
    assert str(Snowflake(175928847299117063)) == "175928847299117063"
