from typing import Any

import pytest

from discord_events_cal.config.schema import ExportConfig

GUILD_ID = "197038439483310086"


@pytest.fixture
def snapshot_data() -> dict[str, Any]:
    return {
        "guild": {
            "id": GUILD_ID,
            "name": "Test Guild",
            "icon": None,
            "owner_id": "80351110224678912",
            "description": "A guild for tests",
        },
        "scheduled_events": [
            {
                "id": "175928847299117063",
                "guild_id": GUILD_ID,
                "channel_id": "41771983444115456",
                "creator_id": "80351110224678912",
                "name": "Stage talk",
                "description": None,
                "image": "abcdef",
                "scheduled_start_time": "2023-03-01T18:00:00+00:00",
                "scheduled_end_time": None,
                "privacy_level": 2,
                "status": 1,
                "entity_type": 1,
                "entity_id": "41771983444115456",
                "entity_metadata": None,
                "creator": {
                    "id": "80351110224678912",
                    "username": "Nelly",
                    "discriminator": "1337",
                    "avatar": None,
                },
            },
            {
                "id": "1080000000000000000",
                "guild_id": GUILD_ID,
                "channel_id": None,
                "name": "Meetup",
                "description": "Coffee; bring friends",
                "image": None,
                "scheduled_start_time": "2023-03-02T09:00:00Z",
                "scheduled_end_time": "2023-03-02T11:30:00Z",
                "privacy_level": 2,
                "status": 4,
                "entity_type": 3,
                "entity_id": None,
                "entity_metadata": {"location": "Main St, Springfield"},
            },
        ],
        "channels": [
            {
                "id": "41771983444115456",
                "guild_id": GUILD_ID,
                "name": "stage-hall",
                "topic": "Weekly talks",
            }
        ],
    }


@pytest.fixture
def export_config() -> ExportConfig:
    return ExportConfig(root_url="https://events.example.com", uid_domain="events.example.com")
