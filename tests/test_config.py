from unittest import mock

from hourlog import config
from hourlog.config import Settings


def test_defaults_when_environment_is_empty():
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.recent_entry_limit == 5
    assert settings.seed_demo_data is True
    assert settings.appearance_mode == "light"


def test_values_from_environment():
    settings = Settings.from_env(
        {
            "HOURLOG_TITLE": "Team Hours",
            "HOURLOG_GEOMETRY": "1200x800",
            "HOURLOG_APPEARANCE": "Dark",
            "HOURLOG_RECENT_LIMIT": "10",
            "HOURLOG_COMPACT_WIDTH": "600",
            "HOURLOG_SEED_DATA": "no",
            "HOURLOG_LOG_LEVEL": "debug",
        }
    )
    assert settings == Settings(
        title="Team Hours",
        geometry="1200x800",
        appearance_mode="dark",
        recent_entry_limit=10,
        compact_width=600,
        seed_demo_data=False,
        log_level="DEBUG",
    )


def test_malformed_values_fall_back_to_defaults():
    settings = Settings.from_env(
        {
            "HOURLOG_TITLE": "   ",
            "HOURLOG_APPEARANCE": "purple",
            "HOURLOG_RECENT_LIMIT": "five",
            "HOURLOG_COMPACT_WIDTH": "-3",
            "HOURLOG_SEED_DATA": "maybe",
            "HOURLOG_LOG_LEVEL": "LOUD",
        }
    )
    assert settings == Settings()


def test_reads_dotenv_when_no_mapping_given(monkeypatch):
    monkeypatch.setenv("HOURLOG_RECENT_LIMIT", "7")
    with mock.patch.object(config, "load_dotenv") as load:
        settings = Settings.from_env()
    load.assert_called_once_with()
    assert settings.recent_entry_limit == 7
