import pytest

from amber_engine.configuration import Configuration, ConfigurationLockedError
from amber_engine.hierarchy import DataType, get_data


def test_defaults():
    config = Configuration()
    assert config.log_file_name == "UNKNOWN.log"
    assert config.log_state == 0b11111111
    assert (config.win_width, config.win_height) == (1920, 1080)
    assert config.win_title == "AMBER Engine"
    assert config.tim_fps == 60
    assert config.aud_frequency == 22050
    assert config.aud_format == 0x8010
    assert config.aud_channels == 2
    assert config.aud_chunksize == 1024


def test_setting_before_initialize():
    config = Configuration()
    config.win_width = 800
    config.win_title = "Game"
    assert config.win_width == 800
    assert config.win_title == "Game"


def test_setting_after_initialize_raises():
    config = Configuration()
    config.initialize()
    assert config.is_initialized()
    with pytest.raises(ConfigurationLockedError):
        config.tim_fps = 30
    assert config.tim_fps == 60


def test_initialize_twice_keeps_state():
    config = Configuration()
    assert not config.is_initialized()
    config.initialize()
    config.initialize()
    assert config.is_initialized()


def test_instance_is_shared():
    first = Configuration.instance()
    second = Configuration.instance()
    assert first is second
    assert second.aud_chunksize == 1024
    assert second.config_to_hierarchy().name == "Configuration"


def test_config_to_hierarchy_round_trip():
    config = Configuration()
    config.aud_channels = 1
    config.win_height = 600
    hierarchy = config.config_to_hierarchy()
    assert hierarchy.name == "Configuration"
    assert get_data(hierarchy["Logger"], "file_name", DataType.STRING) == config.log_file_name
    assert get_data(hierarchy["Logger"], "state", DataType.UINT8) == config.log_state
    assert get_data(hierarchy["Window"], "height", DataType.UINT32) == 600
    assert get_data(hierarchy["Window"], "sdl_flags", DataType.UINT32) == config.win_sdl_flags
    assert get_data(hierarchy["Timer"], "fps", DataType.UINT32) == config.tim_fps
    assert get_data(hierarchy["Audio"], "mix_flags", DataType.INT32) == config.aud_mix_flags
    assert get_data(hierarchy["Audio"], "format", DataType.UINT16) == config.aud_format
    assert get_data(hierarchy["Audio"], "channels", DataType.INT32) == 1


def test_config_to_hierarchy_groups():
    hierarchy = Configuration().config_to_hierarchy()
    assert sorted(hierarchy.root.subgroups) == ["Audio", "Logger", "Timer", "Window"]
    assert len(hierarchy["Window"].data) == 5


def test_unstorable_setting_is_left_out():
    config = Configuration()
    config.log_file_name = ""
    hierarchy = config.config_to_hierarchy()
    assert not hierarchy["Logger"].has_data("file_name")
    assert hierarchy["Logger"].has_data("state")