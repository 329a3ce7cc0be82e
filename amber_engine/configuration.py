"""Engine settings that may change only until the engine is initialised."""

import logging

from .hierarchy import DataType, HierarchyError, Hierarchy, add_data

_log = logging.getLogger(__name__)

_SDL_INIT_EVERYTHING = 0x0001 | 0x0010 | 0x0020 | 0x0200 | 0x1000 | 0x2000 | 0x4000 | 0x8000
_SDL_WINDOW_OPENGL = 0x00000002
_MIX_INIT_ALL = 0x01 | 0x02 | 0x08 | 0x10 | 0x20 | 0x40


class ConfigurationLockedError(RuntimeError):
    """Raised when a setting is changed after initialisation."""


class _Setting:
    def __init__(self, label):
        self.label = label

    def __set_name__(self, owner, name):
        self.attr = "_" + name

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        return getattr(obj, self.attr)

    def __set__(self, obj, value):
        if obj.is_initialized():
            raise ConfigurationLockedError(f"Cannot change {self.label} after initialization.")
        setattr(obj, self.attr, value)


_LAYOUT = (
    ("Logger", "file_name", "log_file_name", DataType.STRING),
    ("Logger", "state", "log_state", DataType.UINT8),
    ("Window", "width", "win_width", DataType.UINT32),
    ("Window", "height", "win_height", DataType.UINT32),
    ("Window", "title", "win_title", DataType.STRING),
    ("Window", "sdl_flags", "win_sdl_flags", DataType.UINT32),
    ("Window", "win_flags", "win_win_flags", DataType.UINT32),
    ("Timer", "fps", "tim_fps", DataType.UINT32),
    ("Audio", "mix_flags", "aud_mix_flags", DataType.INT32),
    ("Audio", "frequency", "aud_frequency", DataType.INT32),
    ("Audio", "format", "aud_format", DataType.UINT16),
    ("Audio", "channels", "aud_channels", DataType.INT32),
    ("Audio", "chunksize", "aud_chunksize", DataType.INT32),
)


class Configuration:
    """Logger, window, timer and audio settings."""

    _instance = None

    log_file_name = _Setting("log file name")
    log_state = _Setting("log state")
    win_width = _Setting("window width")
    win_height = _Setting("window height")
    win_title = _Setting("window title")
    win_sdl_flags = _Setting("SDL flags")
    win_win_flags = _Setting("window flags")
    tim_fps = _Setting("timer FPS")
    aud_mix_flags = _Setting("audio mix flags")
    aud_frequency = _Setting("audio frequency")
    aud_format = _Setting("audio format")
    aud_channels = _Setting("audio channels")
    aud_chunksize = _Setting("audio chunk size")

    def __init__(self):
        self._initialized = False
        self.log_file_name = "UNKNOWN.log"
        self.log_state = 0b11111111
        self.win_width = 1920
        self.win_height = 1080
        self.win_title = "AMBER Engine"
        self.win_sdl_flags = _SDL_INIT_EVERYTHING
        self.win_win_flags = _SDL_WINDOW_OPENGL
        self.tim_fps = 60
        self.aud_mix_flags = _MIX_INIT_ALL
        self.aud_frequency = 22050
        self.aud_format = 0x8010
        self.aud_channels = 2
        self.aud_chunksize = 1024

    @classmethod
    def instance(cls):
        """The shared configuration."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def initialize(self):
        """Lock the settings; a second call only warns."""
        if self._initialized:
            _log.warning("Configuration is already initialized.")
            return
        self._initialized = True

    def is_initialized(self):
        return self._initialized

    def config_to_hierarchy(self):
        """The settings as a hierarchy named ``Configuration``."""
        hierarchy = Hierarchy("Configuration")
        for group, key, attr, data_type in _LAYOUT:
            try:
                add_data(hierarchy[group], key, getattr(self, attr), data_type)
            except HierarchyError as exc:
                _log.error("Cannot store %s/%s: %s", group, key, exc)
        return hierarchy