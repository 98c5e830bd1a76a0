import logging
from configparser import ConfigParser
from pathlib import Path
from hypview import paths
from hypview.common.enums import GameChannel


logger = logging.getLogger(__name__)

SECTION = "hypview"


class ConfigFile(ConfigParser):
    """
    Read-only view of an ini file, a missing file reads as empty.
    """

    path: Path

    def __init__(self, path, **kwargs):
        super().__init__(**kwargs)
        self.path = Path(path)
        self.read(self.path)


class Settings:
    def __init__(
        self,
        channel: GameChannel = GameChannel.Overseas,
        game_ids: list[str] | None = None,
    ):
        self.channel = channel
        self.game_ids = game_ids

    @staticmethod
    def from_config(config: ConfigParser) -> "Settings":
        """
        Build settings from the [hypview] section, invalid values fall back to defaults.
        """
        settings = Settings()
        if not config.has_section(SECTION):
            return settings
        channel = config.get(SECTION, "channel", fallback=None)
        if channel:
            try:
                settings.channel = GameChannel.from_str(channel)
            except ValueError:
                logger.warning("Ignoring invalid channel in config: %s", channel)
        game_ids = config.get(SECTION, "game_ids", fallback=None)
        if game_ids:
            settings.game_ids = [x.strip() for x in game_ids.split(",") if x.strip()]
        return settings

    @staticmethod
    def load(path=None) -> "Settings":
        if path is None:
            path = paths.config_file
        return Settings.from_config(ConfigFile(path))
