from hypview.common.configfile import ConfigFile, Settings


__all__ = ["ConfigFile", "Settings"]
