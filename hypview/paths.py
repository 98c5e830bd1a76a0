from platformdirs import PlatformDirs


class Paths:
    """
    Manages the paths
    """

    base_paths = PlatformDirs("hypview", "hypview")
    config_file = base_paths.user_config_path.joinpath("config.ini")


# Aliases
config_file = Paths.config_file
