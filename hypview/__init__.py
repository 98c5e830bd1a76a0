from hypview.common.api import get_game_packages, fetch_game_packages
from hypview.common.api.resource import decode, PackageDocument
from hypview.common.enums import GameChannel
from hypview.common.formatting import (
    format_main,
    format_pre_download_main,
    format_pre_download_patches,
)
from hypview.common.message import derive_share_message, build_share_message


__all__ = [
    "GameChannel",
    "PackageDocument",
    "build_share_message",
    "decode",
    "derive_share_message",
    "fetch_game_packages",
    "format_main",
    "format_pre_download_main",
    "format_pre_download_patches",
    "get_game_packages",
]
