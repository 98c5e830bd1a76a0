import logging
import requests
from hypview.common.api import resource
from hypview.common.enums import GameChannel
from hypview.constants import LAUNCHER_API
from hypview.exceptions.api import TransportError


__all__ = ["fetch_game_packages", "get_game_packages", "resource"]

logger = logging.getLogger(__name__)


def _resource_path(channel: GameChannel) -> dict:
    match channel:
        case GameChannel.Overseas:
            return LAUNCHER_API.OS
        case GameChannel.China:
            return LAUNCHER_API.CN
    raise ValueError(f"Unknown channel: {channel}")


def fetch_game_packages(
    channel: GameChannel = GameChannel.Overseas,
    game_ids: list[str] | None = None,
) -> str:
    """
    Fetch the raw game packages response from the launcher API.

    Default channel is overseas, default game is Genshin Impact for that channel.

    Args:
        channel: Game channel to get the packages from.
        game_ids: Game ids to ask for, overrides the channel default.

    Raises:
        TransportError: The request failed or the server answered with an HTTP error.

    Returns:
        str: Response body.
    """
    resource_path = _resource_path(channel)
    if not game_ids:
        game_ids = resource_path["game_ids"]
    params = {"game_ids[]": list(game_ids)} | resource_path["params"]
    url = resource_path["url"] + LAUNCHER_API.RESOURCE_PATH
    logger.debug("Fetching %s with %s", url, params)
    try:
        rsp = requests.get(url, params=params)
        rsp.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(f"Request error: {e}") from e
    return rsp.text


def get_game_packages(
    channel: GameChannel = GameChannel.Overseas,
    game_ids: list[str] | None = None,
) -> resource.PackageDocument:
    """
    Get game packages information from the launcher API.

    Args:
        channel: Game channel to get the packages from.
        game_ids: Game ids to ask for, overrides the channel default.

    Returns:
        PackageDocument: Decoded game packages.
    """
    return resource.decode(fetch_game_packages(channel=channel, game_ids=game_ids))
