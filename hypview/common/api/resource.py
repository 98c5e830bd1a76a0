import json
import logging
from hypview.exceptions.api import ApiError, MalformedResponseError


logger = logging.getLogger(__name__)

# How much of the raw response is kept in MalformedResponseError
RAW_EXCERPT_LENGTH = 200


def _get_str(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(
            f"field '{key}' must be a string, got {type(value).__name__}"
        )
    return value


class Game:
    def __init__(self, id: str, biz: str):
        self.id = id
        self.biz = biz

    @staticmethod
    def from_dict(data: dict) -> "Game":
        return Game(id=_get_str(data, "id"), biz=_get_str(data, "biz"))


class GamePackage:
    def __init__(self, url: str, md5: str, size: str, decompressed_size: str):
        self.url = url
        self.md5 = md5
        # Sizes are kept as the decimal strings sent by the API
        self.size = size
        self.decompressed_size = decompressed_size

    @staticmethod
    def from_dict(data: dict) -> "GamePackage":
        return GamePackage(
            url=_get_str(data, "url"),
            md5=data.get("md5", ""),
            size=str(data.get("size", "")),
            decompressed_size=str(data.get("decompressed_size", "")),
        )


class AudioPackage:
    def __init__(
        self,
        language: str,
        url: str,
        md5: str,
        size: str,
        decompressed_size: str,
    ):
        self.language = language
        self.url = url
        self.md5 = md5
        self.size = size
        self.decompressed_size = decompressed_size

    @staticmethod
    def from_dict(data: dict) -> "AudioPackage":
        return AudioPackage(
            language=_get_str(data, "language"),
            url=_get_str(data, "url"),
            md5=data.get("md5", ""),
            size=str(data.get("size", "")),
            decompressed_size=str(data.get("decompressed_size", "")),
        )


class Major:
    def __init__(
        self,
        version: str,
        game_pkgs: list[GamePackage],
        audio_pkgs: list[AudioPackage],
        res_list_url: str | None = None,
    ):
        self.version = version
        self.game_pkgs = game_pkgs
        self.audio_pkgs = audio_pkgs
        self.res_list_url = res_list_url

    @staticmethod
    def from_dict(data: dict) -> "Major":
        return Major(
            version=_get_str(data, "version"),
            game_pkgs=[GamePackage.from_dict(x) for x in data.get("game_pkgs") or []],
            audio_pkgs=[
                AudioPackage.from_dict(x) for x in data.get("audio_pkgs") or []
            ],
            res_list_url=data.get("res_list_url") or None,
        )


# Currently patch has the same fields as major, "version" is the version
# the patch upgrades from.
Patch = Major


class Release:
    def __init__(
        self,
        major: Major | None = None,
        patches: list[Patch] | None = None,
        res_list_url: str | None = None,
    ):
        self.major = major
        self.patches = patches if patches is not None else []
        self.res_list_url = res_list_url

    @staticmethod
    def from_dict(data: dict | None) -> "Release":
        if not data:
            return Release()
        # miHoYo sends "" or null when there's no major version
        major = data.get("major")
        return Release(
            major=None if isinstance(major, str | None) else Major.from_dict(major),
            patches=[Patch.from_dict(x) for x in data.get("patches") or []],
            res_list_url=data.get("res_list_url") or None,
        )


Main = Release
PreDownload = Release


# Why miHoYo uses the same name "game_packages" for this big field and smol field
class GameInfo:
    def __init__(self, game: Game, main: Main, pre_download: PreDownload):
        self.game = game
        self.main = main
        self.pre_download = pre_download

    @staticmethod
    def from_dict(data: dict) -> "GameInfo":
        return GameInfo(
            game=Game.from_dict(data["game"]),
            main=Main.from_dict(data["main"]),
            pre_download=PreDownload.from_dict(data.get("pre_download")),
        )


class PackageDocument:
    def __init__(self, game_packages: list[GameInfo]):
        self.game_packages = game_packages

    @staticmethod
    def from_dict(data: dict) -> "PackageDocument":
        return PackageDocument(
            game_packages=[GameInfo.from_dict(x) for x in data["game_packages"]]
        )


def _malformed(error: str, raw_text: str) -> MalformedResponseError:
    excerpt = raw_text[:RAW_EXCERPT_LENGTH]
    if len(raw_text) > RAW_EXCERPT_LENGTH:
        excerpt += "..."
    return MalformedResponseError(f"JSON parse error: {error} (response: {excerpt!r})")


def decode(raw_text: str) -> PackageDocument:
    """
    Decode a getGamePackages response.

    Args:
        raw_text: Response body as returned by the launcher API.

    Raises:
        ApiError: The API answered with a non-zero retcode.
        MalformedResponseError: The body isn't JSON or doesn't have the expected shape.

    Returns:
        PackageDocument: The decoded document.
    """
    try:
        response = json.loads(raw_text)
    except (json.JSONDecodeError, TypeError) as e:
        raise _malformed(str(e), str(raw_text)) from e
    if not isinstance(response, dict):
        raise _malformed("expected a JSON object", raw_text)
    retcode = response.get("retcode")
    if retcode is None:
        raise _malformed("missing field 'retcode'", raw_text)
    if retcode != 0:
        raise ApiError(str(response.get("message", "")), retcode=retcode)
    try:
        document = PackageDocument.from_dict(response["data"])
    except KeyError as e:
        raise _malformed(f"missing field {e}", raw_text) from e
    except (TypeError, AttributeError) as e:
        raise _malformed(str(e), raw_text) from e
    logger.debug("Decoded %d game package(s)", len(document.game_packages))
    return document
