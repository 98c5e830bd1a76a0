"""
Plain-text reports of the launcher API packages.

The main report doubles as the input of hypview.common.message, so its
markers ("Game Packages:", "[Part N]", "[URL] ", "[Size] ", ...) must stay
stable.
"""

import logging
import math
from hypview.common.api.resource import (
    AudioPackage,
    GamePackage,
    Major,
    PackageDocument,
    Release,
)
from hypview.common.enums import language_name
from hypview.constants import GIB, NO_MAJOR_TEXT, NO_PRE_DOWNLOAD_MAJOR_TEXT


logger = logging.getLogger(__name__)

GAME_PACKAGES_HEADER = "Game Packages:"
AUDIO_PACKAGES_HEADER = "Audio Packages:"


def parse_size(size_str: str) -> float:
    """
    Parse a size in bytes, anything that isn't a non-negative number is 0.
    """
    try:
        size = float(size_str)
    except (TypeError, ValueError):
        if size_str:
            logger.warning("Unparseable size: %r", size_str)
        return 0.0
    if not math.isfinite(size) or size < 0:
        logger.warning("Invalid size: %r", size_str)
        return 0.0
    return size


def to_gib(size_str: str) -> float:
    return parse_size(size_str) / GIB


def format_gib(size_str: str) -> str:
    return f"{to_gib(size_str):.2f}GB"


def trim_version(version: str) -> str:
    """
    Remove a single trailing ".0" from a version string.

    "5.0.0" becomes "5.0", "5.1.2" is returned unchanged.
    """
    return version.removesuffix(".0")


def _game_block(index: int, pkg: GamePackage, url_label: str = "URL") -> str:
    return (
        f"[Part {index}]\n"
        f"[{url_label}] {pkg.url}\n"
        f"[Size] {format_gib(pkg.size)}\n"
        f"[Decompressed Size] {format_gib(pkg.decompressed_size)}\n\n"
    )


def _audio_block(pkg: AudioPackage, language_label: str = "Language") -> str:
    return (
        f"[{language_label}] {language_name(pkg.language)}\n"
        f"[URL] {pkg.url}\n"
        f"[Size] {format_gib(pkg.size)}\n"
        f"[Decompressed Size] {format_gib(pkg.decompressed_size)}\n\n"
    )


def _format_bundle(
    major: Major,
    game_header: str,
    audio_header: str,
    url_label: str = "URL",
    language_label: str = "Language",
) -> str:
    output = game_header + "\n"
    for index, pkg in enumerate(major.game_pkgs, start=1):
        output += _game_block(index, pkg, url_label=url_label)
    output += audio_header + "\n"
    for pkg in major.audio_pkgs:
        output += _audio_block(pkg, language_label=language_label)
    return output


def format_main(document: PackageDocument) -> str:
    """
    Format the current packages of every game in the document.

    Args:
        document: Decoded launcher API response.

    Returns:
        str: The report, one section per game.
    """
    output = ""
    for game_info in document.game_packages:
        major = game_info.main.major
        if major is None:
            output += NO_MAJOR_TEXT + "\n"
            continue
        output += f"Version: {major.version}\n"
        output += _format_bundle(major, GAME_PACKAGES_HEADER, AUDIO_PACKAGES_HEADER)
    return output


def format_pre_download_main(release: Release) -> str:
    """
    Format the pre-download major version of a game.
    """
    major = release.major
    if major is None:
        return NO_PRE_DOWNLOAD_MAJOR_TEXT + "\n"
    return _format_bundle(
        major,
        f"Pre-download Game Packages (Version {major.version}):",
        "Pre-download Audio Packages:",
    )


def format_pre_download_patches(release: Release, current_version: str) -> str:
    """
    Format the pre-download patches, an empty string if there is none.

    Args:
        release: The pre-download release.
        current_version: Version the patches upgrade to.
    """
    output = ""
    for patch in release.patches:
        output += f"Patch {trim_version(patch.version)}:\n"
        output += f"Version: {patch.version} to {current_version}\n"
        for index, pkg in enumerate(patch.game_pkgs, start=1):
            output += _game_block(index, pkg, url_label="Game Patch URL")
        for pkg in patch.audio_pkgs:
            output += _audio_block(pkg, language_label="Audio Patch Language")
    return output


def format_document(document: PackageDocument) -> tuple[str, str, str]:
    """
    Format the three reports shown by the viewer.

    Pre-download reports only cover the first game of the document.

    Returns:
        tuple[str, str, str]: Main, pre-download main and pre-download patches reports.
    """
    main = format_main(document)
    if not document.game_packages:
        return main, "", ""
    pre_download = document.game_packages[0].pre_download
    current_version = pre_download.major.version if pre_download.major else ""
    return (
        main,
        format_pre_download_main(pre_download),
        format_pre_download_patches(pre_download, current_version),
    )
