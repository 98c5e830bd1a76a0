from hypview.common.api.resource import Major
from hypview.common.enums import language_name, share_label
from hypview.common.formatting import (
    AUDIO_PACKAGES_HEADER,
    GAME_PACKAGES_HEADER,
    to_gib,
)
from hypview.constants import AUDIO_PACK_HINT


class ShareEntry:
    def __init__(self, label: str, size: str, url: str):
        self.label = label
        # Size in GB without the unit, e.g. "1.00"
        self.size = size
        self.url = url


def _render(parts: list[ShareEntry], audios: list[ShareEntry]) -> str:
    message = ""
    for part in parts:
        message += f"{part.label} ({part.size}GB):\n{part.url}\n"
    message += f"\n{AUDIO_PACK_HINT}\n"
    for audio in audios:
        message += f"{audio.label} ({audio.size}GB):\n{audio.url}\n"
    return message


def _group(lines: list[str], marker: str) -> list[tuple[str, str, str]]:
    """
    Group lines starting at each marker line.

    Returns (marker value, url, size) for each group, lines before the first
    marker are skipped.
    """
    groups = []
    i = 0
    while i < len(lines):
        if not lines[i].startswith(marker):
            i += 1
            continue
        value = lines[i]
        i += 1
        url = ""
        size = ""
        while i < len(lines) and not lines[i].startswith(marker):
            if lines[i].startswith("[URL] "):
                url = lines[i].replace("[URL] ", "")
            elif lines[i].startswith("[Size] "):
                size = lines[i].replace("[Size] ", "").replace("GB", "").strip()
            i += 1
        groups.append((value, url, size))
    return groups


def derive_share_message(main_text: str) -> str:
    """
    Turn a report made by format_main into a short message to share.

    Lines outside the "Game Packages:" and "Audio Packages:" regions are
    ignored, missing regions just produce empty sections.

    Args:
        main_text: Text returned by format_main.

    Returns:
        str: The share message.
    """
    game_lines = []
    audio_lines = []
    region = None
    for line in main_text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line == GAME_PACKAGES_HEADER:
            region = game_lines
            continue
        elif line == AUDIO_PACKAGES_HEADER:
            region = audio_lines
            continue
        if region is not None:
            region.append(line)

    parts = []
    for value, url, size in _group(game_lines, "[Part"):
        number = value.removeprefix("[Part ").removesuffix("]")
        parts.append(ShareEntry(f"Part {number}", size, url))
    audios = []
    for value, url, size in _group(audio_lines, "[Language] "):
        language = language_name(value.replace("[Language] ", ""))
        audios.append(ShareEntry(share_label(language), size, url))
    return _render(parts, audios)


def build_share_message(major: Major) -> str:
    """
    Build the share message straight from a major version.

    Gives the same result as derive_share_message(format_main(...)) for a
    document holding only this version.
    """
    parts = [
        ShareEntry(f"Part {index}", f"{to_gib(pkg.size):.2f}", pkg.url)
        for index, pkg in enumerate(major.game_pkgs, start=1)
    ]
    audios = [
        ShareEntry(
            share_label(language_name(pkg.language)),
            f"{to_gib(pkg.size):.2f}",
            pkg.url,
        )
        for pkg in major.audio_pkgs
    ]
    return _render(parts, audios)
