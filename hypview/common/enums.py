from enum import Enum


class GameChannel(Enum):
    Overseas = 0
    China = 1

    @staticmethod
    def from_str(s: str) -> "GameChannel":
        """
        Converts a channel name (e.g. "overseas", "china", "os", "cn") to a GameChannel.
        """
        match s.strip().lower():
            case "overseas" | "os" | "global":
                return GameChannel.Overseas
            case "china" | "cn":
                return GameChannel.China
            case _:
                raise ValueError(f"Invalid channel string: {s}")


class VoicePackLanguage(Enum):
    Japanese = "ja-jp"
    Chinese = "zh-cn"
    Taiwanese = "zh-tw"
    Korean = "ko-kr"
    English = "en-us"

    @staticmethod
    def from_remote_str(s: str) -> "VoicePackLanguage":
        """
        Converts a language string from remote server to a VoicePackLanguage enum.
        """
        try:
            return VoicePackLanguage(s)
        except ValueError:
            raise ValueError(f"Invalid language string: {s}") from None


# Applied in order after the base lookup, only in share messages.
SHARE_LABEL_OVERRIDES: list[tuple[str, str]] = [
    ("Chinese", "China"),
    ("English", "English - If anything else"),
]


def language_name(code: str) -> str:
    """
    Get the display name of a language code, unknown codes are returned as-is.
    """
    try:
        return VoicePackLanguage.from_remote_str(code).name
    except ValueError:
        return code


def share_label(name: str) -> str:
    """
    Get the wording used for a language in the share message.
    """
    for original, replacement in SHARE_LABEL_OVERRIDES:
        if name == original:
            return replacement
    return name
