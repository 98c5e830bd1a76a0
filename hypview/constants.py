class LAUNCHER_API:
    """Launcher API constants."""

    RESOURCE_PATH: str = "hyp/hyp-connect/api/getGamePackages"
    OS: dict = {
        "url": "https://sg-hyp-api.hoyoverse.com/",
        "params": {
            "launcher_id": "VYTpXlbWo8",
        },
        "game_ids": ["gopR6Cufr3"],
    }
    CN: dict = {
        "url": "https://hyp-api.mihoyo.com/",
        "params": {
            "launcher_id": "jGHBHlcOq1",
        },
        "game_ids": ["1Z8W5NHUQb"],
    }


APP_TITLE = "Genshin Package Viewer"
PLACEHOLDER_TEXT = "Press 'Fetch Data' to get the latest data."
NO_MAJOR_TEXT = "No major version data available."
NO_PRE_DOWNLOAD_MAJOR_TEXT = "No pre-download major version data available."
AUDIO_PACK_HINT = (
    "You also need to download an audio pack corresponding to your system's "
    "region language."
)
# 1 GiB, still labelled "GB" in the reports
GIB = 1073741824.0
