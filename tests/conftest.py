from __future__ import annotations

import json

import pytest


def make_payload(
    *,
    retcode: int = 0,
    message: str = "OK",
    major: dict | str | None = None,
    pre_download: dict | None = None,
) -> dict:
    if major is None:
        major = {
            "version": "5.0.0",
            "game_pkgs": [
                {
                    "url": "http://x/a",
                    "md5": "aa",
                    "size": "1073741824",
                    "decompressed_size": "2147483648",
                },
                {
                    "url": "http://x/a2",
                    "md5": "ab",
                    "size": "536870912",
                    "decompressed_size": "1073741824",
                },
            ],
            "audio_pkgs": [
                {
                    "language": "en-us",
                    "url": "http://x/b",
                    "md5": "bb",
                    "size": "536870912",
                    "decompressed_size": "536870912",
                },
                {
                    "language": "zh-cn",
                    "url": "http://x/c",
                    "md5": "cc",
                    "size": "1073741824",
                    "decompressed_size": "1073741824",
                },
            ],
            "res_list_url": "",
        }
    game_package = {
        "game": {"id": "gopR6Cufr3", "biz": "hk4e_global"},
        "main": {"major": major, "patches": []},
    }
    if pre_download is not None:
        game_package["pre_download"] = pre_download
    return {
        "retcode": retcode,
        "message": message,
        "data": {"game_packages": [game_package]},
    }


@pytest.fixture()
def payload() -> dict:
    return make_payload()


@pytest.fixture()
def raw_text(payload: dict) -> str:
    return json.dumps(payload)


@pytest.fixture()
def pre_download() -> dict:
    return {
        "major": {
            "version": "5.1.0",
            "game_pkgs": [
                {
                    "url": "http://x/pre",
                    "md5": "pp",
                    "size": "2147483648",
                    "decompressed_size": "4294967296",
                }
            ],
            "audio_pkgs": [
                {
                    "language": "ja-jp",
                    "url": "http://x/pre-ja",
                    "md5": "pj",
                    "size": "1073741824",
                    "decompressed_size": "1073741824",
                }
            ],
            "res_list_url": "",
        },
        "patches": [
            {
                "version": "5.0.0",
                "game_pkgs": [
                    {
                        "url": "http://x/patch-500",
                        "md5": "p0",
                        "size": "1073741824",
                        "decompressed_size": "1073741824",
                    }
                ],
                "audio_pkgs": [
                    {
                        "language": "fr-fr",
                        "url": "http://x/patch-500-fr",
                        "md5": "pf",
                        "size": "0",
                        "decompressed_size": "0",
                    }
                ],
                "res_list_url": "",
            },
            {
                "version": "4.8.1",
                "game_pkgs": [],
                "audio_pkgs": [],
                "res_list_url": "",
            },
        ],
    }
