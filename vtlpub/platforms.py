"""Content platforms a publication can target, as bit flags."""

from __future__ import annotations

import enum


class ContentPlatform(enum.IntFlag):
    """Target platforms; combine them with ``|``."""

    W = 1 << 0
    TG = 1 << 1
    YT = 1 << 2
    BILIBILI = 1 << 3
    R = 1 << 4
    TIKTOK = 1 << 6
    X = 1 << 7
    # VK shares its bit with X.
    VK = 1 << 7


PLATFORM_MAX_NUM = 8
PLATFORMS_DEFAULT = 0
PLATFORMS_ALL = 0xFFFFFFFF

POSTFIXES = {
    ContentPlatform.W: "w",
    ContentPlatform.TG: "tg",
}


def check_tg(flags):
    """Return True if the Telegram platform is selected."""
    return bool(int(flags) & ContentPlatform.TG)


def check_w(flags):
    """Return True if the W platform is selected."""
    return bool(int(flags) & ContentPlatform.W)