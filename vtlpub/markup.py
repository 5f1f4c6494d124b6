"""Markup types of publication texts and the text-type flags built from them."""

from __future__ import annotations

import enum


class MarkupType(enum.IntEnum):
    """Markup language a text is written in."""

    STANDARD_MD = 0
    TELEGRAM_MD = 1
    HTML = 2
    BB = 3

    @property
    def flag(self):
        """The text-type flag bit of this markup type."""
        return 1 << int(self)


MARKUP_TYPE_MAX = MarkupType.BB
REGULAR_SHIFT = int(MARKUP_TYPE_MAX) + 1
TEXT_TYPE_MAX = REGULAR_SHIFT
TEXT_TYPE_MAX_NUM = TEXT_TYPE_MAX + 1

TEXT_TYPE_STANDARD_MD = MarkupType.STANDARD_MD.flag
TEXT_TYPE_TELEGRAM_MD = MarkupType.TELEGRAM_MD.flag
TEXT_TYPE_HTML = MarkupType.HTML.flag
TEXT_TYPE_BB = MarkupType.BB.flag
TEXT_TYPE_REGULAR = 1 << REGULAR_SHIFT


def check_standard_md(flags):
    """Return True if standard Markdown output is requested."""
    return bool(int(flags) & TEXT_TYPE_STANDARD_MD)


def check_telegram_md(flags):
    """Return True if Telegram Markdown output is requested."""
    return bool(int(flags) & TEXT_TYPE_TELEGRAM_MD)


def check_html(flags):
    """Return True if HTML output is requested."""
    return bool(int(flags) & TEXT_TYPE_HTML)


def check_bb(flags):
    """Return True if BB-code output is requested."""
    return bool(int(flags) & TEXT_TYPE_BB)


def check_regular_text(flags):
    """Return True if plain text output is requested."""
    return bool(int(flags) & TEXT_TYPE_REGULAR)