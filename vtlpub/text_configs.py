"""Which text markups each platform selection needs, and where each one is written."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from vtlpub.markup import (
    REGULAR_SHIFT,
    TEXT_TYPE_BB,
    TEXT_TYPE_HTML,
    TEXT_TYPE_REGULAR,
    TEXT_TYPE_STANDARD_MD,
    TEXT_TYPE_TELEGRAM_MD,
    MarkupType,
)
from vtlpub.platforms import ContentPlatform

HTML_MASK = int(ContentPlatform.W)
STANDARD_MD_MASK = int(ContentPlatform.R)
TELEGRAM_MD_MASK = int(ContentPlatform.TG)
BB_MASK = int(ContentPlatform.VK)
REGULAR_TEXT_MASK = int(ContentPlatform.TIKTOK | ContentPlatform.X)

REGULAR_TEXT_POSTFIX = "reg"
HTML_POSTFIX = "html"
STANDARD_MD_POSTFIX = "s_md"
TELEGRAM_MD_POSTFIX = "t_md"
BB_POSTFIX = "bb"

STANDARD_MD_INDEX = int(MarkupType.STANDARD_MD)
TELEGRAM_MD_INDEX = int(MarkupType.TELEGRAM_MD)
HTML_INDEX = int(MarkupType.HTML)
BB_INDEX = int(MarkupType.BB)
REGULAR_INDEX = REGULAR_SHIFT

# (file-name index, platform mask, text-type flag, postfix), in naming order.
_TEXT_TYPES = (
    (REGULAR_INDEX, REGULAR_TEXT_MASK, TEXT_TYPE_REGULAR, REGULAR_TEXT_POSTFIX),
    (STANDARD_MD_INDEX, STANDARD_MD_MASK, TEXT_TYPE_STANDARD_MD, STANDARD_MD_POSTFIX),
    (TELEGRAM_MD_INDEX, TELEGRAM_MD_MASK, TEXT_TYPE_TELEGRAM_MD, TELEGRAM_MD_POSTFIX),
    (HTML_INDEX, HTML_MASK, TEXT_TYPE_HTML, HTML_POSTFIX),
    (BB_INDEX, BB_MASK, TEXT_TYPE_BB, BB_POSTFIX),
)


@dataclass
class TextConfigs:
    """Requested text types and the output file name of each one.

    ``file_names`` maps a text-type index (a MarkupType value, or
    REGULAR_INDEX for plain text) to the file that text is written to.
    """

    flags: int = 0
    file_names: dict = field(default_factory=dict)


def _selected(platform_flags, mask):
    return bool(int(platform_flags) & mask)


def _output_name(src_file_name, postfix):
    path = Path(src_file_name)
    return str(path.with_name(f"{path.stem}_{postfix}{path.suffix}"))


def text_type_flags(platform_flags):
    """Return the text-type flags that the selected platforms need."""
    result = 0
    for _, mask, flag, _ in _TEXT_TYPES:
        if _selected(platform_flags, mask):
            result |= flag
    return result


def init_text_configs(platform_flags, src_file_name):
    """Build the text configs for the selected platforms and a source text file."""
    file_names = {
        index: _output_name(src_file_name, postfix)
        for index, mask, _, postfix in _TEXT_TYPES
        if _selected(platform_flags, mask)
    }
    return TextConfigs(flags=text_type_flags(platform_flags), file_names=file_names)