"""Marked publication text: parsing, rendering in several markups, and file access."""

from __future__ import annotations

import enum
import filecmp
import html
import os
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from vtlpub.markup import MarkupType
from vtlpub.results import AppResult, PublicationError

TEXT_DEFAULT_LENGTH = 100000


class Modification(enum.IntFlag):
    """Style applied to a part of a marked text."""

    NONE = 0
    BOLD = 1 << 0
    ITALIC = 1 << 1
    STRIKETHROUGH = 1 << 2


_MODIFICATION_ORDER = (Modification.BOLD, Modification.ITALIC, Modification.STRIKETHROUGH)


def set_bold(flags):
    """Return the flags with bold added."""
    return Modification(flags) | Modification.BOLD


def set_italic(flags):
    """Return the flags with italic added."""
    return Modification(flags) | Modification.ITALIC


def set_strikethrough(flags):
    """Return the flags with strikethrough added."""
    return Modification(flags) | Modification.STRIKETHROUGH


@dataclass(frozen=True)
class MarkedTextPart:
    """A run of text sharing one set of modifications."""

    text: str
    modifications: Modification = Modification.NONE


@dataclass
class MarkedText:
    """A text made of styled parts."""

    parts: list = field(default_factory=list)


@dataclass(frozen=True)
class _Marker:
    open: str
    close: str
    modification: Modification


@dataclass(frozen=True)
class _Syntax:
    markers: tuple
    escaped: str | None
    case_insensitive: bool
    decode: Callable[[str], str]
    encode: Callable[[str], str]


def _backslash_escaper(chars):
    def encode(text):
        return "".join("\\" + ch if ch in chars else ch for ch in text)

    return encode


def _identity(text):
    return text


_STANDARD_MD_ESCAPED = "\\`*_~[]"
_TELEGRAM_MD_ESCAPED = "\\_*[]()~`>#+-=|{}.!"

_SYNTAXES = {
    MarkupType.STANDARD_MD: _Syntax(
        markers=(
            _Marker("**", "**", Modification.BOLD),
            _Marker("_", "_", Modification.ITALIC),
            _Marker("*", "*", Modification.ITALIC),
            _Marker("~~", "~~", Modification.STRIKETHROUGH),
        ),
        escaped=_STANDARD_MD_ESCAPED,
        case_insensitive=False,
        decode=_identity,
        encode=_backslash_escaper(_STANDARD_MD_ESCAPED),
    ),
    MarkupType.TELEGRAM_MD: _Syntax(
        markers=(
            _Marker("*", "*", Modification.BOLD),
            _Marker("_", "_", Modification.ITALIC),
            _Marker("~", "~", Modification.STRIKETHROUGH),
        ),
        escaped=_TELEGRAM_MD_ESCAPED,
        case_insensitive=False,
        decode=_identity,
        encode=_backslash_escaper(_TELEGRAM_MD_ESCAPED),
    ),
    MarkupType.HTML: _Syntax(
        markers=(
            _Marker("<b>", "</b>", Modification.BOLD),
            _Marker("<strong>", "</strong>", Modification.BOLD),
            _Marker("<i>", "</i>", Modification.ITALIC),
            _Marker("<em>", "</em>", Modification.ITALIC),
            _Marker("<s>", "</s>", Modification.STRIKETHROUGH),
            _Marker("<strike>", "</strike>", Modification.STRIKETHROUGH),
            _Marker("<del>", "</del>", Modification.STRIKETHROUGH),
        ),
        escaped=None,
        case_insensitive=True,
        decode=html.unescape,
        encode=lambda text: html.escape(text, quote=False),
    ),
    MarkupType.BB: _Syntax(
        markers=(
            _Marker("[b]", "[/b]", Modification.BOLD),
            _Marker("[i]", "[/i]", Modification.ITALIC),
            _Marker("[s]", "[/s]", Modification.STRIKETHROUGH),
        ),
        escaped=None,
        case_insensitive=True,
        decode=_identity,
        encode=_identity,
    ),
}


def _token_pattern(syntax):
    tokens = {m.open for m in syntax.markers} | {m.close for m in syntax.markers}
    alternation = "|".join(re.escape(t) for t in sorted(tokens, key=len, reverse=True))
    pattern = rf"(?P<token>{alternation})"
    if syntax.escaped is not None:
        pattern = rf"\\(?P<escape>.)|" + pattern
    flags = re.DOTALL | (re.IGNORECASE if syntax.case_insensitive else 0)
    return re.compile(pattern, flags)


def _merged(parts):
    merged = []
    for part in parts:
        if not part.text:
            continue
        if merged and merged[-1].modifications == part.modifications:
            merged[-1] = MarkedTextPart(merged[-1].text + part.text, part.modifications)
        else:
            merged.append(MarkedTextPart(part.text, Modification(part.modifications)))
    return merged


def parse_marked_text(text, markup_type):
    """Parse text written in the given markup into a MarkedText."""
    syntax = _SYNTAXES[MarkupType(markup_type)]

    def key(token):
        return token.lower() if syntax.case_insensitive else token

    openers = {key(m.open): m.modification for m in syntax.markers}
    closers = {key(m.close): m.modification for m in syntax.markers}

    parts = []
    buffer = []
    active = Modification.NONE

    def flush():
        if buffer:
            parts.append(MarkedTextPart("".join(buffer), active))
            buffer.clear()

    position = 0
    for match in _token_pattern(syntax).finditer(text):
        buffer.append(syntax.decode(text[position:match.start()]))
        position = match.end()
        if match.lastgroup == "escape":
            buffer.append(match.group("escape"))
            continue
        token = key(match.group("token"))
        closing = closers.get(token)
        opening = openers.get(token)
        if closing is not None and closing in active:
            flush()
            active ^= closing
        elif opening is not None and opening not in active:
            flush()
            active |= opening
        else:
            buffer.append(match.group("token"))
    buffer.append(syntax.decode(text[position:]))
    flush()
    return MarkedText(_merged(parts))


def _render(marked, markup_type):
    syntax = _SYNTAXES[markup_type]
    primary = {}
    for marker in syntax.markers:
        primary.setdefault(marker.modification, marker)
    pieces = []
    for part in _merged(marked.parts):
        markers = [primary[m] for m in _MODIFICATION_ORDER if m in part.modifications]
        pieces.extend(m.open for m in markers)
        pieces.append(syntax.encode(part.text))
        pieces.extend(m.close for m in reversed(markers))
    return "".join(pieces)


def to_regular_text(marked):
    """Return the text without any markup."""
    return "".join(part.text for part in marked.parts)


def to_standard_md(marked):
    """Render as standard Markdown."""
    return _render(marked, MarkupType.STANDARD_MD)


def to_telegram_md(marked):
    """Render as Telegram Markdown."""
    return _render(marked, MarkupType.TELEGRAM_MD)


def to_html(marked):
    """Render as HTML."""
    return _render(marked, MarkupType.HTML)


def to_bb(marked):
    """Render as BB code."""
    return _render(marked, MarkupType.BB)


def read_text(file_name):
    """Read a publication text file."""
    try:
        return Path(file_name).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PublicationError(AppResult.MISSING_FILE, f"Input file is missing: {file_name}") from exc
    except OSError as exc:
        raise PublicationError(AppResult.FILE_BUSY, f"Input file is busy: {file_name}") from exc


def write_text(text, file_name):
    """Write a publication text file."""
    try:
        Path(file_name).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise PublicationError(AppResult.WRITE_FILE_BUSY, f"Cannot write file: {file_name}") from exc


def copy_file(out_file_name, src_file_name):
    """Copy the source file to the output file."""
    if not os.path.exists(src_file_name):
        raise PublicationError(AppResult.MISSING_FILE, f"Input file is missing: {src_file_name}")
    try:
        shutil.copyfile(src_file_name, out_file_name)
    except shutil.SameFileError:
        return
    except OSError as exc:
        raise PublicationError(AppResult.WRITE_FILE_BUSY, f"Cannot write file: {out_file_name}") from exc


def files_equal(first_file_name, second_file_name):
    """Return True if both names refer to the same file or to files with equal content."""
    try:
        if os.path.samefile(first_file_name, second_file_name):
            return True
        return filecmp.cmp(first_file_name, second_file_name, shallow=False)
    except OSError:
        return False