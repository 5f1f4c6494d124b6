"""Outgoing Telegram posts: texts, marked texts, videos and audio with captions."""

from __future__ import annotations

import os
from dataclasses import dataclass

from vtlpub.results import AppResult, PublicationError
from vtlpub.text import read_text


@dataclass(frozen=True)
class _Post:
    kind: str
    file_name: str
    scheduled_time: int | None = None
    text: str | None = None


def _checked_schedule(scheduled_time):
    if scheduled_time is None:
        return None
    if isinstance(scheduled_time, bool) or not isinstance(scheduled_time, int):
        raise ValueError(f"scheduled_time must be an integer timestamp, got {scheduled_time!r}")
    if scheduled_time < 0:
        raise ValueError(f"scheduled_time must not be negative, got {scheduled_time}")
    return scheduled_time


def _require_file(file_name):
    if not os.path.isfile(file_name):
        raise PublicationError(AppResult.MISSING_FILE, f"Input file is missing: {file_name}")


class TelegramApi:
    """Collects posts for Telegram in ``outbox``.

    A post with no scheduled time is sent now; otherwise it waits until
    the given Unix timestamp.
    """

    def __init__(self):
        self.outbox = []

    def _queue(self, post):
        self.outbox.append(post)
        return post

    def send_text(self, file_name, scheduled_time=None):
        """Queue the plain text of a file."""
        scheduled_time = _checked_schedule(scheduled_time)
        return self._queue(_Post("text", str(file_name), scheduled_time, read_text(file_name)))

    def send_marked_text(self, file_name, scheduled_time=None):
        """Queue the marked text of a file."""
        scheduled_time = _checked_schedule(scheduled_time)
        return self._queue(
            _Post("marked_text", str(file_name), scheduled_time, read_text(file_name))
        )

    def send_video(self, file_name, scheduled_time=None):
        """Queue a video file."""
        scheduled_time = _checked_schedule(scheduled_time)
        _require_file(file_name)
        return self._queue(_Post("video", str(file_name), scheduled_time))

    def send_audio_with_marked_text(self, audio_file_name, text_file_name):
        """Queue an audio file captioned with the marked text of a text file, to go out now."""
        _require_file(audio_file_name)
        caption = read_text(text_file_name)
        return self._queue(_Post("audio_with_marked_text", str(audio_file_name), None, caption))