"""History of a user's publications, stored in encrypted form."""

from __future__ import annotations

import hashlib
import time
from dataclasses import dataclass

from vtlpub.media import STANDARD_STRING_MAX_LENGTH


def current_time():
    """Return the current Unix time in whole seconds."""
    return int(time.time())


def encrypt(text):
    """Return a one-way SHA-256 digest of the text, in hex."""
    return hashlib.sha256(str(text).encode("utf-8")).hexdigest()


def _file_name(name):
    name = str(name)
    if len(name) >= STANDARD_STRING_MAX_LENGTH:
        raise ValueError(
            f"file name must be shorter than {STANDARD_STRING_MAX_LENGTH} characters"
        )
    return name


@dataclass(frozen=True)
class User:
    """A user of the publisher."""

    nickname: str = ""


@dataclass(frozen=True)
class UserHistory:
    """One publication made by a user."""

    user: User
    user_start_time: int
    publication_start_time: int
    text_file_name: str
    media_file_name: str = ""
    flags: int = 0

    @classmethod
    def for_text(cls, user, text_file_name, flags, scheduled_time=None):
        """Record a text publication, now or at a scheduled time."""
        now = current_time()
        return cls(
            user=user,
            user_start_time=now,
            publication_start_time=now if scheduled_time is None else scheduled_time,
            text_file_name=_file_name(text_file_name),
            flags=int(flags),
        )

    @classmethod
    def for_media_with_text(cls, user, text_file_name, media_file_name, flags):
        """Record a media publication captioned with a text, made now."""
        now = current_time()
        return cls(
            user=user,
            user_start_time=now,
            publication_start_time=now,
            text_file_name=_file_name(text_file_name),
            media_file_name=_file_name(media_file_name),
            flags=int(flags),
        )


class HistoryStore:
    """Keeps the encrypted history records of one user in ``records``."""

    def __init__(self, user=None):
        self.user = user if user is not None else User()
        self.records = []

    def _write(self, history):
        record = {
            "user": encrypt(history.user.nickname),
            "publication_start_time": encrypt(history.publication_start_time),
            "src_file_name": encrypt(history.text_file_name),
        }
        if history.media_file_name:
            record["media_file_name"] = encrypt(history.media_file_name)
        self.records.append(record)
        return record

    def save_text_publication(self, file_name, flags):
        """Store a text publication made now; return the stored record."""
        return self._write(UserHistory.for_text(self.user, file_name, flags))

    def save_media_with_text_publication(self, text_file_name, media_file_name, flags):
        """Store a media-with-text publication made now; return the stored record."""
        return self._write(
            UserHistory.for_media_with_text(self.user, text_file_name, media_file_name, flags)
        )