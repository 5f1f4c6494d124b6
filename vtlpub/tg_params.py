"""Media parameters required by the Telegram platform."""

from __future__ import annotations

from dataclasses import replace

from vtlpub.media import AudioCodec, VideoCodec

TG_SUB_TEXT_SIZE = 25


def tg_audio_params(params):
    """Return a copy of the audio parameters adjusted for Telegram."""
    return replace(params, codec=AudioCodec.AAC)


def tg_sub_params(params):
    """Return a copy of the subtitle parameters adjusted for Telegram."""
    return replace(params, text_size=TG_SUB_TEXT_SIZE)


def tg_video_params(params):
    """Return a copy of the video parameters adjusted for Telegram."""
    return replace(params, codec=VideoCodec.H265)