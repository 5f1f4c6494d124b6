"""Publishing generated texts and audio on the selected content platforms."""

from __future__ import annotations

from vtlpub.platforms import check_tg, check_w
from vtlpub.text_configs import HTML_INDEX, TELEGRAM_MD_INDEX
from vtlpub.tg_net import TelegramApi


def _file_for(text_configs, index):
    try:
        return text_configs.file_names[index]
    except KeyError:
        raise ValueError(f"no output file name for text type {index}") from None


def publish_marked_texts(configs, flags, api=None):
    """Send the generated texts to the selected platforms; return the posts."""
    api = TelegramApi() if api is None else api
    posts = []
    if check_tg(flags):
        posts.append(api.send_marked_text(_file_for(configs, TELEGRAM_MD_INDEX), None))
    if check_w(flags):
        posts.append(api.send_marked_text(_file_for(configs, HTML_INDEX), None))
    return posts


def publish_audio_with_marked_text(audio_configs, indices, text_configs, flags, api=None):
    """Send each generated audio file with its caption to its platform; return the posts.

    ``audio_configs[i]`` is the audio meant for platform ``indices[i]``.
    """
    api = TelegramApi() if api is None else api
    posts = []
    for config, platform in zip(audio_configs, indices):
        if check_tg(platform):
            posts.append(
                api.send_audio_with_marked_text(
                    config.file_name, _file_for(text_configs, TELEGRAM_MD_INDEX)
                )
            )
    return posts