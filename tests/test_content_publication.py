import pytest

from vtlpub.content_publication import publish_audio_with_marked_text, publish_marked_texts
from vtlpub.media import AudioConfig
from vtlpub.platforms import ContentPlatform
from vtlpub.text_configs import HTML_INDEX, TELEGRAM_MD_INDEX, TextConfigs
from vtlpub.tg_net import TelegramApi


@pytest.fixture
def configs(tmp_path):
    tg = tmp_path / "t.md"
    tg.write_text("*tg*", encoding="utf-8")
    html = tmp_path / "h.html"
    html.write_text("<b>w</b>", encoding="utf-8")
    return TextConfigs(flags=0, file_names={TELEGRAM_MD_INDEX: str(tg), HTML_INDEX: str(html)})


def test_tg_publishes_telegram_text(configs):
    api = TelegramApi()
    posts = publish_marked_texts(configs, ContentPlatform.TG, api)
    assert [p.file_name for p in posts] == [configs.file_names[TELEGRAM_MD_INDEX]]
    assert posts[0].text == "*tg*"
    assert api.outbox == posts


def test_w_publishes_html_text(configs):
    api = TelegramApi()
    posts = publish_marked_texts(configs, ContentPlatform.W, api)
    assert [p.file_name for p in posts] == [configs.file_names[HTML_INDEX]]


def test_both_platforms(configs):
    api = TelegramApi()
    posts = publish_marked_texts(configs, ContentPlatform.W | ContentPlatform.TG, api)
    assert len(posts) == 2
    assert len(api.outbox) == 2


def test_no_platform(configs):
    api = TelegramApi()
    assert publish_marked_texts(configs, ContentPlatform.YT, api) == []
    assert api.outbox == []


def test_missing_config_entry():
    with pytest.raises(ValueError):
        publish_marked_texts(TextConfigs(), ContentPlatform.TG, TelegramApi())


def test_audio_published_for_tg(tmp_path, configs):
    audio = tmp_path / "a_tg.mp3"
    audio.write_bytes(b"data")
    api = TelegramApi()
    posts = publish_audio_with_marked_text(
        [AudioConfig(str(audio))], [ContentPlatform.TG], configs, ContentPlatform.TG, api
    )
    assert len(posts) == 1
    assert posts[0].file_name == str(audio)
    assert posts[0].text == "*tg*"


def test_audio_skipped_for_other_platform(tmp_path, configs):
    audio = tmp_path / "a.mp3"
    audio.write_bytes(b"data")
    api = TelegramApi()
    posts = publish_audio_with_marked_text(
        [AudioConfig(str(audio))], [ContentPlatform.W], configs, ContentPlatform.W, api
    )
    assert posts == []
    assert api.outbox == []