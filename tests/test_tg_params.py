from dataclasses import replace

from vtlpub.media import (
    AudioCodec,
    AudioParams,
    Color,
    ContainerType,
    Resolution,
    SubParams,
    VideoCodec,
    VideoParams,
)
from vtlpub.tg_params import tg_audio_params, tg_sub_params, tg_video_params


def test_audio_codec_becomes_aac_and_rest_is_kept():
    params = AudioParams(bitrate=128000, sample_rate=44100, num_channels=2, volume=50)
    result = tg_audio_params(params)
    assert result.codec is AudioCodec.AAC
    assert replace(result, codec=params.codec) == params
    assert params.codec is AudioCodec.DEFAULT


def test_sub_text_size_is_25():
    params = SubParams(color=Color(10, 20, 30), margin=4, font_name="Sans", text_size=12)
    result = tg_sub_params(params)
    assert result.text_size == 25
    assert replace(result, text_size=params.text_size) == params


def test_video_codec_becomes_h265_and_rest_is_kept():
    params = VideoParams(
        bitrate=5000,
        fps=30,
        resolution=Resolution(1920, 1080),
        codec=VideoCodec.VP9,
        container_type=ContainerType.MP4,
    )
    result = tg_video_params(params)
    assert result.codec is VideoCodec.H265
    assert result.resolution == params.resolution
    assert replace(result, codec=params.codec) == params


def test_adjusting_twice_is_stable():
    params = AudioParams(codec=AudioCodec.FLAC)
    assert tg_audio_params(tg_audio_params(params)) == tg_audio_params(params)