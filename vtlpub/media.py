"""Media container data: audio, video and subtitle parameters and payloads."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

STANDARD_STRING_MAX_LENGTH = 1024


def _check_uint(name, value, bits):
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} must be in 0..{(1 << bits) - 1}, got {value}")


class AudioCodec(enum.IntEnum):
    """Audio codec of a stream."""

    DEFAULT = 0
    AAC = 1
    VORBIS = 2
    OPUS = 3
    FLAC = 4


@dataclass(frozen=True)
class AudioParams:
    """Encoding parameters of an audio stream."""

    bitrate: int = 0
    codec: AudioCodec = AudioCodec.DEFAULT
    sample_rate: int = 0
    num_channels: int = 0
    volume: int = 0

    def __post_init__(self):
        object.__setattr__(self, "codec", AudioCodec(self.codec))
        _check_uint("bitrate", self.bitrate, 32)
        _check_uint("sample_rate", self.sample_rate, 32)
        _check_uint("num_channels", self.num_channels, 8)
        _check_uint("volume", self.volume, 8)


@dataclass(frozen=True)
class AudioMetaData:
    """Size of the audio data and its parameters."""

    data_size: int = 0
    params: AudioParams = field(default_factory=AudioParams)

    def __post_init__(self):
        if self.data_size < 0:
            raise ValueError(f"data_size must not be negative, got {self.data_size}")


@dataclass
class Audio:
    """An audio stream with the part of its data currently loaded."""

    meta_data: AudioMetaData = field(default_factory=AudioMetaData)
    current_part: bytes = b""


@dataclass(frozen=True)
class AudioConfig:
    """Output file and parameters of one generated audio file."""

    file_name: str
    params: AudioParams = field(default_factory=AudioParams)


class VideoCodec(enum.IntEnum):
    """Video codec of a stream."""

    DEFAULT = 0
    AV1 = 1
    H264 = 2
    H265 = 3
    MPEG1 = 4
    MPEG2 = 5
    MPEG4 = 6
    RAW_VIDEO = 7
    VP5 = 8
    VP6 = 9
    VP7 = 10
    VP8 = 11
    VP9 = 12


class ContainerType(enum.IntEnum):
    """Video container format."""

    DEFAULT = 0
    MOV = 1
    MP4 = 2
    MKV = 3
    WEBM = 4


@dataclass(frozen=True)
class Resolution:
    """Frame size in pixels."""

    width: int = 0
    height: int = 0

    def __post_init__(self):
        _check_uint("width", self.width, 16)
        _check_uint("height", self.height, 16)


@dataclass(frozen=True)
class VideoParams:
    """Encoding parameters of a video stream."""

    bitrate: int = 0
    fps: int = 0
    resolution: Resolution = field(default_factory=Resolution)
    codec: VideoCodec = VideoCodec.DEFAULT
    container_type: ContainerType = ContainerType.DEFAULT

    def __post_init__(self):
        object.__setattr__(self, "codec", VideoCodec(self.codec))
        object.__setattr__(self, "container_type", ContainerType(self.container_type))
        _check_uint("bitrate", self.bitrate, 32)
        _check_uint("fps", self.fps, 16)


@dataclass(frozen=True)
class VideoMetaData:
    """Size of the video data and its parameters."""

    data_size: int = 0
    params: VideoParams = field(default_factory=VideoParams)

    def __post_init__(self):
        if self.data_size < 0:
            raise ValueError(f"data_size must not be negative, got {self.data_size}")


@dataclass
class Video:
    """A video stream with the part of its data currently loaded."""

    meta_data: VideoMetaData = field(default_factory=VideoMetaData)
    current_part: bytes = b""


class SubFormat(enum.IntEnum):
    """Subtitle file format."""

    ASS = 0
    SRT = 1
    VTT = 2
    TTML = 3


class HorizontalAlign(enum.IntEnum):
    """Horizontal alignment of subtitle text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        _check_uint("r", self.r, 8)
        _check_uint("g", self.g, 8)
        _check_uint("b", self.b, 8)


@dataclass(frozen=True)
class SubParams:
    """Presentation parameters of subtitles."""

    horizontal_align: HorizontalAlign = HorizontalAlign.LEFT
    color: Color = field(default_factory=Color)
    background_color: Color = field(default_factory=Color)
    outline_color: Color = field(default_factory=Color)
    text_size: int = 0
    margin: int = 0
    font_name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "horizontal_align", HorizontalAlign(self.horizontal_align))
        _check_uint("text_size", self.text_size, 8)
        _check_uint("margin", self.margin, 8)
        if len(self.font_name) >= STANDARD_STRING_MAX_LENGTH:
            raise ValueError(
                f"font_name must be shorter than {STANDARD_STRING_MAX_LENGTH} characters"
            )


@dataclass(frozen=True)
class SubMetaData:
    """Size of the subtitle data and its parameters."""

    data_size: int = 0
    params: SubParams = field(default_factory=SubParams)

    def __post_init__(self):
        if self.data_size < 0:
            raise ValueError(f"data_size must not be negative, got {self.data_size}")


@dataclass
class Sub:
    """Subtitles with their raw data."""

    meta_data: SubMetaData = field(default_factory=SubMetaData)
    data: bytes = b""


@dataclass
class MediaContainer:
    """Audio, subtitles and video of one media file."""

    audio: Audio = field(default_factory=Audio)
    sub: Sub = field(default_factory=Sub)
    video: Video = field(default_factory=Video)