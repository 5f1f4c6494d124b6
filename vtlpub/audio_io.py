"""Reading audio files into metadata and data parts, and writing parts out."""

from __future__ import annotations

import os
import wave

from vtlpub.media import AudioCodec, AudioMetaData, AudioParams
from vtlpub.results import AppResult, PublicationError

BUFFER_DATA_LENGTH = 1024 * 10


def _open_source(file_name):
    try:
        return open(file_name, "rb")
    except FileNotFoundError as exc:
        raise PublicationError(AppResult.MISSING_FILE, f"Input file is missing: {file_name}") from exc
    except OSError as exc:
        raise PublicationError(AppResult.FILE_BUSY, f"Input file is busy: {file_name}") from exc


def _wave_params(source):
    try:
        with wave.open(source, "rb") as wav:
            sample_rate = wav.getframerate()
            channels = wav.getnchannels()
            width = wav.getsampwidth()
    except (wave.Error, EOFError):
        return AudioParams()
    finally:
        source.seek(0)
    bitrate = min(sample_rate * channels * width * 8, (1 << 32) - 1)
    return AudioParams(
        bitrate=bitrate,
        codec=AudioCodec.DEFAULT,
        sample_rate=sample_rate,
        num_channels=min(channels, 255),
    )


def read_meta_data(file_name):
    """Read the size and, for WAV files, the stream parameters of an audio file."""
    with _open_source(file_name) as source:
        size = os.fstat(source.fileno()).st_size
        params = _wave_params(source)
    return AudioMetaData(data_size=size, params=params)


def read_parts(file_name):
    """Yield the audio file's data in parts of at most BUFFER_DATA_LENGTH bytes."""
    with _open_source(file_name) as source:
        while part := source.read(BUFFER_DATA_LENGTH):
            yield part


def write_part(data, output):
    """Write one part of audio data to a binary output; return the bytes written."""
    payload = bytes(data)
    output.write(payload)
    return len(payload)