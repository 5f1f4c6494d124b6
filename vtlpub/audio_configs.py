"""Per-platform audio output configurations for a source audio file."""

from __future__ import annotations

from pathlib import Path

from vtlpub.audio_io import read_meta_data
from vtlpub.media import AudioConfig
from vtlpub.platforms import POSTFIXES, ContentPlatform, check_tg
from vtlpub.tg_params import tg_audio_params


def _output_name(src_file_name, postfix):
    path = Path(src_file_name)
    return str(path.with_name(f"{path.stem}_{postfix}{path.suffix}"))


def init_audio_configs(src_file_name, flags):
    """Return the audio configs and their platforms for the selected platforms.

    The two lists run in parallel: configs[i] is meant for indices[i].
    """
    meta_data = read_meta_data(src_file_name)
    configs = []
    indices = []
    if check_tg(flags):
        configs.append(
            AudioConfig(
                file_name=_output_name(src_file_name, POSTFIXES[ContentPlatform.TG]),
                params=tg_audio_params(meta_data.params),
            )
        )
        indices.append(ContentPlatform.TG)
    return configs, indices