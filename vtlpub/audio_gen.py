"""Generation of per-platform audio files from a source file."""

from __future__ import annotations

import os
from contextlib import ExitStack

from vtlpub.audio_io import read_meta_data, read_parts, write_part
from vtlpub.results import AppResult, PublicationError


def _open_output(file_name, src_file_name):
    if os.path.exists(file_name) and os.path.samefile(file_name, src_file_name):
        raise PublicationError(
            AppResult.WRITE_FILE_BUSY, f"Output would overwrite the source: {file_name}"
        )
    try:
        return open(file_name, "wb")
    except OSError as exc:
        raise PublicationError(AppResult.WRITE_FILE_BUSY, f"Cannot write file: {file_name}") from exc


def generate_audio(file_name, configs):
    """Write the source audio to every configured output; return the output names.

    The data is passed through unchanged; each config's parameters describe
    the stream the platform expects.
    """
    configs = list(configs)
    read_meta_data(file_name)
    with ExitStack() as stack:
        outputs = [stack.enter_context(_open_output(c.file_name, file_name)) for c in configs]
        if outputs:
            for part in read_parts(file_name):
                for output in outputs:
                    write_part(part, output)
    return [config.file_name for config in configs]