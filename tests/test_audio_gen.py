import pytest

from vtlpub.audio_gen import generate_audio
from vtlpub.audio_io import BUFFER_DATA_LENGTH
from vtlpub.media import AudioConfig
from vtlpub.results import AppResult, PublicationError


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "audio0.mp3"
    path.write_bytes(bytes(i % 256 for i in range(BUFFER_DATA_LENGTH + 777)))
    return path


def test_outputs_receive_the_source_data(source, tmp_path):
    names = [str(tmp_path / "a_tg.mp3"), str(tmp_path / "a_w.mp3")]
    result = generate_audio(source, [AudioConfig(name) for name in names])
    assert result == names
    for name in names:
        with open(name, "rb") as handle:
            assert handle.read() == source.read_bytes()


def test_no_configs_writes_nothing(source, tmp_path):
    before = sorted(tmp_path.iterdir())
    assert generate_audio(source, []) == []
    assert sorted(tmp_path.iterdir()) == before


def test_missing_source_raises_and_creates_no_output(tmp_path):
    out = tmp_path / "out.mp3"
    with pytest.raises(PublicationError) as info:
        generate_audio(tmp_path / "missing.mp3", [AudioConfig(str(out))])
    assert info.value.result is AppResult.MISSING_FILE
    assert not out.exists()


def test_output_equal_to_source_is_refused(source):
    content = source.read_bytes()
    with pytest.raises(PublicationError) as info:
        generate_audio(source, [AudioConfig(str(source))])
    assert info.value.result is AppResult.WRITE_FILE_BUSY
    assert source.read_bytes() == content


def test_unwritable_output_raises(source, tmp_path):
    with pytest.raises(PublicationError) as info:
        generate_audio(source, [AudioConfig(str(tmp_path / "no_dir" / "out.mp3"))])
    assert info.value.result is AppResult.WRITE_FILE_BUSY