# vtlpub

vtlpub prepares one source file for several content platforms at once. It
works out which text markups the selected platforms need, and writes the
source text in each of those markups. It also sets the audio, video and
subtitle parameters that Telegram expects and writes one audio file for each
platform. The prepared texts and audio are queued as posts, and a history of
publications is kept in encrypted form.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Platforms and markups

`vtlpub.platforms.ContentPlatform` is a set of bit flags (`W`, `TG`, `YT`,
`BILIBILI`, `R`, `TIKTOK`, `X`, `VK`). Combine them with `|`. `check_tg` and
`check_w` test a selection.

`vtlpub.markup.MarkupType` names the markups `STANDARD_MD`, `TELEGRAM_MD`,
`HTML` and `BB`. The functions `check_standard_md`, `check_telegram_md`,
`check_html`, `check_bb` and `check_regular_text` test a set of text-type
flags.

`vtlpub.text_configs.init_text_configs(platform_flags, src_file_name)` returns a
`TextConfigs`. It holds the text types the platforms need, and for each one an
output name made from the source name with a postfix, e.g. `post_t_md.md`,
`post_html.md`. Each platform maps to one text type:

- `W` → HTML
- `R` → standard Markdown
- `TG` → Telegram Markdown
- `VK` → BB code
- `TIKTOK` and `X` → plain text

## Preparing and queueing texts

```python
from vtlpub.platforms import ContentPlatform
from vtlpub.markup import MarkupType
from vtlpub.text_configs import init_text_configs
from vtlpub.text_gen import generate_text_files
from vtlpub.content_publication import publish_marked_texts
from vtlpub.tg_net import TelegramApi

flags = ContentPlatform.W | ContentPlatform.TG
configs = init_text_configs(flags, "post.md")
generate_text_files("post.md", MarkupType.TELEGRAM_MD, configs)

api = TelegramApi()
publish_marked_texts(configs, flags, api)
print(api.outbox)
```

`generate_text_files` writes every text type the configs request and returns
the output names. If a requested type is the same markup as the source, the
source is copied unchanged. Every other type is rendered from the parsed
source.

## Audio

```python
from vtlpub.audio_configs import init_audio_configs
from vtlpub.audio_gen import generate_audio
from vtlpub.content_publication import publish_audio_with_marked_text

audio_configs, indices = init_audio_configs("track.wav", flags)
generate_audio("track.wav", audio_configs)
publish_audio_with_marked_text(audio_configs, indices, configs, flags, api)
```

`vtlpub.audio_io.read_meta_data` reads a file's size. For WAV files it also
reads the sample rate, channel count and bitrate. `read_parts` yields the data
in parts of 10 KiB. `generate_audio` writes the source data unchanged to every
configured output. The parameters in each `AudioConfig` describe what the
platform expects.

## Markup conversion

`vtlpub.text.parse_marked_text(text, markup_type)` turns standard Markdown,
Telegram Markdown, HTML or BB code into a `MarkedText`. A `MarkedText` is a
list of `MarkedTextPart`s, each with `Modification` flags (`BOLD`, `ITALIC`,
`STRIKETHROUGH`). To render the result again, use `to_standard_md`,
`to_telegram_md`, `to_html`, `to_bb` or `to_regular_text`.

`read_text`, `write_text`, `copy_file` and `files_equal` handle the files.

## Media parameters

`vtlpub.media` holds the data classes for audio, video and subtitles:
`AudioParams`, `VideoParams`, `SubParams`, `MediaContainer` and others. They
check that values fit their ranges. `vtlpub.tg_params` returns the Telegram
variants:

- `tg_audio_params` sets AAC audio.
- `tg_video_params` sets H.265 video.
- `tg_sub_params` sets a subtitle text size of 25.

## History

`vtlpub.history.HistoryStore` keeps one user's publication records.
`save_text_publication` and `save_media_with_text_publication` each store a
record and return it. In a record the user, the time and the file names are
replaced by SHA-256 digests (`encrypt`).

## Images

`vtlpub.img_filters.available_filters()` lists the built-in `ImageFilter`s:
blur, Gaussian blur, sharpen, edge detection, sepia, grayscale, rotations and
convolution kernels. Each filter has a filter-graph expression, and
`find_filter(name)` looks one up by name. `vtlpub.img_utils` offers
`file_exists`, `file_size`, `is_format_supported` and `format_description`.
The supported formats are png, jpg, jpeg, bmp, tiff and webp.

## Errors

A failed file operation raises `vtlpub.results.PublicationError`, which carries
an `AppResult` code. `report_error` prints the console message for a code.

## What the package does not do

- It has no command-line program.
- It has no single call that runs a whole publication; call the steps shown
  above yourself.
- `TelegramApi` does not contact any network. It only collects posts in
  `outbox`.
- `HistoryStore` keeps its records in memory and has no database behind it.
- Audio is not re-encoded.
- Images are not loaded, filtered or saved. The filters are descriptions only.