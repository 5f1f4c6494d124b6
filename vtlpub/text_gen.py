"""Generation of the text files each requested markup needs from one source text."""

from __future__ import annotations

from vtlpub.markup import (
    MarkupType,
    check_bb,
    check_html,
    check_regular_text,
    check_standard_md,
    check_telegram_md,
)
from vtlpub.text import (
    copy_file,
    files_equal,
    parse_marked_text,
    read_text,
    to_bb,
    to_html,
    to_regular_text,
    to_standard_md,
    to_telegram_md,
    write_text,
)
from vtlpub.text_configs import (
    BB_INDEX,
    HTML_INDEX,
    REGULAR_INDEX,
    STANDARD_MD_INDEX,
    TELEGRAM_MD_INDEX,
)

_MARKUP_TARGETS = (
    (STANDARD_MD_INDEX, MarkupType.STANDARD_MD, check_standard_md, to_standard_md),
    (TELEGRAM_MD_INDEX, MarkupType.TELEGRAM_MD, check_telegram_md, to_telegram_md),
    (BB_INDEX, MarkupType.BB, check_bb, to_bb),
    (HTML_INDEX, MarkupType.HTML, check_html, to_html),
)


def _output_name(configs, index):
    try:
        return configs.file_names[index]
    except KeyError:
        raise ValueError(f"no output file name for text type {index}") from None


def generate_text_files(src_file_name, markup_type, configs):
    """Write every text type the configs request; return the output file names.

    A requested type that matches the source markup is copied unchanged
    (unless the output already is the same file); the others are rendered
    from the parsed source.
    """
    markup_type = MarkupType(markup_type)
    marked = parse_marked_text(read_text(src_file_name), markup_type)
    outputs = []
    for index, target, requested, render in _MARKUP_TARGETS:
        if not requested(configs.flags):
            continue
        out_file_name = _output_name(configs, index)
        if target is markup_type:
            if not files_equal(src_file_name, out_file_name):
                copy_file(out_file_name, src_file_name)
        else:
            write_text(render(marked), out_file_name)
        outputs.append(out_file_name)
    if check_regular_text(configs.flags):
        out_file_name = _output_name(configs, REGULAR_INDEX)
        write_text(to_regular_text(marked), out_file_name)
        outputs.append(out_file_name)
    return outputs