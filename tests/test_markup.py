import pytest

from vtlpub.markup import (
    TEXT_TYPE_BB,
    TEXT_TYPE_HTML,
    TEXT_TYPE_MAX_NUM,
    TEXT_TYPE_REGULAR,
    TEXT_TYPE_STANDARD_MD,
    TEXT_TYPE_TELEGRAM_MD,
    MarkupType,
    check_bb,
    check_html,
    check_regular_text,
    check_standard_md,
    check_telegram_md,
)

ALL_FLAGS = [
    TEXT_TYPE_STANDARD_MD,
    TEXT_TYPE_TELEGRAM_MD,
    TEXT_TYPE_HTML,
    TEXT_TYPE_BB,
    TEXT_TYPE_REGULAR,
]


def test_markup_order_matches_source():
    assert [MarkupType(i).name for i in range(4)] == [
        "STANDARD_MD",
        "TELEGRAM_MD",
        "HTML",
        "BB",
    ]


def test_flags_follow_markup_types():
    assert MarkupType(0).flag == TEXT_TYPE_STANDARD_MD
    assert MarkupType(1).flag == TEXT_TYPE_TELEGRAM_MD
    assert MarkupType(2).flag == TEXT_TYPE_HTML
    assert MarkupType(3).flag == TEXT_TYPE_BB
    assert check_standard_md(MarkupType.STANDARD_MD.flag) is True
    assert check_telegram_md(MarkupType.TELEGRAM_MD.flag) is True
    assert check_html(MarkupType.HTML.flag) is True
    assert check_bb(MarkupType.BB.flag) is True


def test_flags_are_distinct_single_bits():
    assert len(set(ALL_FLAGS)) == len(ALL_FLAGS)
    for flag in ALL_FLAGS:
        assert flag & (flag - 1) == 0
    combined = 0
    for flag in ALL_FLAGS:
        combined |= flag
    assert check_standard_md(combined) is True
    assert check_regular_text(combined) is True


def test_text_type_count_includes_regular():
    assert TEXT_TYPE_MAX_NUM == len(MarkupType) + 1
    assert check_regular_text(1 << (TEXT_TYPE_MAX_NUM - 1)) is True


@pytest.mark.parametrize("flag", ALL_FLAGS)
def test_each_check_sees_only_its_flag(flag):
    assert check_standard_md(flag) is (flag == TEXT_TYPE_STANDARD_MD)
    assert check_telegram_md(flag) is (flag == TEXT_TYPE_TELEGRAM_MD)
    assert check_html(flag) is (flag == TEXT_TYPE_HTML)
    assert check_bb(flag) is (flag == TEXT_TYPE_BB)
    assert check_regular_text(flag) is (flag == TEXT_TYPE_REGULAR)


def test_checks_on_combined_flags():
    combined = TEXT_TYPE_HTML | TEXT_TYPE_REGULAR
    assert check_html(combined) is True
    assert check_regular_text(combined) is True
    assert check_bb(combined) is False


def test_checks_false_for_zero():
    assert check_standard_md(0) is False
    assert check_telegram_md(0) is False
    assert check_html(0) is False
    assert check_bb(0) is False
    assert check_regular_text(0) is False