import pytest

from text_markup import TextRun, iter_toggled_parts, parse


@pytest.mark.parametrize("text", ["Hello World", "x", "single_underscore_only", "  spaced  "])
def test_no_delimiter_is_one_regular_run(text):
    assert parse(text) == [TextRun(text, False)]


def test_bold_middle_run():
    assert parse("A__B__C") == [
        TextRun("A", False),
        TextRun("B", True),
        TextRun("C", False),
    ]


def test_empty_segments_are_dropped():
    assert parse("__Bold__") == [TextRun("Bold", True)]
    assert parse("a____b") == [TextRun("a", False), TextRun("b", False)]
    assert parse("____") == []


def test_odd_delimiter_count_leaves_tail_bold():
    assert parse("plain__bold to the end") == [
        TextRun("plain", False),
        TextRun("bold to the end", True),
    ]


def test_triple_underscore_toggles_once():
    # "___" splits as "__" + "_", the leftover underscore is text
    assert parse("a___b") == [TextRun("a", False), TextRun("_b", True)]


def test_empty_string_has_no_runs():
    assert parse("") == []


def test_toggle_alternates_from_off():
    flags = [bold for _, bold in iter_toggled_parts("a__b__c__d")]
    assert flags == [False, True, False, True]


def test_toggle_keeps_empty_parts():
    assert list(iter_toggled_parts("__x")) == [("", False), ("x", True)]
