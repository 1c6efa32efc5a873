import math

import pytest

from text_layout import canvas_size, font_for, measure, measure_runs, run_width
from text_markup import TextRun, parse


@pytest.fixture
def fonts(registry):
    regular, bold = registry.resolve_pair("Suisse")
    return regular.font(48), bold.font(48)


def test_font_for_picks_face_by_flag(fonts):
    regular, bold = fonts
    assert font_for(TextRun("a", False), regular, bold) is regular
    assert font_for(TextRun("a", True), regular, bold) is bold


def test_run_width_is_advance_length(fonts):
    regular, _ = fonts
    assert run_width(regular, "Hello") == regular.getlength("Hello")
    assert run_width(regular, "Hello") > 0


def test_measure_runs_sums_each_run(fonts):
    regular, bold = fonts
    runs = parse("Hello__World__!")

    widths, total = measure_runs(runs, regular, bold)

    assert widths == [
        regular.getlength("Hello"),
        bold.getlength("World"),
        regular.getlength("!"),
    ]
    assert total == pytest.approx(sum(widths))


def test_canvas_size_pads_by_scale():
    assert canvas_size(100.0, 48, 2) == (132, 80, 16)
    assert canvas_size(100.2, 48, 2) == (133, 80, 16)
    assert canvas_size(0.0, 20, 1, base_padding=4) == (8, 28, 4)


def test_measure_hi_at_scale_two(fonts):
    regular, bold = fonts
    runs = parse("Hi")

    m = measure(runs, regular, bold, 48, 2)

    assert m.padding == 16
    assert m.run_widths == (regular.getlength("Hi"),)
    assert m.width == math.ceil(regular.getlength("Hi") + 2 * (8 * 2))
    assert m.height == math.ceil(24 * 2 + 2 * (8 * 2))


def test_measure_no_runs_is_just_padding(fonts):
    regular, bold = fonts
    m = measure([], regular, bold, 24, 1)
    assert (m.width, m.height, m.total_width) == (16, 40, 0)


@pytest.mark.parametrize("k", [2, 3])
def test_measure_scales_with_supersampling(registry, k):
    regular_h, bold_h = registry.resolve_pair("Suisse")
    runs = parse("Hello__World__!")

    base = measure(runs, regular_h.font(20), bold_h.font(20), 20, 1)
    scaled = measure(runs, regular_h.font(20 * k), bold_h.font(20 * k), 20 * k, k)

    assert scaled.height == base.height * k
    # hinted advances round per glyph, so allow a pixel per glyph per step
    tolerance = k * len("HelloWorld!")
    assert abs(scaled.width - base.width * k) <= tolerance
    assert scaled.width > base.width
