import pytest

from colorapi import ColorParseError, ColorSpace
from colorapi.css import parse_color

TOL = 1e-9


def assert_parsed(css, space_id, coords, alpha=1.0):
    parsed = parse_color(css)
    assert parsed.space is ColorSpace(space_id), css
    assert len(parsed.coords) == len(coords)
    for actual, expected in zip(parsed.coords, coords):
        if expected is None:
            assert actual is None, css
        else:
            assert abs(actual - expected) < TOL, (css, parsed.coords)
    if alpha is None:
        assert parsed.alpha is None
    else:
        assert abs(parsed.alpha - alpha) < TOL, (css, parsed.alpha)


def test_named_colors():
    assert_parsed("red", "srgb", [1, 0, 0])
    assert_parsed("White", "srgb", [1, 1, 1])
    assert_parsed("  navy  ", "srgb", [0, 0, 128 / 255])
    assert_parsed("cornflowerblue", "srgb", [100 / 255, 149 / 255, 237 / 255])
    assert_parsed("rebeccapurple", "srgb", [0x66 / 255, 0x33 / 255, 0x99 / 255])
    assert_parsed("RebeccaPurple", "srgb", [0x66 / 255, 0x33 / 255, 0x99 / 255])

def test_transparent():
    assert_parsed("transparent", "srgb", [0, 0, 0], alpha=0)

def test_hex():
    assert_parsed("#ff0000", "srgb", [1, 0, 0])
    assert_parsed("#F00", "srgb", [1, 0, 0])
    assert_parsed("#0f08", "srgb", [0, 1, 0], alpha=0x88 / 255)
    assert_parsed("#ff000080", "srgb", [1, 0, 0], alpha=128 / 255)

def test_legacy_rgb():
    assert_parsed("rgb(255, 0, 0)", "srgb", [1, 0, 0])
    assert_parsed("rgba(255, 128, 0, 0.5)", "srgb", [1, 128 / 255, 0], alpha=0.5)
    assert_parsed("rgb(100%, 50%, 0%)", "srgb", [1, 0.5, 0])
    assert_parsed("rgba(0, 0, 0, 25%)", "srgb", [0, 0, 0], alpha=0.25)

def test_modern_rgb():
    assert_parsed("rgb(255 0 0)", "srgb", [1, 0, 0])
    assert_parsed("rgb(100% 0% 0% / 50%)", "srgb", [1, 0, 0], alpha=0.5)
    # numbers and percentages may mix in the modern syntax
    assert_parsed("rgb(255 50% 0 / 0.25)", "srgb", [1, 0.5, 0], alpha=0.25)
    assert_parsed("RGB(255 0 0)", "srgb", [1, 0, 0])

def test_none_keyword():
    assert_parsed("rgb(255 none 0)", "srgb", [1, None, 0])
    assert_parsed("hsl(none 50% 50%)", "hsl", [None, 50, 50])
    assert_parsed("rgb(0 0 0 / none)", "srgb", [0, 0, 0], alpha=None)

def test_hsl():
    assert_parsed("hsl(120 100% 50%)", "hsl", [120, 100, 50])
    assert_parsed("hsl(120deg 100% 25%)", "hsl", [120, 100, 25])
    assert_parsed("hsl(0.5turn, 50%, 50%)", "hsl", [180, 50, 50])
    assert_parsed("hsla(120, 100%, 50%, .5)", "hsl", [120, 100, 50], alpha=0.5)
    assert_parsed("hsl(200grad 10% 10%)", "hsl", [180, 10, 10])

def test_hsl_radians():
    parsed = parse_color("hsl(3.14159265rad 50% 50%)")
    assert abs(parsed.coords[0] - 180) < 1e-6

def test_hwb():
    assert_parsed("hwb(120 0% 0%)", "hwb", [120, 0, 0])
    assert_parsed("hwb(90 20% 30% / 0.5)", "hwb", [90, 20, 30], alpha=0.5)

def test_lab_and_lch():
    assert_parsed("lab(50% 40 -20)", "lab", [50, 40, -20])
    assert_parsed("lab(50 100% -50%)", "lab", [50, 125, -62.5])
    assert_parsed("lch(50 30 270deg)", "lch", [50, 30, 270])
    assert_parsed("lch(50% 100% 0)", "lch", [50, 150, 0])

def test_oklab_and_oklch():
    assert_parsed("oklab(0.5 40% 0)", "oklab", [0.5, 0.16, 0])
    assert_parsed("oklab(50% -0.1 0.1)", "oklab", [0.5, -0.1, 0.1])
    assert_parsed("oklch(70% 0.1 200)", "oklch", [0.7, 0.1, 200])
    assert_parsed("oklch(0.7 50% 0.25turn / 20%)", "oklch", [0.7, 0.2, 90], alpha=0.2)

def test_color_function():
    assert_parsed("color(display-p3 1 0 0)", "display-p3", [1, 0, 0])
    assert_parsed("color(srgb 50% 0.25 1)", "srgb", [0.5, 0.25, 1])
    assert_parsed("color(srgb-linear 1 1 1 / 0.5)", "srgb-linear", [1, 1, 1], alpha=0.5)
    assert_parsed("color(a98-rgb 0 1 0)", "a98-rgb", [0, 1, 0])
    assert_parsed("color(prophoto-rgb 0 0 1)", "prophoto-rgb", [0, 0, 1])
    assert_parsed("color(rec2020 none 0 0)", "rec2020", [None, 0, 0])
    assert_parsed("color(xyz-d50 0.1 0.2 0.3)", "xyz-d50", [0.1, 0.2, 0.3])

def test_color_function_xyz_alias():
    assert_parsed("color(xyz 0.5 0.5 0.5)", "xyz-d65", [0.5, 0.5, 0.5])
    assert_parsed("color(xyz-d65 0.5 0.5 0.5)", "xyz-d65", [0.5, 0.5, 0.5])

def test_color_function_dashed_id():
    assert_parsed("color(--hsv 120 50% 50%)", "hsv", [120, 50, 50])

def test_alpha_is_clamped():
    assert parse_color("rgb(0 0 0 / 150%)").alpha == 1.0
    assert parse_color("rgb(0 0 0 / -1)").alpha == 0.0

def test_channels_are_not_clamped():
    assert_parsed("rgb(300 -10 0)", "srgb", [300 / 255, -10 / 255, 0])

@pytest.mark.parametrize("css", [
    "",
    "   ",
    "notacolor",
    "#12",
    "#12345",
    "#ggg",
    "#-1-1-1",
    "#١٢٣",
    "#12345١",
    "rgb(1 2)",
    "rgb(1 2 3 4)",
    "rgb(1 2 3 / 0.5 / 1)",
    "rgb(1 2 3 /)",
    "rgb(1, 2 3)",
    "rgb(1, 2, 3,)",
    "rgb(255, 0%, 0)",
    "rgb(255, none, 0)",
    "rgb(1deg 2 3)",
    "hsl(120, 100, 50)",
    "hsl(120 100% 50deg)",
    "hsl(120foo 100% 50%)",
    "lab(1, 2, 3)",
    "oklch(0.5, 0.1, 10)",
    "foo(1 2 3)",
    "color(1 2 3)",
    "color(p3 1 0 0)",
    "color(--srgb 1 0 0)",
    "color(--cmyk 1 0 0)",
    "color(display-p3, 1, 0, 0)",
    "red blue",
    "12",
])
def test_invalid_strings(css):
    with pytest.raises(ColorParseError):
        parse_color(css)

def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_color("rgb(")

def test_parse_error_keeps_input():
    with pytest.raises(ColorParseError) as info:
        parse_color("notacolor")
    assert info.value.value == "notacolor"
    assert "notacolor" in str(info.value)

def test_non_string():
    with pytest.raises(TypeError):
        parse_color(42)
    with pytest.raises(TypeError):
        parse_color(None)
