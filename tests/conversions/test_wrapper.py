import pytest

from colorapi import ColorSpace, UnknownColorSpaceError
from colorapi.conversions import conversion_path, convert
from samples import round_trip_srgb, samples_srgb, tolerances

ALL_SPACES = ColorSpace.ids()


def ids(spaces):
    return [s.id for s in spaces]


def test_convert_returns_tuple():
    result = convert([1, 0, 0], "srgb", "hsl")
    assert isinstance(result, tuple)
    assert len(result) == 3

def test_convert_same_space_is_identity():
    assert convert([0.1, None, 0.3], "srgb", "srgb") == (0.1, None, 0.3)

def test_convert_accepts_space_objects():
    assert convert((1, 0, 0), ColorSpace("srgb"), ColorSpace("hsl")) == convert((1, 0, 0), "srgb", "hsl")

def test_convert_unknown_space():
    with pytest.raises(UnknownColorSpaceError):
        convert((1, 0, 0), "srgb", "cmyk")

def test_conversion_path_down():
    up, down = conversion_path(ColorSpace("srgb"), ColorSpace("hsl"))
    assert up == []
    assert ids(down) == ["hsl"]

def test_conversion_path_up_and_down():
    up, down = conversion_path(ColorSpace("hwb"), ColorSpace("lab"))
    assert ids(up) == ["hwb", "hsv", "hsl", "srgb", "srgb-linear"]
    assert ids(down) == ["xyz-d50", "lab"]

def test_conversion_path_shared_base():
    up, down = conversion_path(ColorSpace("lch"), ColorSpace("prophoto-rgb"))
    assert ids(up) == ["lch", "lab"]
    assert ids(down) == ["prophoto-rgb"]

def test_conversion_samples():
    for rgb, expected in samples_srgb.items():
        for space_id, coords in expected.items():
            tol = tolerances[space_id]
            result = convert(rgb, "srgb", space_id)
            for actual, exp in zip(result, coords):
                assert actual is not None, (rgb, space_id)
                assert abs(actual - exp) < tol, (rgb, space_id, result)

def test_conversion_samples_back_to_srgb():
    for rgb, expected in samples_srgb.items():
        for space_id, coords in expected.items():
            result = convert(coords, space_id, "srgb")
            for actual, exp in zip(result, rgb):
                assert abs(actual - exp) < 1e-3, (space_id, coords, result)

def test_round_trip_every_space():
    for rgb in round_trip_srgb:
        for space_id in ALL_SPACES:
            there = convert(rgb, "srgb", space_id)
            back = convert(there, space_id, "srgb")
            for actual, exp in zip(back, rgb):
                assert abs(actual - exp) < 1e-6, (rgb, space_id, back)

def test_round_trip_between_non_srgb_spaces():
    for space_a in ["lab", "oklch", "hwb", "display-p3"]:
        for space_b in ["prophoto-rgb", "lch", "hsv", "rec2020"]:
            start = convert((0.3, 0.6, 0.2), "srgb", space_a)
            back = convert(convert(start, space_a, space_b), space_b, space_a)
            for actual, exp in zip(back, start):
                assert abs(actual - exp) < 1e-5, (space_a, space_b, back)

def test_missing_components_count_as_zero():
    assert convert((None, 0, 50), "hsl", "srgb") == convert((0, 0, 50), "hsl", "srgb")
    r, g, b = convert((None, None, None), "srgb", "xyz-d65")
    assert (r, g, b) == (0.0, 0.0, 0.0)

def test_achromatic_hue_is_missing():
    h, s, l = convert((0.5, 0.5, 0.5), "srgb", "hsl")
    assert h is None
    assert s == 0

    l, c, h = convert((1, 1, 1), "srgb", "lch")
    assert h is None
    assert abs(l - 100) < 0.01

    l, c, h = convert((0.2, 0.2, 0.2), "srgb", "oklch")
    assert h is None

    h, w, b = convert((0.4, 0.4, 0.4), "srgb", "hwb")
    assert h is None

def test_chromatic_hue_is_present():
    _, _, h = convert((1, 0, 0), "srgb", "oklch")
    assert h is not None
