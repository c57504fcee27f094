import pytest

from saba.color import Color, UnsupportedValueError

NAMES = [
    "black", "silver", "gray", "white", "maroon", "red", "purple", "fuchsia",
    "green", "lime", "olive", "yellow", "navy", "blue", "teal", "aqua",
    "orange", "lightgray",
]


@pytest.mark.parametrize("name", NAMES)
def test_name_code_round_trip(name):
    by_name = Color.from_name(name)
    assert by_name.name == name
    by_code = Color.from_code(by_name.code)
    assert by_code.name == name
    assert by_code.code == by_name.code


@pytest.mark.parametrize("name", NAMES)
def test_code_rgb_matches_hex_components(name):
    color = Color.from_code(Color.from_name(name).code)
    code = color.code
    assert color.rgb == tuple(int(code[i:i + 2], 16) / 255 for i in (1, 3, 5))
    assert all(0.0 <= c <= 1.0 for c in color.rgb)


@pytest.mark.parametrize("name", NAMES)
def test_code_u32_agrees_with_code(name):
    color = Color.from_name(name)
    assert f"#{color.code_u32():06x}" == color.code


def test_pinned_values():
    assert Color.from_name("red").code == "#ff0000"
    assert Color.from_name("orange").rgb == (1.0, 0.647, 0.0)
    assert Color.from_code("#ff0000").code_u32() == 0xFF0000


def test_white_and_black_defaults():
    assert Color.white().code == "#ffffff"
    assert Color.white().name == "white"
    assert Color.black().code == "#000000"
    assert Color.black().name == "black"
    assert Color.white() != Color.black()


def test_unknown_name_raises():
    with pytest.raises(UnsupportedValueError):
        Color.from_name("chartreuse")


@pytest.mark.parametrize("code", ["ff0000", "#fff", "#ff00000", ""])
def test_malformed_code_raises(code):
    with pytest.raises(UnsupportedValueError, match="invalid color code"):
        Color.from_code(code)


def test_unknown_code_raises():
    with pytest.raises(UnsupportedValueError, match="not supported"):
        Color.from_code("#123456")