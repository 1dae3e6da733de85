import pytest
from tinygradient.colors import parse_color
from tinygradient.errors import ColorLiteralError, GradientArgumentError


@pytest.mark.parametrize("token, expected", [
    ("red", ((255, 0, 0), 255)),
    ("Blue", ((0, 0, 255), 255)),
    ("#00ff00", ((0, 255, 0), 255)),
    ("#f00", ((255, 0, 0), 255)),
    ("rgb(10, 20, 30)", ((10, 20, 30), 255)),
])
def test_pillow_literals(token, expected):
    assert parse_color(token) == expected


def test_bare_hex_digits():
    assert parse_color("00ff00") == ((0, 255, 0), 255)
    assert parse_color("f00") == ((255, 0, 0), 255)


def test_alpha_is_kept():
    assert parse_color("#0000ff80") == ((0, 0, 255), 128)
    assert parse_color("0000ff80") == ((0, 0, 255), 128)


@pytest.mark.parametrize("token", ["notacolor", "ggg", "#12345", "", "12345"])
def test_unknown_literal(token):
    with pytest.raises(ColorLiteralError) as info:
        parse_color(token)
    assert info.value.token == token


def test_literal_error_is_an_argument_error():
    with pytest.raises(GradientArgumentError):
        parse_color("nope")
    with pytest.raises(ValueError, match="Unrecognized color"):
        parse_color("nope")
