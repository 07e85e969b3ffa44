import pytest

from cubmap.elements import fetch_color, fetch_texture_file, to_hex_color
from cubmap.mapdata import ParseError


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def test_fetch_texture_file_basic():
    assert fetch_texture_file("NO ./tex/north.xpm\n", "NO") == "./tex/north.xpm"


def test_fetch_texture_file_surrounding_whitespace():
    assert fetch_texture_file("EA \t ./east.xpm  \t\n", "EA") == "./east.xpm"


def test_fetch_texture_file_without_separator():
    assert fetch_texture_file("SO./south.xpm", "SO") == "./south.xpm"


@pytest.mark.parametrize(
    "line",
    ["NO\n", "NO   \n", "NO a.xpm b.xpm\n", "SO a.xpm\n", "N a.xpm"],
)
def test_fetch_texture_file_errors(line):
    with pytest.raises(ParseError):
        fetch_texture_file(line, "NO")


def test_to_hex_color_black_and_white():
    assert to_hex_color(0, 0, 0) == 0
    assert to_hex_color(255, 255, 255) == 0xFFFFFF


@pytest.mark.parametrize("rgb", [(220, 100, 0), (1, 2, 3), (0, 255, 17)])
def test_to_hex_color_round_trip(rgb):
    assert _channels(to_hex_color(*rgb)) == rgb


@pytest.mark.parametrize("rgb", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
def test_to_hex_color_out_of_range(rgb):
    with pytest.raises(ParseError):
        to_hex_color(*rgb)


def test_fetch_color_basic():
    assert _channels(fetch_color("F 220,100,0\n", "F")) == (220, 100, 0)


def test_fetch_color_whitespace_around_numbers():
    assert _channels(fetch_color("C  1 , 2 ,\t3 \n", "C")) == (1, 2, 3)


def test_fetch_color_plus_sign():
    assert _channels(fetch_color("F +5,6,7", "F")) == (5, 6, 7)


@pytest.mark.parametrize(
    "line",
    [
        "F 1,2\n",
        "F 1,2,3,\n",
        "F 1,2,3,4\n",
        "F 256,0,0\n",
        "F -1,0,0\n",
        "F a,b,c\n",
        "F 1,2,3 x\n",
        "F\n",
        "C 1,2,3\n",
    ],
)
def test_fetch_color_errors(line):
    with pytest.raises(ParseError):
        fetch_color(line, "F")