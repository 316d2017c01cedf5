import io

import pytest

from fractol.errors import ErrorCode, MlxError
from fractol.images import rgba_to_mono
from fractol.xpm42 import load_xpm42, read_xpm42


def _read(text):
    return read_xpm42(io.StringIO(text))


def _expect_invalid(text):
    with pytest.raises(MlxError) as info:
        _read(text)
    assert info.value.code == ErrorCode.INVXPM


def test_two_colour_row():
    xpm = _read("!XPM42\n2 1 2 1 c\n. #FF0000FF\nX #00FF00FF\n.X\n")
    assert xpm.width == 2
    assert xpm.height == 1
    assert bytes(xpm.texture.pixels) == bytes.fromhex("ff0000ff00ff00ff")


def test_header_fields_are_kept():
    xpm = _read("!XPM42\n1 2 1 2 c\nab #01020304\nab\nab\n")
    assert (xpm.color_count, xpm.cpp, xpm.mode) == (1, 2, "c")
    assert bytes(xpm.texture.pixels) == bytes.fromhex("01020304") * 2


def test_monochrome_mode_converts_colours():
    xpm = _read("!XPM42\n1 1 1 1 m\n. #336699FF\n.\n")
    assert bytes(xpm.texture.pixels) == rgba_to_mono(0x336699FF).to_bytes(4, "big")


def test_unknown_pixel_character_is_transparent_black():
    xpm = _read("!XPM42\n2 1 1 1 c\n. #FFFFFFFF\n.?\n")
    assert bytes(xpm.texture.pixels[4:8]) == bytes(4)
    assert bytes(xpm.texture.pixels[:4]) == b"\xff\xff\xff\xff"


def test_header_accepts_hex_integers():
    xpm = _read("!XPM42\n0x2 1 1 1 c\n. #000000FF\n..\n")
    assert xpm.width == 2


def test_last_row_without_newline():
    xpm = _read("!XPM42\n1 1 1 1 c\n. #0A0B0C0D\n.")
    assert bytes(xpm.texture.pixels) == bytes.fromhex("0a0b0c0d")


def test_pixel_count_matches_dimensions():
    rows = "\n".join(["..."] * 4)
    xpm = _read(f"!XPM42\n3 4 1 1 c\n. #11223344\n{rows}\n")
    assert len(xpm.texture.pixels) == 3 * 4 * 4


@pytest.mark.parametrize(
    "text",
    [
        "XPM42\n1 1 1 1 c\n. #000000FF\n.\n",
        "!XPM42",
        "!XPM42\n",
        "!XPM42\n1 1 1\n",
        "!XPM42\n1 1 1 1 x\n. #000000FF\n.\n",
        "!XPM42\n1 1 1 1\n. #000000FF\n.\n",
        "!XPM42\n1 1 1 11 c\n",
        "!XPM42\n40000 1 1 1 c\n",
        "!XPM42\n-1 1 1 1 c\n",
    ],
)
def test_bad_header_is_rejected(text):
    _expect_invalid(text)


@pytest.mark.parametrize(
    "entry",
    [
        ". 000000FF\n",
        ".#000000FF\n",
        ".. #000000FF\n",
        ". #000000FF \n",
        ". #-00000FF\n",
    ],
)
def test_bad_colour_entry_is_rejected(entry):
    _expect_invalid(f"!XPM42\n1 1 1 1 c\n{entry}.\n")


def test_missing_colour_line_is_rejected():
    _expect_invalid("!XPM42\n1 1 2 1 c\n. #000000FF\n")


def test_wrong_row_length_is_rejected():
    _expect_invalid("!XPM42\n2 1 1 1 c\n. #000000FF\n...\n")


def test_missing_row_is_rejected():
    _expect_invalid("!XPM42\n1 2 1 1 c\n. #000000FF\n.\n")


def test_load_from_file(tmp_path):
    path = tmp_path / "image.xpm42"
    path.write_text("!XPM42\n1 1 1 1 c\n# #FF00FF80\n#\n")
    xpm = load_xpm42(path)
    assert bytes(xpm.texture.pixels) == bytes.fromhex("ff00ff80")


def test_load_rejects_wrong_extension(tmp_path):
    path = tmp_path / "image.xpm"
    path.write_text("!XPM42\n1 1 1 1 c\n. #000000FF\n.\n")
    with pytest.raises(MlxError) as info:
        load_xpm42(path)
    assert info.value.code == ErrorCode.INVEXT


def test_load_missing_file(tmp_path):
    with pytest.raises(MlxError) as info:
        load_xpm42(tmp_path / "absent.xpm42")
    assert info.value.code == ErrorCode.INVFILE


def test_load_malformed_file(tmp_path):
    path = tmp_path / "broken.xpm42"
    path.write_text("not an image\n")
    with pytest.raises(MlxError) as info:
        load_xpm42(path)
    assert info.value.code == ErrorCode.INVXPM