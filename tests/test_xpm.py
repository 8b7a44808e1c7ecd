import pytest

from fractview.colors import lookup_color
from fractview.xpm import (
    TRANSPARENT,
    XpmError,
    parse_color,
    parse_xpm_lines,
    parse_xpm_text,
    quoted_lines,
    read_xpm,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"a c #112233",
"b c red",
". c None",
// pixels
"ab.",
"ba.",
};
"""


def test_strip_comments_keeps_length_and_removes_block():
    text = 'x /* gone */ "y"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "gone" not in result
    assert result.endswith('"y"')


def test_strip_comments_ignores_comments_inside_strings():
    text = '"a /* b */ c"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment_includes_newline():
    text = 'a // note\n"b"'
    result = strip_comments(text)
    assert "note" not in result
    assert "\n" not in result
    assert result.endswith('"b"')


def test_quoted_lines_yields_contents():
    assert list(quoted_lines('{"one", "two",\n"three"}')) == ["one", "two", "three"]


def test_quoted_lines_ignores_unclosed_quote():
    assert list(quoted_lines('"a" "b')) == ["a"]


def test_parse_color_hex():
    assert parse_color("#FF0000") == 0xFF0000


def test_parse_color_name_case_insensitive():
    assert parse_color("Red") == 0xFF0000


def test_parse_color_two_words():
    assert parse_color("light", "blue") == lookup_color("light blue")


def test_parse_color_none_and_unknown():
    assert parse_color("none") == -1
    assert parse_color("no-such-colour") == 0
    assert parse_color("#zz") == 0


def test_parse_lines_single_char():
    image = parse_xpm_lines(["2 2 2 1", "a c #010203", "b c #0A0B0C", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0x010203
    assert image.get_pixel(1, 0) == 0x0A0B0C
    assert image.get_pixel(0, 1) == 0x0A0B0C
    assert image.get_pixel(1, 1) == 0x010203


def test_parse_lines_three_chars_per_pixel():
    image = parse_xpm_lines(["2 1 2 3", "aaa c #000010", "bbb c #000020", "bbbaaa"])
    assert image.get_pixel(0, 0) == 0x000020
    assert image.get_pixel(1, 0) == 0x000010


def test_transparent_pixel():
    image = parse_xpm_lines(["1 1 1 1", ". c None", "."])
    assert image.get_pixel(0, 0) == TRANSPARENT


def test_duplicate_key_last_wins_for_short_codes():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x000002


def test_duplicate_key_first_wins_for_long_codes():
    image = parse_xpm_lines(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.get_pixel(0, 0) == 0x000001


def test_unknown_pixel_key_is_black():
    image = parse_xpm_lines(["1 1 1 1", "a c #123456", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c red", "a", "a"],
        ["x 2 1 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
    ],
)
def test_bad_documents_raise(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_parse_text_full_document():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0x112233
    assert image.get_pixel(1, 0) == 0xFF0000
    assert image.get_pixel(2, 1) == TRANSPARENT
    assert image.get_pixel(0, 1) == 0xFF0000


def test_read_xpm_matches_text(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    from_file = read_xpm(path)
    assert from_file.data == parse_xpm_text(SAMPLE).data


def test_read_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_xpm(tmp_path / "absent.xpm")