import pytest

from aideck.ppm import (
    CHUNK_SIZE,
    PROGRESS_WIDTH,
    PPMError,
    PPMHeader,
    format_header,
    parse_header,
    progress_bar,
    read_image,
    write_image,
)


def test_parse_gray_header():
    data = b"P5\n4 2\n255\n"
    header = parse_header(data + b"\x00" * 8)
    assert header == PPMHeader(width=4, height=2, is_rgb=False, size=len(data))


def test_parse_rgb_header():
    header = parse_header(b"P6\n3 5\n255\n")
    assert header.is_rgb
    assert (header.width, header.height) == (3, 5)
    assert header.channels == 3
    assert header.data_size == 3 * 5 * 3


def test_parse_header_with_comment():
    data = b"P5\n# made by a camera\n10 20\n255\n"
    header = parse_header(data)
    assert (header.width, header.height) == (10, 20)
    assert header.size == len(data)


def test_parse_header_rejects_bad_magic():
    with pytest.raises(PPMError):
        parse_header(b"P2\n4 2\n255\n")


def test_parse_header_rejects_other_max_value():
    with pytest.raises(PPMError):
        parse_header(b"P5\n4 2\n65535\n")


def test_parse_header_rejects_truncated():
    with pytest.raises(PPMError):
        parse_header(b"P5\n4 ")


def test_format_header_value():
    assert format_header(4, 2) == b"P5\n4 2\n255\n"


@pytest.mark.parametrize("width,height", [(1, 1), (324, 244), (28, 28), (1000, 7)])
def test_format_then_parse_round_trip(width, height):
    data = format_header(width, height)
    header = parse_header(data)
    assert (header.width, header.height, header.is_rgb) == (width, height, False)
    assert header.size == len(data)


def test_format_header_rejects_negative():
    with pytest.raises(PPMError):
        format_header(-1, 3)


@pytest.mark.parametrize("width,height", [(4, 3), (324, 244), (128, 64)])
def test_write_read_round_trip(tmp_path, width, height):
    pixels = bytes(i % 256 for i in range(width * height))
    path = tmp_path / "img.ppm"
    written = write_image(path, width, height, pixels)
    assert written == width * height
    assert read_image(path) == (width, height, pixels)


def test_written_file_layout(tmp_path):
    pixels = bytes(range(6))
    path = tmp_path / "small.ppm"
    write_image(path, 3, 2, pixels)
    assert path.read_bytes() == format_header(3, 2) + pixels


def test_write_exact_chunk_multiple(tmp_path):
    pixels = bytes(CHUNK_SIZE * 2)
    path = tmp_path / "chunks.ppm"
    assert write_image(path, CHUNK_SIZE, 2, pixels) == CHUNK_SIZE * 2
    assert read_image(path)[2] == pixels


def test_write_rejects_short_pixels(tmp_path):
    with pytest.raises(PPMError):
        write_image(tmp_path / "bad.ppm", 4, 4, bytes(10))


def test_read_rejects_rgb(tmp_path):
    path = tmp_path / "rgb.ppm"
    path.write_bytes(b"P6\n2 2\n255\n" + bytes(12))
    with pytest.raises(PPMError):
        read_image(path)


def test_read_rejects_missing_pixels(tmp_path):
    path = tmp_path / "short.ppm"
    path.write_bytes(format_header(4, 4) + bytes(5))
    with pytest.raises(PPMError):
        read_image(path)


def test_read_ignores_trailing_bytes(tmp_path):
    path = tmp_path / "extra.ppm"
    path.write_bytes(format_header(2, 2) + bytes([1, 2, 3, 4, 9, 9]))
    assert read_image(path) == (2, 2, bytes([1, 2, 3, 4]))


def test_progress_bar_full():
    assert progress_bar("x", 5, 5) == "x [" + "#" * PROGRESS_WIDTH + "]"


def test_progress_bar_has_fixed_width():
    for n in range(10):
        line = progress_bar("Writing image ", n, 10)
        inner = line[line.index("[") + 1:-1]
        assert len(inner) == PROGRESS_WIDTH
        assert inner.startswith("#")
        assert inner.rstrip(" ") == "#" * len(inner.rstrip(" "))


def test_progress_bar_grows():
    counts = [progress_bar("p", n, 8).count("#") for n in range(9)]
    assert counts == sorted(counts)


def test_progress_bar_rejects_zero_total():
    with pytest.raises(ValueError):
        progress_bar("p", 0, 0)