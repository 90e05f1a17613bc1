import pytest

from bbimager.units import format_size

KB = 1024
MB = KB * 1024
GB = MB * 1024
TB = GB * 1024


def test_zero_bytes():
    assert format_size(0) == "0 B"


def test_exactly_one_kilobyte():
    assert format_size(KB) == "1.00 KB"


def test_exactly_one_gigabyte():
    assert format_size(GB) == "1.00 GB"


@pytest.mark.parametrize(
    "size, suffix",
    [
        (1, " B"),
        (KB - 1, " B"),
        (KB, " KB"),
        (MB - 1, " KB"),
        (MB, " MB"),
        (GB - 1, " MB"),
        (GB, " GB"),
        (TB - 1, " GB"),
        (TB, " TB"),
        (TB * 5000, " TB"),
    ],
)
def test_unit_boundaries(size, suffix):
    assert format_size(size).endswith(suffix)
    assert not format_size(size).endswith("K" + suffix.strip()) or suffix == " KB"


@pytest.mark.parametrize("size", [5, 512, KB - 1])
def test_bytes_are_printed_as_integers(size):
    number, unit = format_size(size).split(" ")
    assert unit == "B"
    assert int(number) == size


@pytest.mark.parametrize(
    "size", [KB, 1536, 123_456, MB + 1, 7 * GB + 3 * MB, 3 * TB + 17, 9_876_543_210]
)
def test_value_round_trips_within_rounding(size):
    number, unit = format_size(size).split(" ")
    scale = {"KB": KB, "MB": MB, "GB": GB, "TB": TB}[unit]
    assert abs(float(number) * scale - size) <= 0.005 * scale + 1e-9
    assert len(number.split(".")[1]) == 2


def test_scaled_values_stay_below_1024_until_terabytes():
    for size in [KB, MB - 1, MB, GB - 1, GB, TB - 1]:
        number, _ = format_size(size).split(" ")
        assert 1.0 <= float(number) <= 1024.0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        format_size(-1)