import pytest

from iconworks.bytecount import UNITS, format_bytecount, select_unit
from iconworks.errors import ByteCountOutOfRange


@pytest.mark.parametrize(
    "magnitude, precision, expected",
    [
        (0, 0, "0 bytes"),
        (1, 0, "1 bytes"),
        (1023, 0, "1023 bytes"),
        (1024, 0, "1 KiB"),
        (1536, 0, "1 KiB"),
        (2047, 0, "1 KiB"),
        (1536, 1, "1.5 KiB"),
        (1048576, 0, "1 MiB"),
        (1048576, 2, "1.00 MiB"),
        (5 * 1024**3 + 512 * 1024**2, 1, "5.5 GiB"),
        (1024**4, 0, "1 TiB"),
        (1024**5, 0, "1 PiB"),
        (1024**6, 0, "1 EiB"),
        (1024**7 - 1, 0, "1023 EiB"),
        (2**64 - 1, 0, "15 EiB"),
        (2**64 - 1, 3, "16.000 EiB"),
        (0, 2, "0.00 bytes"),
        (512, 1, "512.0 bytes"),
    ],
)
def test_format_bytecount(magnitude, precision, expected):
    assert format_bytecount(magnitude, precision) == expected


def test_precision_defaults_to_whole_numbers():
    assert format_bytecount(3 * 1024 + 1000) == "3 KiB"


def test_fractional_rounding_is_correctly_rounded():
    # 1.125 and 1.375 are exact in binary, so ties round to even.
    assert format_bytecount(1152, 2) == "1.12 KiB"
    assert format_bytecount(1408, 2) == "1.38 KiB"
    assert format_bytecount(1025, 3) == "1.001 KiB"


@pytest.mark.parametrize(
    "magnitude, unit",
    [(0, 0), (1023, 0), (1024, 1), (1024**2 - 1, 1), (1024**2, 2), (1024**7 - 1, 6)],
)
def test_select_unit_boundaries(magnitude, unit):
    assert select_unit(magnitude) == unit
    assert magnitude < 1024 ** (unit + 1)


@pytest.mark.parametrize("precision", [0, 1, 4])
def test_too_large_for_unit_table(precision):
    with pytest.raises(ByteCountOutOfRange) as excinfo:
        format_bytecount(1024**7, precision)

    assert excinfo.value.magnitude == 1024**7


def test_negative_magnitude_is_out_of_range():
    with pytest.raises(ByteCountOutOfRange):
        format_bytecount(-1)


def test_negative_precision_is_rejected():
    with pytest.raises(ValueError):
        format_bytecount(10, -1)


def test_non_integral_magnitude_is_rejected():
    with pytest.raises(TypeError):
        format_bytecount(1.5)  # type: ignore[arg-type]


def test_unit_table():
    assert UNITS == ("bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
