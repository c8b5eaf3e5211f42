import pytest

from catalog.services.product_service import INT64_MAX, INT64_MIN, coerce_int


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, None),
        ("42", 42),
        (" +7 ", 7),
        ("-3", -3),
        ("0009", 9),
        ("abc", None),
        ("1.5", None),
        ("", None),
        ("1_000", None),
        (str(INT64_MAX), INT64_MAX),
        (str(INT64_MIN), INT64_MIN),
        (str(INT64_MAX + 1), None),
        (str(INT64_MIN - 1), None),
        ("9" * 5000, None),
        (12, 12),
        (2**70, None),
    ],
)
def test_coerce_int(raw, expected):
    assert coerce_int(raw) == expected
