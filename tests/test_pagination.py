import pytest

from chatcore.pagination import atoi_default


@pytest.mark.parametrize(
    "text, default, expected",
    [
        ("", 10, 10),
        ("42", 0, 42),
        ("-13", 1, -13),
        ("0012", 99, 12),
        ("x", 5, 5),
        (" 42", 7, 7),
        ("999999999999999999999999", -1, -1),
        ("+5", 0, 5),
        ("1_000", 3, 3),
        ("-", 4, 4),
    ],
)
def test_atoi_default(text, default, expected):
    assert atoi_default(text, default) == expected