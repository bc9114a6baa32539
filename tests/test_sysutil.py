import logging

import pytest

from chatcore.sysutil import PANIC, first_non_empty, is_truthy, set_log_level


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    original = root.level
    yield
    root.setLevel(original)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", logging.DEBUG),
        ("  DeBuG  ", logging.DEBUG),
        ("info", logging.INFO),
        ("", logging.INFO),
        ("warn", logging.WARNING),
        ("warning", logging.WARNING),
        ("error", logging.ERROR),
        ("fatal", logging.CRITICAL),
        ("panic", PANIC),
        ("unknown", logging.INFO),
    ],
)
def test_set_log_level(restore_root_level, name, expected):
    assert set_log_level(name) == expected
    assert logging.getLogger().level == expected


@pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "Y", "on", "On"])
def test_is_truthy_true(value):
    assert is_truthy(value) is True


@pytest.mark.parametrize("value", ["", "0", "false", "no", "off", "n", "  ", "random"])
def test_is_truthy_false(value):
    assert is_truthy(value) is False


def test_first_non_empty():
    assert first_non_empty() == ""
    assert first_non_empty(" ", "\t", "\n") == ""
    assert first_non_empty("   ", "  hello  ", "world") == "  hello  "
    assert first_non_empty("alpha", "beta") == "alpha"