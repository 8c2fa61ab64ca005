"""Unit tests for decimal_text."""

import pytest

from chainlist.interfaces.linked_list import decimal_text
from chainlist.interfaces.linked_list.digits import DIGIT_CHUNK


@pytest.mark.parametrize("value", [0, 7, -7, 10**60 + 7, -(10**999)])
def test_small_values_match_str(value: int) -> None:
    """Below one chunk the result is exactly str()."""
    assert decimal_text(value) == str(value)


@pytest.mark.parametrize("exponent", [DIGIT_CHUNK, 4300, 5000, 9001])
def test_powers_of_ten(exponent: int) -> None:
    """Inner chunks keep their leading zeros."""
    assert decimal_text(10**exponent) == "1" + "0" * exponent
    assert decimal_text(-(10**exponent)) == "-1" + "0" * exponent


def test_mixed_digits_survive_chunking() -> None:
    """A value spanning several chunks keeps every digit in order."""
    digits = "123456789" * 700
    assert decimal_text(int(digits[:4000]) * 10**2300 + 5) == (
        digits[:4000] + "0" * 2299 + "5"
    )
