# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for NIF checksum validation.
"""

import random
import pytest

from domain.nif import (
    ALLOWED_LEADING_DIGITS,
    NifCheck,
    check_nif,
    compute_check_digit,
    is_valid_nif,
)

VALID_NIFS = [
    "123456789",
    "500000000",
    "509442013",
    "234567899",
    "987654322",
    "100000010",
    "100000100",
    "100000002",
]


def _random_prefix(rng: random.Random, leading_digits) -> str:
    first = str(rng.choice(sorted(leading_digits)))
    return first + "".join(str(rng.randint(0, 9)) for _ in range(7))


class TestIsValidNif:
    """Test the boolean NIF check."""

    @pytest.mark.parametrize("nif", VALID_NIFS)
    def test_valid_nifs(self, nif):
        """Known-good NIFs pass."""
        assert is_valid_nif(nif) is True

    def test_wrong_check_digit(self):
        """Correct prefix with the wrong final digit fails."""
        assert is_valid_nif("123456780") is False

    def test_disallowed_leading_digit(self):
        """Leading 4 is rejected even when the checksum would pass."""
        assert compute_check_digit("42345678") == 4
        assert is_valid_nif("423456784") is False
        assert is_valid_nif("423456789") is False

    @pytest.mark.parametrize("nif", ["023456787", "723456780"])
    def test_other_disallowed_leading_digits(self, nif):
        """Leading 0 and 7 are rejected despite a matching check digit."""
        assert compute_check_digit(nif[:8]) == int(nif[8])
        assert is_valid_nif(nif) is False

    @pytest.mark.parametrize("candidate", [
        "12345678",
        "1234567890",
        "12345678a",
        "",
        " 123456789",
        "123456789 ",
        "123456789\n",
        "123 456 789",
        "١٢٣٤٥٦٧٨٩",
    ])
    def test_bad_format_strings(self, candidate):
        """Anything but exactly nine ASCII digits fails."""
        assert is_valid_nif(candidate) is False

    @pytest.mark.parametrize("candidate", [None, 123456789, 12345678.9, ["123456789"], b"123456789"])
    def test_non_string_inputs(self, candidate):
        """Non-string inputs return False instead of raising."""
        assert is_valid_nif(candidate) is False

    def test_deterministic(self):
        """Same input always gives the same answer."""
        results = {is_valid_nif("509442013") for _ in range(100)}
        assert results == {True}


class TestCheckNif:
    """Test the reason-reporting NIF check."""

    def test_reason_codes(self):
        """Each failure kind has its own code."""
        assert check_nif("123456789") is NifCheck.VALID
        assert check_nif("12345678") is NifCheck.BAD_FORMAT
        assert check_nif("423456784") is NifCheck.BAD_LEADING_DIGIT
        assert check_nif("123456780") is NifCheck.BAD_CHECKSUM

    def test_none_is_bad_format(self):
        """None is reported as a format failure."""
        assert check_nif(None) is NifCheck.BAD_FORMAT

    def test_leading_digit_checked_before_checksum(self):
        """A NIF failing both rules reports the leading digit."""
        assert check_nif("423456789") is NifCheck.BAD_LEADING_DIGIT

    def test_reason_values_are_strings(self):
        """Reason codes compare equal to their wire values."""
        assert NifCheck.BAD_CHECKSUM == "bad_checksum"
        assert NifCheck.VALID.value == "valid"


class TestComputeCheckDigit:
    """Test check digit computation."""

    @pytest.mark.parametrize("prefix,expected", [
        ("12345678", 9),
        ("50944201", 3),
        ("50000000", 0),  # remainder 1
        ("10000001", 0),  # remainder 0
        ("10000000", 2),
    ])
    def test_known_prefixes(self, prefix, expected):
        """Check digits for hand-computed prefixes."""
        assert compute_check_digit(prefix) == expected

    @pytest.mark.parametrize("prefix", ["1234567", "123456789", "1234567a", "", None, 12345678])
    def test_malformed_prefix_raises(self, prefix):
        """Only 8 ASCII digits are accepted."""
        with pytest.raises(ValueError):
            compute_check_digit(prefix)


class TestNifProperties:
    """Sampled checks of the checksum rule across many prefixes."""

    def test_completed_prefixes_are_valid(self):
        """Appending the computed check digit to an allowed prefix gives a valid NIF."""
        rng = random.Random(20240615)
        for _ in range(2000):
            prefix = _random_prefix(rng, ALLOWED_LEADING_DIGITS)
            nif = prefix + str(compute_check_digit(prefix))
            assert is_valid_nif(nif), nif

    def test_exactly_one_final_digit_is_valid(self):
        """For an allowed prefix only the computed final digit passes."""
        rng = random.Random(7)
        for _ in range(500):
            prefix = _random_prefix(rng, ALLOWED_LEADING_DIGITS)
            passing = [d for d in "0123456789" if is_valid_nif(prefix + d)]
            assert passing == [str(compute_check_digit(prefix))]

    def test_disallowed_leading_digits_never_valid(self):
        """Prefixes starting with 0, 4 or 7 never produce a valid NIF."""
        rng = random.Random(11)
        for _ in range(500):
            prefix = _random_prefix(rng, {0, 4, 7})
            for digit in "0123456789":
                assert check_nif(prefix + digit) in (NifCheck.BAD_LEADING_DIGIT, NifCheck.BAD_FORMAT)

    def test_check_digit_in_range(self):
        """Check digits are always single decimal digits."""
        rng = random.Random(3)
        for _ in range(1000):
            assert 0 <= compute_check_digit(_random_prefix(rng, range(10))) <= 9
