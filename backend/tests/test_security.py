from datetime import date

import pytest

from shifolink.core.errors import ValidationError
from shifolink.core.security import (
    PASSWORD_SCHEME,
    calculate_age,
    hash_password,
    validate_password,
    verify_password,
)


def test_age_one_day_before_birthday():
    assert calculate_age(date(2000, 6, 15), today=date(2024, 6, 14)) == 23


@pytest.mark.parametrize("today", [date(2024, 6, 15), date(2024, 6, 16), date(2024, 12, 31)])
def test_age_on_or_after_birthday(today):
    assert calculate_age(date(2000, 6, 15), today=today) == 24


def test_age_uses_day_of_year_across_leap_years():
    # 1 March is day 61 in a leap year but day 60 otherwise.
    assert calculate_age(date(2001, 3, 1), today=date(2024, 2, 29)) == 23
    assert calculate_age(date(2004, 3, 1), today=date(2023, 3, 1)) == 18


def test_short_password_rejected():
    with pytest.raises(ValidationError):
        validate_password("abc")


def test_six_char_password_accepted():
    validate_password("abcdef")


def test_custom_minimum_length():
    with pytest.raises(ValidationError):
        validate_password("abcdef", min_length=8)


def test_hash_and_verify():
    stored = hash_password("secret1")
    assert stored.startswith(f"{PASSWORD_SCHEME}$")
    assert "secret1" not in stored
    assert verify_password("secret1", stored)
    assert not verify_password("secret2", stored)


def test_hashes_are_salted():
    assert hash_password("secret1") != hash_password("secret1")


def test_legacy_plaintext_still_verifies():
    assert verify_password("qwerty", "qwerty")
    assert not verify_password("qwerty", "QWERTY")


def test_corrupt_hash_does_not_verify():
    assert not verify_password("secret1", f"{PASSWORD_SCHEME}$notanumber$zz$zz")
    assert not verify_password("secret1", None)
