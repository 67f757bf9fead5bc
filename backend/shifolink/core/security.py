"""Module: security."""

import hashlib
import hmac
import os
from datetime import date

from shifolink.core.errors import ValidationError

# Shared password hashing format/version marker.
PASSWORD_SCHEME = "pbkdf2_sha256"
PASSWORD_ITERATIONS = 390000
MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    """
    Create a PBKDF2-SHA256 password hash string.

    Stored format:
      pbkdf2_sha256$<iterations>$<salt_hex>$<hash_hex>
    """
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        PASSWORD_ITERATIONS,
    )
    return f"{PASSWORD_SCHEME}${PASSWORD_ITERATIONS}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str | None) -> bool:
    """
    Verify password against hashed or legacy plaintext value.

    Rows imported from the cleartext system still hold the raw password;
    those are compared as-is until the account changes its password.
    """
    if not stored:
        return False

    if stored.startswith(f"{PASSWORD_SCHEME}$"):
        try:
            _, iterations_raw, salt_hex, hash_hex = stored.split("$", 3)
            iterations = int(iterations_raw)
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(hash_hex)
        except ValueError:
            return False

        computed = hashlib.pbkdf2_hmac(
            "sha256",
            password.encode("utf-8"),
            salt,
            iterations,
        )
        return hmac.compare_digest(computed, expected)

    # Legacy plaintext compare path.
    return hmac.compare_digest(stored.encode("utf-8"), password.encode("utf-8"))


def validate_password(password: str, min_length: int = MIN_PASSWORD_LENGTH) -> None:
    if len(password) < min_length:
        raise ValidationError(f"password length should be at least {min_length}")


def calculate_age(birth_date: date, today: date | None = None) -> int:
    """
    Whole years between ``birth_date`` and ``today``.

    One year is taken off when today's day-of-year is earlier than the
    birth day-of-year. The value is stored at creation and not refreshed.
    """
    today = today or date.today()
    age = today.year - birth_date.year
    if today.timetuple().tm_yday < birth_date.timetuple().tm_yday:
        age -= 1
    return age
