"""
Security utilities: password hashing and input format checks.
"""

import re
import logging
from typing import Optional

import bcrypt
from email_validator import validate_email, EmailNotValidError

logger = logging.getLogger(__name__)

# E.164-style mobile number: optional +, 8-15 digits, no leading zero
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{7,14}$")


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt. Returns the hash as text for storage."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a password against a stored bcrypt hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        logger.warning(f"Stored password hash is not a valid bcrypt hash: {e}")
        return False


def normalize_email(email: Optional[str]) -> Optional[str]:
    """
    Validate an email address and return its lowercased normal form.

    Returns:
        Normalized address, or None if the address is malformed
    """
    if not email or not email.strip():
        return None
    try:
        result = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return None
    return result.normalized.lower()


def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """
    Strip formatting from a phone number and check it looks like a mobile number.

    Returns:
        Digits (with leading + if given), or None if malformed
    """
    if not phone:
        return None
    cleaned = phone.strip().replace(" ", "").replace("-", "").replace("(", "").replace(")", "")
    if not PHONE_PATTERN.match(cleaned):
        return None
    return cleaned
