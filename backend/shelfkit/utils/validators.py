"""
SHELFKIT - Field Validators
Validation functions for product and account form fields
"""
from typing import Optional
import re

import logging


logger = logging.getLogger(__name__)


EMAIL_PATTERN = re.compile(r'^[\w\-.]+@([\w\-]+\.)+[\w\-]{2,4}$', re.ASCII)

# At least 8 characters, one uppercase, one lowercase and one digit
PASSWORD_PATTERN = re.compile(
    r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d@$!%*?&]{8,}$',
    re.ASCII
)

BARCODE_PATTERN = re.compile(r'^\d{8,13}$', re.ASCII)

# Plain ASCII decimal notation; rejects inf, nan, "1_000" and non-ASCII digits
FLOAT_PATTERN = re.compile(r'\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*', re.ASCII)
INT_PATTERN = re.compile(r'\s*[+-]?\d+\s*', re.ASCII)

MIN_PRODUCT_NAME_LENGTH = 2


# ============================================================================
# NUMBER PARSING
# ============================================================================
def _parse_float(value: str) -> Optional[float]:
    if FLOAT_PATTERN.fullmatch(value) is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _parse_int(value: str) -> Optional[int]:
    if INT_PATTERN.fullmatch(value) is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


# ============================================================================
# ACCOUNT VALIDATION
# ============================================================================
def is_valid_email(email: str) -> bool:
    """
    Validate email address format.

    Args:
        email: Email address to validate

    Returns:
        True if valid email format

    Example:
        >>> is_valid_email("a@b.com")
        True
        >>> is_valid_email("not-an-email")
        False
    """
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_password(password: str) -> bool:
    """
    Validate password against the account requirements.

    Requirements:
    - At least 8 characters
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one digit
    - Only letters, digits and @$!%*?&

    Example:
        >>> is_valid_password("Abcdefg1")
        True
        >>> is_valid_password("abcdefgh")
        False
    """
    return PASSWORD_PATTERN.fullmatch(password) is not None


# ============================================================================
# PRODUCT VALIDATION
# ============================================================================
def is_valid_product_name(name: str) -> bool:
    """Product names need at least two non-blank characters."""
    return len(name.strip()) >= MIN_PRODUCT_NAME_LENGTH


def is_valid_price(price: str) -> bool:
    """
    Validate price input.

    Example:
        >>> is_valid_price("9.99")
        True
        >>> is_valid_price("0")
        False
        >>> is_valid_price("abc")
        False
    """
    value = _parse_float(price)
    return value is not None and value > 0


def is_valid_stock(stock: str) -> bool:
    """
    Validate stock count input (whole, non-negative).

    Example:
        >>> is_valid_stock("0")
        True
        >>> is_valid_stock("-1")
        False
        >>> is_valid_stock("2.5")
        False
    """
    value = _parse_int(stock)
    return value is not None and value >= 0


def is_valid_barcode(barcode: str) -> bool:
    """
    Validate barcode (EAN-8 to EAN-13 length, digits only).

    The check digit is not verified.
    """
    return BARCODE_PATTERN.fullmatch(barcode) is not None


# ============================================================================
# GENERIC VALIDATION
# ============================================================================
def is_not_empty(value: str) -> bool:
    return len(value.strip()) > 0


def has_min_length(value: str, min_length: int) -> bool:
    return len(value.strip()) >= min_length


def has_max_length(value: str, max_length: int) -> bool:
    return len(value.strip()) <= max_length


def is_numeric(value: str) -> bool:
    """
    Check if value parses as a number.

    Example:
        >>> is_numeric("-3.5e2")
        True
        >>> is_numeric("12a")
        False
    """
    return _parse_float(value) is not None
