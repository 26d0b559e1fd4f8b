"""
SHELFKIT - Formatters
Formatting utilities for prices, numbers, text and durations
"""
from typing import Optional, Union
from datetime import timedelta
from functools import lru_cache
from decimal import Decimal, ROUND_HALF_UP
import copy

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from shelfkit.core.config import settings
from shelfkit.core.exceptions import InvalidInputError
import logging


logger = logging.getLogger(__name__)

CURRENCY_PLACEHOLDER = "¤"
FILE_SIZE_UNITS = ("B", "KB", "MB", "GB")
PERCENT_MAX_FRACTION_DIGITS = 2


# ============================================================================
# LOCALE LOOKUP
# ============================================================================
@lru_cache(maxsize=32)
def _parse_locale(identifier: str) -> Locale:
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (ValueError, TypeError, UnknownLocaleError) as e:
        logger.debug(f"Unknown locale {identifier!r}: {e}")
        raise InvalidInputError(f"Unknown locale: {identifier!r}") from e


def get_locale(locale: Optional[str] = None) -> Locale:
    """
    Resolve a locale identifier to a Babel Locale.

    Args:
        locale: Identifier such as "es_ES" or "en-US" (default from settings)

    Returns:
        Babel Locale

    Raises:
        InvalidInputError: If the identifier is not a known locale
    """
    return _parse_locale(locale or settings.DEFAULT_LOCALE)


# ============================================================================
# NUMBER FORMATTERS
# ============================================================================
def format_price(
    value: float,
    locale: Optional[str] = None,
    currency_symbol: Optional[str] = None,
    decimal_digits: Optional[int] = None
) -> str:
    """
    Format amount as a price using the locale's currency pattern.

    Symbol position and separators follow the locale; the symbol itself
    is whatever the caller passes.

    Args:
        value: Amount to format
        locale: Locale identifier (default from settings, "es_ES")
        currency_symbol: Symbol to attach (default from settings, "€")
        decimal_digits: Exact number of fraction digits (default 2)

    Returns:
        Formatted price

    Example:
        >>> format_price(1234.5)
        '1.234,50\\xa0€'
        >>> format_price(1234.5, "en_US", "$")
        '$1,234.50'
    """
    if currency_symbol is None:
        currency_symbol = settings.DEFAULT_CURRENCY_SYMBOL
    if decimal_digits is None:
        decimal_digits = settings.PRICE_DECIMAL_DIGITS
    if decimal_digits < 0:
        raise InvalidInputError(f"decimal_digits must be >= 0, got {decimal_digits}")

    babel_locale = get_locale(locale)

    # Work on a copy: Babel shares pattern objects across calls
    pattern = copy.copy(babel_locale.currency_formats["standard"])
    pattern.frac_prec = (decimal_digits, decimal_digits)
    pattern.prefix = tuple(p.replace(CURRENCY_PLACEHOLDER, currency_symbol) for p in pattern.prefix)
    pattern.suffix = tuple(s.replace(CURRENCY_PLACEHOLDER, currency_symbol) for s in pattern.suffix)

    # Ties round away from zero
    amount = Decimal(str(value)).quantize(Decimal(1).scaleb(-decimal_digits), rounding=ROUND_HALF_UP)

    return pattern.apply(amount, babel_locale)


def format_number(value: int, locale: Optional[str] = None) -> str:
    """
    Format integer with the locale's thousands separator.

    Example:
        >>> format_number(1234567, "en_US")
        '1,234,567'
        >>> format_number(1234567, "es_ES")
        '1.234.567'
    """
    return format_decimal(value, format="#,##0", locale=get_locale(locale))


def format_percentage(value: float, locale: Optional[str] = None) -> str:
    """
    Format a 0-100 value as a locale percentage.

    The value is divided by 100 before formatting, so callers pass the
    number they want to see in front of the percent sign.

    Args:
        value: Percentage points (42.5 means 42.5 %)
        locale: Locale identifier (default from settings)

    Returns:
        Formatted percentage, at most two fraction digits

    Example:
        >>> format_percentage(42.5, "en_US")
        '42.5%'
        >>> format_percentage(42.5, "es_ES")
        '42,5\\xa0%'
    """
    babel_locale = get_locale(locale)

    pattern = copy.copy(babel_locale.percent_formats[None])
    pattern.frac_prec = (0, PERCENT_MAX_FRACTION_DIGITS)

    return pattern.apply(value / 100, babel_locale)


def format_file_size(size_bytes: int) -> str:
    """
    Format file size to human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string with one decimal (largest unit is GB)

    Example:
        >>> format_file_size(1536)
        '1.5 KB'
        >>> format_file_size(5 * 1024 ** 4)
        '5120.0 GB'
    """
    size = float(size_bytes)
    unit_index = 0

    while size >= 1024 and unit_index < len(FILE_SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1

    rounded = Decimal(size).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded} {FILE_SIZE_UNITS[unit_index]}"


# ============================================================================
# STRING FORMATTERS
# ============================================================================
def capitalize(text: str) -> str:
    """
    Upper-case the first character and lower-case the rest.

    Example:
        >>> capitalize("hELLO")
        'Hello'
    """
    if not text:
        return text

    return text[0].upper() + text[1:].lower()


def capitalize_words(text: str) -> str:
    """
    Capitalize each space-separated word.

    Runs of spaces collapse to one and leading/trailing spaces are dropped,
    unlike a plain split/join which would keep them.

    Example:
        >>> capitalize_words("fresh  ORANGE juice")
        'Fresh Orange Juice'
    """
    return " ".join(capitalize(word) for word in text.split(" ") if word)


def truncate_text(text: str, max_length: int) -> str:
    """
    Truncate text to max_length characters plus "...".

    The suffix is appended after the kept characters, so the result can
    be up to max_length + 3 characters long.

    Example:
        >>> truncate_text("hello world", 5)
        'hello...'
    """
    if max_length < 0:
        raise InvalidInputError(f"max_length must be >= 0, got {max_length}")

    if len(text) <= max_length:
        return text

    return f"{text[:max_length]}..."


# ============================================================================
# DURATION FORMATTERS
# ============================================================================
def format_duration(duration: Union[int, timedelta]) -> str:
    """
    Format duration to its two largest units.

    Args:
        duration: Whole seconds or a timedelta

    Returns:
        "{h}h {m}m", "{m}m {s}s" or "{s}s"

    Example:
        >>> format_duration(90)
        '1m 30s'
        >>> format_duration(3661)
        '1h 1m'
        >>> format_duration(timedelta(seconds=42))
        '42s'
    """
    if isinstance(duration, timedelta):
        total_seconds = int(duration.total_seconds())
    else:
        total_seconds = int(duration)

    hours = total_seconds // 3600
    minutes = total_seconds // 60

    if hours > 0:
        return f"{hours}h {minutes % 60}m"
    elif minutes > 0:
        return f"{minutes}m {total_seconds % 60}s"
    else:
        return f"{total_seconds}s"
