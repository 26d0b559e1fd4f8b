"""
SHELFKIT - Utils Package
Stateless helpers for images, formatting, dates, validation and devices

Helpers log through stdlib loggers under "shelfkit". Applications wire
them up once at startup:

    from shelfkit.core.logging import setup_logging
    setup_logging()  # level and format from SHELFKIT_LOG_LEVEL / SHELFKIT_LOG_FORMAT
"""
from shelfkit.utils.images import (
    get_file_extension,
    generate_unique_image_name,
    is_valid_image_file,
    is_valid_image_size,
    is_valid_for_ai_processing,
    get_file_size,
    read_all_bytes
)

from shelfkit.utils.formatters import (
    get_locale,
    format_price,
    format_number,
    format_percentage,
    format_file_size,
    capitalize,
    capitalize_words,
    truncate_text,
    format_duration
)

from shelfkit.utils.dates import (
    format_date_for_display,
    format_datetime_for_display,
    today,
    is_today,
    days_between
)

from shelfkit.utils.validators import (
    is_valid_email,
    is_valid_password,
    is_valid_product_name,
    is_valid_price,
    is_valid_stock,
    is_valid_barcode,
    is_not_empty,
    has_min_length,
    has_max_length,
    is_numeric
)

from shelfkit.utils.device import (
    PlatformKind,
    get_platform_kind,
    is_android,
    is_ios,
    is_web,
    is_mobile,
    is_desktop,
    get_platform_name,
    has_internet_connection
)


# ============================================================================
# EXPORTS
# ============================================================================
__all__ = [
    # Image utilities
    "get_file_extension",
    "generate_unique_image_name",
    "is_valid_image_file",
    "is_valid_image_size",
    "is_valid_for_ai_processing",
    "get_file_size",
    "read_all_bytes",

    # Formatters
    "get_locale",
    "format_price",
    "format_number",
    "format_percentage",
    "format_file_size",
    "capitalize",
    "capitalize_words",
    "truncate_text",
    "format_duration",

    # Date utilities
    "format_date_for_display",
    "format_datetime_for_display",
    "today",
    "is_today",
    "days_between",

    # Validators
    "is_valid_email",
    "is_valid_password",
    "is_valid_product_name",
    "is_valid_price",
    "is_valid_stock",
    "is_valid_barcode",
    "is_not_empty",
    "has_min_length",
    "has_max_length",
    "is_numeric",

    # Device utilities
    "PlatformKind",
    "get_platform_kind",
    "is_android",
    "is_ios",
    "is_web",
    "is_mobile",
    "is_desktop",
    "get_platform_name",
    "has_internet_connection",
]
