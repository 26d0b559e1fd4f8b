"""
SHELFKIT - Image Utilities
Helper functions for validating and reading product image files
"""
from typing import Optional, Union
from pathlib import PurePath, Path
import os
import time

import aiofiles

from shelfkit.core.config import settings
from shelfkit.core.exceptions import InvalidInputError
import logging


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


# ============================================================================
# FILE NAME HELPERS
# ============================================================================
def get_file_extension(path: PathLike) -> str:
    """
    Get file extension from a path.

    Only the final path component is inspected, so dots in directory
    names are ignored.

    Args:
        path: File path or file name

    Returns:
        Extension without dot, lower-cased (e.g., "jpg")

    Raises:
        InvalidInputError: If the file name has no "."

    Example:
        >>> get_file_extension("photos/shelf.JPG")
        'jpg'
        >>> get_file_extension("archive.tar.gz")
        'gz'
    """
    name = PurePath(os.fspath(path)).name
    if "." not in name:
        logger.debug(f"Rejected path without extension: {path!r}")
        raise InvalidInputError(f"File name has no extension: {name!r}")

    return name.rsplit(".", 1)[-1].lower()


def generate_unique_image_name(prefix: str) -> str:
    """
    Generate image file name with a millisecond timestamp.

    Two calls within the same millisecond return the same name.

    Args:
        prefix: Name prefix (e.g., product ID)

    Returns:
        "{prefix}_{epoch_millis}.jpg"

    Example:
        >>> generate_unique_image_name("product")
        'product_1761300000123.jpg'
    """
    timestamp = time.time_ns() // 1_000_000
    return f"{prefix}_{timestamp}.{settings.UNIQUE_IMAGE_EXTENSION}"


# ============================================================================
# IMAGE VALIDATION
# ============================================================================
def is_valid_image_file(path: PathLike) -> bool:
    """
    Check if path names a supported image file.

    Args:
        path: File path

    Returns:
        True if the extension is jpg, jpeg, png, gif or bmp

    Example:
        >>> is_valid_image_file("shelf.PNG")
        True
        >>> is_valid_image_file("notes.txt")
        False
    """
    try:
        extension = get_file_extension(path)
    except InvalidInputError:
        return False

    return extension in settings.ALLOWED_IMAGE_EXTENSIONS


def is_valid_image_size(file_byte_length: int, max_bytes: Optional[int] = None) -> bool:
    """
    Check image size against maximum allowed.

    Args:
        file_byte_length: File size in bytes
        max_bytes: Maximum size in bytes (default from settings, 5 MB)

    Returns:
        True if the file is not larger than max_bytes

    Example:
        >>> is_valid_image_size(1024 * 1024)
        True
        >>> is_valid_image_size(6 * 1024 * 1024)
        False
    """
    if max_bytes is None:
        max_bytes = settings.MAX_IMAGE_SIZE_BYTES

    return file_byte_length <= max_bytes


def is_valid_for_ai_processing(
    path: PathLike,
    file_byte_length: int,
    max_bytes: Optional[int] = None
) -> bool:
    """
    Check if image can be sent to the AI pipeline.

    The pipeline only accepts jpg, jpeg and png within the size limit.

    Args:
        path: File path
        file_byte_length: File size in bytes
        max_bytes: Maximum size in bytes (default from settings)

    Returns:
        True if format and size are both accepted

    Example:
        >>> is_valid_for_ai_processing("label.jpeg", 200_000)
        True
        >>> is_valid_for_ai_processing("anim.gif", 10)
        False
    """
    try:
        extension = get_file_extension(path)
    except InvalidInputError:
        return False

    return (
        extension in settings.AI_IMAGE_EXTENSIONS
        and is_valid_image_size(file_byte_length, max_bytes)
    )


# ============================================================================
# FILE ACCESS
# ============================================================================
def get_file_size(path: PathLike) -> int:
    """
    Get file size in bytes.

    Args:
        path: Path to file

    Returns:
        File size in bytes
    """
    return Path(path).stat().st_size


async def read_all_bytes(path: PathLike) -> bytes:
    """
    Read the whole file into memory.

    The handle is closed whether the read succeeds or not; OSError
    (missing file, permission denied, ...) reaches the caller unchanged.

    Args:
        path: Path to file

    Returns:
        File content

    Example:
        >>> data = await read_all_bytes(Path("/tmp/product.jpg"))
    """
    async with aiofiles.open(path, "rb") as f:
        data = await f.read()

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data
