"""
SHELFKIT - Device Utilities
Platform detection and a basic connectivity check
"""
from typing import Optional
from enum import Enum
import asyncio
import socket
import sys

from shelfkit.core.config import settings
import logging


logger = logging.getLogger(__name__)


# ============================================================================
# PLATFORM DETECTION
# ============================================================================
class PlatformKind(str, Enum):
    """Platform families the application runs on"""
    ANDROID = "android"
    IOS = "ios"
    WEB = "web"
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


PLATFORM_NAMES = {
    PlatformKind.ANDROID: "Android",
    PlatformKind.IOS: "iOS",
    PlatformKind.WEB: "Web",
    PlatformKind.LINUX: "Linux",
    PlatformKind.MACOS: "macOS",
    PlatformKind.WINDOWS: "Windows",
    PlatformKind.UNKNOWN: "Unknown",
}

MOBILE_PLATFORMS = {PlatformKind.ANDROID, PlatformKind.IOS}
DESKTOP_PLATFORMS = {PlatformKind.LINUX, PlatformKind.MACOS, PlatformKind.WINDOWS}


def get_platform_kind(platform_id: Optional[str] = None) -> PlatformKind:
    """
    Map a ``sys.platform`` value to a platform family.

    Args:
        platform_id: Value to classify (default: the running interpreter)

    Returns:
        PlatformKind

    Example:
        >>> get_platform_kind("win32")
        <PlatformKind.WINDOWS: 'windows'>
        >>> get_platform_kind("emscripten")
        <PlatformKind.WEB: 'web'>
    """
    platform_id = (platform_id or sys.platform).lower()

    # Checked before "linux": Android reports its own value on 3.13+
    if platform_id == "android":
        return PlatformKind.ANDROID
    if platform_id == "ios":
        return PlatformKind.IOS
    if platform_id in ("emscripten", "wasi"):
        return PlatformKind.WEB
    if platform_id.startswith("linux"):
        return PlatformKind.LINUX
    if platform_id == "darwin":
        return PlatformKind.MACOS
    if platform_id in ("win32", "cygwin"):
        return PlatformKind.WINDOWS

    return PlatformKind.UNKNOWN


def is_android() -> bool:
    return get_platform_kind() is PlatformKind.ANDROID


def is_ios() -> bool:
    return get_platform_kind() is PlatformKind.IOS


def is_web() -> bool:
    return get_platform_kind() is PlatformKind.WEB


def is_mobile() -> bool:
    """Android or iOS"""
    return get_platform_kind() in MOBILE_PLATFORMS


def is_desktop() -> bool:
    """Linux, macOS or Windows"""
    return get_platform_kind() in DESKTOP_PLATFORMS


def get_platform_name() -> str:
    """
    Human-readable platform name.

    Example:
        >>> get_platform_name()
        'Linux'
    """
    return PLATFORM_NAMES[get_platform_kind()]


# ============================================================================
# CONNECTIVITY
# ============================================================================
async def has_internet_connection(
    host: Optional[str] = None,
    timeout: Optional[float] = None
) -> bool:
    """
    Basic connectivity check through a DNS lookup.

    A resolvable host means the device reaches a resolver; it does not
    prove the host itself answers.

    Args:
        host: Host to resolve (default from settings, "google.com")
        timeout: Seconds before giving up (default from settings)

    Returns:
        True if at least one address was resolved

    Example:
        >>> await has_internet_connection()
        True
    """
    host = host or settings.CONNECTIVITY_CHECK_HOST
    timeout = timeout if timeout is not None else settings.CONNECTIVITY_TIMEOUT_SECONDS

    loop = asyncio.get_running_loop()
    try:
        addresses = await asyncio.wait_for(
            loop.getaddrinfo(host, None, type=socket.SOCK_STREAM),
            timeout=timeout
        )
    except (OSError, asyncio.TimeoutError) as e:
        logger.warning(f"Connectivity check failed for {host}: {e}")
        return False

    return any(address[4] and address[4][0] for address in addresses)
