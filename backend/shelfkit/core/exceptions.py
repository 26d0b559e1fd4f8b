"""
SHELFKIT - Exceptions
Error types raised by the helper modules
"""


class ShelfkitError(Exception):
    """
    Base exception for all helper errors.

    I/O failures are not wrapped: ``OSError`` and its subclasses reach the
    caller unchanged.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidInputError(ShelfkitError, ValueError):
    """
    Malformed caller input that no helper can give a meaningful answer for.

    Examples:
        >>> raise InvalidInputError("File name has no extension: 'README'")
    """
