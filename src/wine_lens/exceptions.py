"""Custom exceptions for wine-lens."""


class WineLensError(Exception):
    """Base exception for wine-lens."""

    pass


class AuthenticationError(WineLensError):
    """Raised when text-recognition credentials are invalid or missing."""

    pass


class RateLimitError(WineLensError):
    """Raised when the text-recognition quota is exceeded."""

    pass


class ImageError(WineLensError):
    """Raised when image cannot be read or yields no text."""

    pass


class DatasetError(WineLensError):
    """Raised when a reference dataset cannot be read."""

    pass


class CacheError(DatasetError):
    """Raised when a binary reference cache is corrupt or out of date."""

    pass


class DownloadError(DatasetError):
    """Raised when a dataset archive cannot be fetched or unpacked."""

    pass
