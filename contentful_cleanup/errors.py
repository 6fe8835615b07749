"""Exceptions raised by the cleanup commands."""

from typing import Optional


class CleanupError(Exception):
    """Base class for every failure a command reports to the user"""


class FetchFailed(CleanupError):
    """A Contentful request returned a non-success status or never completed"""

    def __init__(self, message: str, status: Optional[int] = None,
                 cause: Optional[BaseException] = None, url: str = ""):
        super().__init__(message)
        self.status = status
        self.cause = cause
        self.url = url


class RateLimited(FetchFailed):
    """The per-second rate budget reported by Contentful is exhausted"""


class InvalidArgument(CleanupError, ValueError):
    """A required identifier or option is missing or malformed"""


class FileIOFailed(CleanupError):
    """Reading or writing a local file failed"""

    def __init__(self, message: str, path: str = "", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause
