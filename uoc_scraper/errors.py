"""
Error taxonomy for the scrape pipeline.

Every failure is fatal for the run and propagates to the CLI boundary.
"""

from __future__ import annotations

from pathlib import Path


class ScraperError(Exception):
    """Base class for all pipeline failures."""


class UsageError(ScraperError):
    """The unit code argument is missing or blank."""


class NetworkError(ScraperError):
    """The details page could not be fetched.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status code, or None if no response was received
    """

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ExtractionError(ScraperError):
    """The page did not match one of the expected templates."""


class FilesystemError(ScraperError):
    """The output file could not be written or read."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
