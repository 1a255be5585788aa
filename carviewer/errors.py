from __future__ import annotations


class CarViewerError(Exception):
    """Base class for every error raised by the catalog core."""


class FetchError(CarViewerError):
    """A source could not be reached, timed out, or its body could not be read."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class DecodeError(CarViewerError):
    """A source answered with a payload that does not match the record shape."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to decode {url}: {reason}")
        self.url = url
        self.reason = reason


class RangeFormatError(CarViewerError):
    """A horsepower range was not two integers joined by a single '-'."""


class SelectionError(CarViewerError):
    """A comparison was requested with the wrong number of models."""


class PreferenceStoreError(CarViewerError):
    """The durable preference record is missing or cannot be read."""
