"""Exceptions raised by page sources."""


class PageFetchError(Exception):
    """Raised when a page could not be fetched or understood"""
    pass
