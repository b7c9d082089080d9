"""
Custom exceptions for bassmix_headers.
"""


class BassMixHeadersError(Exception):
    """Base exception for bassmix_headers errors."""

    pass


class InvalidFormatError(BassMixHeadersError):
    """Version string does not match the accepted numeric pattern."""

    pass


class UnsupportedPlatformError(BassMixHeadersError):
    """Platform was never shipped for the requested version."""

    pass


class DownloadError(BassMixHeadersError):
    """Error fetching or extracting a header bundle."""

    pass


class UnavailableHeaderError(BassMixHeadersError):
    """Header file is missing after a single fetch attempt."""

    pass


class PreprocessingError(BassMixHeadersError):
    """Error reported by the C preprocessor while processing a header."""

    def __init__(self, message: str, diagnostics: list[str] | None = None):
        super().__init__(message)
        self.diagnostics = list(diagnostics or [])
