"""
bassmix_headers - Version-pinned BASSmix C headers for FFI bindings.

This package provides tools to:
- Select the BASSmix header revision for a library version and platform
- Download missing header bundles from the vendor
- Preprocess headers into a single FFI-consumable header string
"""

from bassmix_headers.core.downloader import HeaderDownloader
from bassmix_headers.core.preprocessor import (
    PcppPreprocessor,
    PreprocessingContext,
    PreprocessorAdapter,
)
from bassmix_headers.core.store import HeaderStore
from bassmix_headers.errors import (
    BassMixHeadersError,
    DownloadError,
    InvalidFormatError,
    PreprocessingError,
    UnavailableHeaderError,
    UnsupportedPlatformError,
)
from bassmix_headers.platforms import Platform
from bassmix_headers.provider import HeaderProvider, create
from bassmix_headers.version import KNOWN_VERSIONS, LATEST, Version

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "create",
    "HeaderProvider",
    "HeaderStore",
    "HeaderDownloader",
    "PreprocessorAdapter",
    "PreprocessingContext",
    "PcppPreprocessor",
    "Platform",
    "Version",
    "LATEST",
    "KNOWN_VERSIONS",
    "BassMixHeadersError",
    "InvalidFormatError",
    "UnsupportedPlatformError",
    "UnavailableHeaderError",
    "DownloadError",
    "PreprocessingError",
]
