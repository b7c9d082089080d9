"""
Core modules for bassmix_headers.
"""

from bassmix_headers.core.downloader import HeaderDownloader
from bassmix_headers.core.store import HeaderStore
from bassmix_headers.core.preprocessor import PreprocessorAdapter, PcppPreprocessor

__all__ = [
    "HeaderDownloader",
    "HeaderStore",
    "PreprocessorAdapter",
    "PcppPreprocessor",
]
