"""Pytest configuration and fixtures for bassmix_headers tests."""

import shutil
from pathlib import Path

import pytest

from bassmix_headers.core.store import HeaderStore
from bassmix_headers.errors import DownloadError
from bassmix_headers.resources import HEADER_FILENAME, get_headers_dir


class RecordingDownloader:
    """Fetcher double that records calls instead of touching the network.

    If ``payload`` is set, it is written where the real downloader would
    put the header. If ``error`` is set, fetch() raises it.
    """

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = []

    def fetch(self, version, root):
        self.calls.append((version, Path(root)))
        if self.error is not None:
            raise self.error
        target = Path(root) / version.to_string() / HEADER_FILENAME
        if self.payload is not None:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self.payload, encoding="utf-8")
        return target


class EchoPreprocessor:
    """HeaderPreprocessor double returning the context prelude plus the source."""

    def __init__(self):
        self.calls = []

    def process(self, source, context, source_name):
        self.calls.append((source, context, source_name))
        return context.prelude() + source


@pytest.fixture
def headers_root(tmp_path: Path) -> Path:
    """Private copy of the bundled header tree."""
    root = tmp_path / "headers"
    shutil.copytree(get_headers_dir(), root)
    return root


@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    """Empty header store root."""
    root = tmp_path / "empty_headers"
    root.mkdir()
    return root


@pytest.fixture
def recording_downloader() -> RecordingDownloader:
    """Downloader that never succeeds in producing a file."""
    return RecordingDownloader()


@pytest.fixture
def failing_downloader() -> RecordingDownloader:
    """Downloader that raises a transport error."""
    return RecordingDownloader(error=DownloadError("connection refused"))


@pytest.fixture
def offline_store(headers_root: Path, recording_downloader) -> HeaderStore:
    """Store over the copied headers with a downloader that records calls."""
    return HeaderStore(headers_root, downloader=recording_downloader)


@pytest.fixture
def echo_preprocessor() -> EchoPreprocessor:
    """Stub preprocessor engine."""
    return EchoPreprocessor()
