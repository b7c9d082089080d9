"""
On-disk header store.

Layout: <root>/<version>/bassmix.h, one raw header per version. Root
resolution priority:
  1. Explicit root argument
  2. BASSMIX_HEADERS_DIR environment variable
  3. Headers bundled with the package
"""

import os
from pathlib import Path
from typing import Optional, Protocol

from bassmix_headers.errors import (
    DownloadError,
    InvalidFormatError,
    UnavailableHeaderError,
)
from bassmix_headers.resources import HEADER_FILENAME, get_headers_dir
from bassmix_headers.version import Version


class Fetcher(Protocol):
    def fetch(self, version: Version, root: Path) -> Path: ...


def resolve_root(root: Optional[Path | str] = None) -> Path:
    """Resolve the header store root using the priority chain."""
    if root is not None:
        return Path(root)

    env_root = os.environ.get("BASSMIX_HEADERS_DIR")
    if env_root:
        return Path(env_root)

    return get_headers_dir()


class HeaderStore:
    """Map versions to header files and materialize missing ones."""

    def __init__(
        self,
        root: Optional[Path | str] = None,
        downloader: Optional[Fetcher] = None,
    ):
        """
        Initialize the store.

        Args:
            root: Store root directory. If None, resolves via priority chain.
            downloader: Fetcher used for missing headers. Defaults to
                        HeaderDownloader.
        """
        self.root = resolve_root(root)
        if downloader is None:
            from bassmix_headers.core.downloader import HeaderDownloader

            downloader = HeaderDownloader()
        self.downloader = downloader

    def resolve_path(self, version: Version) -> Path:
        return self.root / version.to_string() / HEADER_FILENAME

    def exists(self, version: Version) -> bool:
        return self.resolve_path(version).is_file()

    def ensure_available(self, version: Version) -> Path:
        """
        Make sure the header for a version is on disk.

        Fetches once if missing, then re-checks. There is no retry.

        Args:
            version: Version whose header is needed.

        Returns:
            Path to the header file.

        Raises:
            UnavailableHeaderError: If the header is still missing after
                                    one fetch attempt.
        """
        path = self.resolve_path(version)
        if path.is_file():
            return path

        try:
            self.downloader.fetch(version, self.root)
        except DownloadError as e:
            raise UnavailableHeaderError(
                f"Could not download header files for version {version}: {e}"
            ) from e

        if not path.is_file():
            raise UnavailableHeaderError(
                f"Header for version {version} not found at {path} after download"
            )
        return path

    def available_versions(self) -> list[Version]:
        """
        List versions with a header present on disk.

        Returns:
            Ascending list of versions.
        """
        if not self.root.is_dir():
            return []

        versions = []
        for entry in self.root.iterdir():
            if not (entry / HEADER_FILENAME).is_file():
                continue
            try:
                versions.append(Version.parse(entry.name))
            except InvalidFormatError:
                continue
        return sorted(versions)
