"""
Header bundle download.

Fetches the vendor BASSmix archive for a version and extracts the C
header into the header store:

    https://www.un4seen.com/files/bassmix<tag>.zip  ->  c/bassmix.h
    (tag is the version without dots, e.g. 24 for 2.4)
"""

import shutil
import urllib.request
import zipfile
from pathlib import Path
from typing import Optional

from bassmix_headers.errors import DownloadError
from bassmix_headers.resources import HEADER_FILENAME
from bassmix_headers.version import Version

DEFAULT_BASE_URL = "https://www.un4seen.com/files"

# Location of the C header inside the vendor archive
_ARCHIVE_HEADER_MEMBER = f"c/{HEADER_FILENAME}"


class HeaderDownloader:
    """Download BASSmix header bundles into a header store root."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, verbose: bool = False):
        self.base_url = base_url.rstrip("/")
        self.verbose = verbose

    def archive_url(self, version: Version) -> str:
        """Return the vendor archive URL for a version."""
        return f"{self.base_url}/bassmix{version.archive_tag()}.zip"

    def fetch(self, version: Version, root: Path) -> Path:
        """
        Download and extract the header for a version.

        Args:
            version: Version to fetch.
            root: Header store root; the header lands in root/<version>/.

        Returns:
            Path to the extracted header.

        Raises:
            DownloadError: If download or extraction fails.
        """
        target_dir = Path(root) / version.to_string()
        created_dir = not target_dir.is_dir()
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / HEADER_FILENAME
        partial = target_dir / f"{HEADER_FILENAME}.part"

        url = self.archive_url(version)
        zip_path = target_dir / f"bassmix{version.archive_tag()}.zip"

        if self.verbose:
            print(f"Downloading BASSmix {version} headers from {url} ...")
        try:
            urllib.request.urlretrieve(url, zip_path)
        except Exception as e:
            zip_path.unlink(missing_ok=True)
            self._remove_empty_dir(target_dir, created_dir)
            raise DownloadError(f"Failed to download BASSmix {version}: {e}") from e

        # Extract next to the target; only a fully read, CRC-checked member
        # replaces bassmix.h
        if self.verbose:
            print(f"Extracting {HEADER_FILENAME} to {target_dir} ...")
        try:
            with zipfile.ZipFile(zip_path, "r") as zf:
                member = self._find_header_member(zf)
                if member is None:
                    raise DownloadError(
                        f"{HEADER_FILENAME} not found in {url}. "
                        f"Contents: {zf.namelist()}"
                    )
                with zf.open(member) as src, open(partial, "wb") as dst:
                    shutil.copyfileobj(src, dst)
            partial.replace(target)
        except DownloadError:
            partial.unlink(missing_ok=True)
            zip_path.unlink(missing_ok=True)
            self._remove_empty_dir(target_dir, created_dir)
            raise
        except Exception as e:
            partial.unlink(missing_ok=True)
            zip_path.unlink(missing_ok=True)
            self._remove_empty_dir(target_dir, created_dir)
            raise DownloadError(f"Failed to extract BASSmix {version}: {e}") from e

        zip_path.unlink(missing_ok=True)
        return target

    @staticmethod
    def _remove_empty_dir(path: Path, created: bool) -> None:
        """Remove a version directory this fetch created, if nothing landed in it."""
        if created and path.is_dir() and not any(path.iterdir()):
            path.rmdir()

    @staticmethod
    def _find_header_member(zf: zipfile.ZipFile) -> Optional[str]:
        names = zf.namelist()
        if _ARCHIVE_HEADER_MEMBER in names:
            return _ARCHIVE_HEADER_MEMBER
        for name in names:
            if name.rsplit("/", 1)[-1] == HEADER_FILENAME:
                return name
        return None
