"""
Resource access utilities for bassmix_headers.

Raw BASSmix headers are bundled with the package, one directory per
version: headers/<version>/bassmix.h
"""

from pathlib import Path

HEADER_FILENAME = "bassmix.h"


def get_resources_dir() -> Path:
    """
    Get the path to the resources directory.

    Returns:
        Path to the resources directory within the package.
    """
    return Path(__file__).parent


def get_headers_dir() -> Path:
    """
    Get the path to the bundled header tree.

    Returns:
        Path to the headers/ directory.
    """
    return get_resources_dir() / "headers"


def list_bundled_headers() -> list[Path]:
    """
    List all bundled header files.

    Returns:
        Sorted list of paths to bundled bassmix.h files.
    """
    headers_dir = get_headers_dir()
    if not headers_dir.is_dir():
        return []
    return sorted(headers_dir.glob(f"*/{HEADER_FILENAME}"))
