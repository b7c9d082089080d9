"""
Public entry point: select, materialize and render a BASSmix header.

Usage:
    from bassmix_headers import Platform, create

    header = create(Platform.LINUX, "2.4").render()
"""

from pathlib import Path
from typing import Optional, Union

from bassmix_headers.core.preprocessor import (
    HeaderPreprocessor,
    PreprocessingContext,
    PreprocessorAdapter,
)
from bassmix_headers.core.store import HeaderStore
from bassmix_headers.platforms import Platform
from bassmix_headers.version import LATEST, Version, coerce_version


class HeaderProvider:
    """A validated platform/version pair ready to be rendered."""

    def __init__(
        self,
        version: Version,
        context: PreprocessingContext,
        platform: Optional[Platform] = None,
        store: Optional[HeaderStore] = None,
        adapter: Optional[PreprocessorAdapter] = None,
    ):
        self.version = version
        self.context = context
        self.platform = platform
        self.store = store if store is not None else HeaderStore()
        self.adapter = adapter if adapter is not None else PreprocessorAdapter()

    @property
    def header_path(self) -> Path:
        return self.store.resolve_path(self.version)

    def ensure_available(self) -> Path:
        """Fetch the raw header if it is not on disk yet."""
        return self.store.ensure_available(self.version)

    def render(self) -> str:
        """
        Render the preprocessed header.

        Returns:
            Header text ending with a single newline.

        Raises:
            UnavailableHeaderError: If the header cannot be materialized.
            PreprocessingError: If preprocessing fails.
        """
        path = self.ensure_available()
        return self.adapter.process(path, self.context)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        target = self.platform.name if self.platform else "unspecified"
        return f"HeaderProvider({self.version}, {target})"


def create(
    platform: Optional[Platform] = None,
    version: Union[Version, str] = LATEST,
    preprocessor: Optional[HeaderPreprocessor] = None,
    store: Optional[HeaderStore] = None,
) -> HeaderProvider:
    """
    Create a header provider for a platform and version.

    Does not touch the filesystem or network; call render() or
    ensure_available() for that.

    Args:
        platform: Target platform, or None for no platform macros.
        version: Version or version string. Defaults to the latest release.
        preprocessor: Preprocessor engine. Defaults to pcpp.
        store: Header store. Defaults to the bundled headers.

    Returns:
        HeaderProvider with a fresh preprocessing context.

    Raises:
        InvalidFormatError: If version is a malformed string.
        UnsupportedPlatformError: If the platform/version pair is not offered.
    """
    version = coerce_version(version)
    adapter = PreprocessorAdapter(preprocessor)
    context = adapter.build(platform, version)
    return HeaderProvider(
        version, context, platform=platform, store=store, adapter=adapter
    )
