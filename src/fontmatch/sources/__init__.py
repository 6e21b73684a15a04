"""Font Sources
============

Backends that enumerate installed fonts, and the factory that picks one.
"""

import logging
import shutil

from ..core.config import SourceConfig
from .base import FontSource
from .filesystem import FilesystemSource, default_font_directories
from .fontconfig import FontconfigSource
from .memory import MemorySource

logger = logging.getLogger(__name__)


def create_source(config: SourceConfig | None = None) -> FontSource:
    """
    Create the font source selected by configuration.

    ``system`` resolves to fontconfig where ``fc-list`` is installed and to a
    filesystem scan of the platform font directories otherwise.
    """
    config = config or SourceConfig()
    backend = config.backend

    if backend == "system":
        backend = "fontconfig" if shutil.which("fc-list") else "filesystem"
        logger.info(f"Using {backend} backend for system fonts")

    if backend == "fontconfig":
        return FontconfigSource(config)
    return FilesystemSource(config=config)


__all__ = [
    "FilesystemSource",
    "FontSource",
    "FontconfigSource",
    "MemorySource",
    "create_source",
    "default_font_directories",
]
