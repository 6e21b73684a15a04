"""
Filesystem Font Source
======================

Source for fonts found by scanning font directories on the local machine.
Each face of each font file, including collection members, becomes one
handle described with the fontTools loader.
"""

import logging
import os
import platform
from collections.abc import Iterable
from pathlib import Path

from ..core.config import DEFAULT_FONT_EXTENSIONS, SourceConfig
from ..core.exceptions import FontLoadError
from .loader import describe_handle, load_handles_from_path
from .memory import MemorySource

logger = logging.getLogger(__name__)


def default_font_directories(system: str | None = None) -> list[Path]:
    """Get standard font directories for an operating system."""
    system = (system or platform.system()).lower()

    if system == "windows":
        return [
            Path(os.environ.get("WINDIR", "C:\\Windows")) / "Fonts",
            Path(os.environ.get("LOCALAPPDATA", "")) / "Microsoft" / "Windows" / "Fonts",
        ]

    if system == "darwin":  # macOS
        return [
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            Path.home() / "Library" / "Fonts",
        ]

    # Linux, Android and other Unix-like systems
    return [
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        Path("/system/fonts"),
        Path.home() / ".fonts",
        Path.home() / ".local" / "share" / "fonts",
    ]


class FilesystemSource(MemorySource):
    """
    Source for fonts installed as files in a set of directories.

    Directories are scanned once, at construction. Files that are not readable
    fonts are skipped.
    """

    def __init__(
        self,
        directories: Iterable[Path | str] | None = None,
        config: SourceConfig | None = None,
    ):
        """
        Initialize filesystem source.

        Args:
            directories: Directories to scan; defaults to the configured or
                platform font directories
            config: Source configuration
        """
        self.config = config
        if directories is None and config and config.font_directories:
            directories = config.font_directories
        candidates = [Path(d) for d in directories] if directories is not None else (
            default_font_directories()
        )
        self.font_directories = [d for d in candidates if d.exists() and d.is_dir()]
        self.font_extensions = set(config.font_extensions if config else DEFAULT_FONT_EXTENSIONS)
        self.follow_symlinks = config.follow_symlinks if config else True

        logger.debug(f"Font directories: {self.font_directories}")
        super().__init__(self._scan())
        logger.info(
            f"FilesystemSource found {len(self)} fonts in {len(self.font_directories)} directories"
        )

    def _scan(self):
        seen: set[Path] = set()
        for font_dir in self.font_directories:
            for font_file in self._font_files(font_dir):
                if font_file in seen:
                    continue
                seen.add(font_file)
                yield from self._load_font_file(font_file)

    def _font_files(self, font_dir: Path) -> list[Path]:
        """List font files below a directory, in a stable order."""
        try:
            files = [
                path
                for path in font_dir.rglob("*")
                if path.suffix.lower() in self.font_extensions
                and path.is_file()
                and (self.follow_symlinks or not path.is_symlink())
            ]
        except PermissionError:
            logger.debug(f"Permission denied accessing {font_dir}")
            return []
        except OSError as e:
            logger.warning(f"Error scanning {font_dir}: {e}")
            return []
        return sorted(files)

    def _load_font_file(self, font_file: Path):
        try:
            handles = load_handles_from_path(font_file)
            return [(handle, describe_handle(handle)) for handle in handles]
        except FontLoadError as e:
            logger.debug(f"Failed to process font {font_file}: {e}")
            return []
