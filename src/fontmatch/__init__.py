"""fontmatch
=========

Locate the installed font that best satisfies an ordered list of family
preferences and desired weight, stretch and style, following the CSS Fonts
Level 3 matching algorithm.
"""

__version__ = "1.0.0"
__author__ = "fontmatch Team"

from .core.config import AppConfig, GenericFamilyConfig, SourceConfig
from .core.exceptions import (
    FontMatchError,
    FontNotFoundError,
    SelectionError,
    SourceAccessError,
)
from .core.models import (
    Description,
    FamilyHandle,
    FamilyName,
    MemoryHandle,
    PathHandle,
    Properties,
    Stretch,
    Style,
    Weight,
)
from .matching import FontSelector, find_best_match
from .sources import (
    FilesystemSource,
    FontconfigSource,
    FontSource,
    MemorySource,
    create_source,
)

__all__ = [
    "AppConfig",
    "Description",
    "FamilyHandle",
    "FamilyName",
    "FilesystemSource",
    "FontMatchError",
    "FontNotFoundError",
    "FontSelector",
    "FontSource",
    "FontconfigSource",
    "GenericFamilyConfig",
    "MemoryHandle",
    "MemorySource",
    "PathHandle",
    "Properties",
    "SelectionError",
    "SourceAccessError",
    "SourceConfig",
    "Stretch",
    "Style",
    "Weight",
    "create_source",
    "find_best_match",
]
