"""Core components for font matching."""

from .config import AppConfig, GenericFamilyConfig, SourceConfig
from .exceptions import (
    ConfigurationError,
    FamilyNotFoundError,
    FontMatchError,
    FontNotFoundError,
    NoMatchingFontError,
    PostScriptNameNotFoundError,
    SelectionError,
    SourceAccessError,
)
from .models import (
    Description,
    FamilyHandle,
    FamilyKind,
    FamilyName,
    Handle,
    MemoryHandle,
    PathHandle,
    Properties,
    Stretch,
    Style,
    Weight,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "Description",
    "FamilyHandle",
    "FamilyKind",
    "FamilyName",
    "FamilyNotFoundError",
    "FontMatchError",
    "FontNotFoundError",
    "GenericFamilyConfig",
    "Handle",
    "MemoryHandle",
    "NoMatchingFontError",
    "PathHandle",
    "PostScriptNameNotFoundError",
    "Properties",
    "SelectionError",
    "SourceAccessError",
    "SourceConfig",
    "Stretch",
    "Style",
    "Weight",
]
