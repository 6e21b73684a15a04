"""Custom exceptions for the font matching system."""

from typing import Any


class FontMatchError(Exception):
    """Base exception for all fontmatch errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SelectionError(FontMatchError):
    """Exception raised when a font could not be selected."""


class FontNotFoundError(SelectionError):
    """No font, family or candidate satisfies the query.

    This is the recoverable branch of the selection taxonomy: the engine absorbs
    it per candidate and only reports it once every candidate is exhausted.
    """


class SourceAccessError(SelectionError):
    """The underlying font source could not be enumerated or described."""


class ConfigurationError(FontMatchError):
    """Exception raised for configuration errors."""


# Not found
class FamilyNotFoundError(FontNotFoundError):
    """Exception raised when a family name does not resolve to any font."""

    def __init__(self, family_name: str):
        super().__init__(f"Font family not found: {family_name}", details=family_name)
        self.family_name = family_name


class PostScriptNameNotFoundError(FontNotFoundError):
    """Exception raised when no installed font carries a PostScript name."""

    def __init__(self, postscript_name: str):
        super().__init__(f"No font with PostScript name: {postscript_name}", details=postscript_name)
        self.postscript_name = postscript_name


class NoMatchingFontError(FontNotFoundError):
    """Exception raised when no family in a preference list yields a match."""

    def __init__(self, family_names: list | None = None):
        names = ", ".join(str(name) for name in family_names or []) or "<empty>"
        super().__init__(f"No matching font for families: {names}", details=family_names)


class EmptyCandidateSetError(FontNotFoundError):
    """Exception raised when matching is attempted over zero candidates."""

    def __init__(self):
        super().__init__("No candidates to match against")


# Source access
class BackendUnavailableError(SourceAccessError):
    """Exception raised when a font source backend cannot be used on this host."""

    def __init__(self, backend: str, reason: str):
        super().__init__(f"Font source backend '{backend}' unavailable: {reason}")


class SourceCommandError(SourceAccessError):
    """Exception raised when a font registry command fails."""

    def __init__(self, command: str, error: str):
        super().__init__(f"Font registry command '{command}' failed: {error}")


class FontLoadError(SourceAccessError):
    """Exception raised when a font resource cannot be read."""

    def __init__(self, resource: str, error: str):
        super().__init__(f"Failed to load font {resource}: {error}")


class UnsupportedFontFileError(FontLoadError):
    """Exception raised for files that are not a supported font format."""

    def __init__(self, resource: str):
        super().__init__(resource, "unsupported font format")


class UnknownHandleError(SourceAccessError):
    """Exception raised when a source is asked to describe a handle it never issued."""

    def __init__(self, handle: Any):
        super().__init__(f"Handle not known to this source: {handle!r}", details=handle)


# Value validation
class EmptyFamilyError(ValueError):
    """Exception raised when a family handle is built from no fonts."""

    def __init__(self):
        super().__init__("A font family must contain at least one font")


class EmptyFamilyNameError(ValueError):
    """Exception raised for blank family names."""

    def __init__(self):
        super().__init__("Family name cannot be empty")


class NegativeFontIndexError(ValueError):
    """Exception raised for negative face indices."""

    def __init__(self):
        super().__init__("font_index must be non-negative")


class UnsortedMappingError(ValueError):
    """Exception raised when a piecewise-linear mapping is not strictly ascending."""

    def __init__(self, position: int):
        super().__init__(f"Mapping must be strictly ascending (violated at position {position})")


class EmptyMappingError(ValueError):
    """Exception raised when a piecewise-linear mapping has no breakpoints."""

    def __init__(self):
        super().__init__("Mapping must contain at least one value")


class UnknownBackendError(ValueError):
    """Exception raised for an unrecognised backend name."""

    def __init__(self, backend: str, allowed: list[str]):
        super().__init__(f"Unknown font source backend '{backend}'. Allowed: {allowed}")


# Configuration
class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")
