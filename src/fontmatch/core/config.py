"""Configuration management for the font matching system."""

from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
    UnknownBackendError,
)
from .models import FamilyKind, FamilyName

BACKENDS = ["system", "filesystem", "fontconfig"]

DEFAULT_FONT_EXTENSIONS = [".ttf", ".otf", ".ttc", ".otc"]


class GenericFamilyConfig(BaseSettings):
    """
    Default family for each CSS generic family class.

    Each generic class resolves to exactly one family name. The mapping is not
    locale-aware and is fixed for the lifetime of the selector that holds it.
    """

    model_config = SettingsConfigDict(
        env_prefix="GENERIC_FAMILY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    serif: str = Field("Times New Roman", min_length=1, description="Default serif family")
    sans_serif: str = Field("Arial", min_length=1, description="Default sans-serif family")
    monospace: str = Field("Courier New", min_length=1, description="Default monospace family")
    cursive: str = Field("Comic Sans MS", min_length=1, description="Default cursive family")
    fantasy: str = Field("Papyrus", min_length=1, description="Default fantasy family")

    def family_for(self, family_name: FamilyName) -> str:
        """Return the concrete family title a preference stands for."""
        if family_name.kind is FamilyKind.TITLE:
            return family_name.name
        return {
            FamilyKind.SERIF: self.serif,
            FamilyKind.SANS_SERIF: self.sans_serif,
            FamilyKind.MONOSPACE: self.monospace,
            FamilyKind.CURSIVE: self.cursive,
            FamilyKind.FANTASY: self.fantasy,
        }[family_name.kind]


class SourceConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONT_SOURCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font source backend configuration."""

    backend: str = Field("system", description="Backend (system, filesystem, fontconfig)")
    font_directories: list[Path] = Field(
        default_factory=list,
        description="Directories to scan; empty means the platform defaults",
    )
    font_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FONT_EXTENSIONS),
        description="File extensions treated as fonts by the filesystem backend",
    )
    fc_timeout: float = Field(10.0, gt=0.0, description="Timeout for fontconfig commands (s)")
    follow_symlinks: bool = Field(True, description="Follow symlinked font files while scanning")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v):
        v = v.lower()
        if v not in BACKENDS:
            raise UnknownBackendError(v, BACKENDS)
        return v

    @field_validator("font_extensions")
    @classmethod
    def normalize_extensions(cls, v):
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONTMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Top-level application configuration."""

    log_level: str = Field("INFO", description="Application log level")
    generic_families: GenericFamilyConfig = Field(default_factory=GenericFamilyConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return v

    @classmethod
    def load_from_env(cls, env_file: str | Path | None = ".env") -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        if env_file:
            env_file = Path(env_file)
            if env_file.exists():
                return cls(_env_file=env_file)
        return cls()


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        if issubclass(config_class, BaseSettings):
            # YAML values take precedence; do not mix in a .env file
            class TempConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                )

            return TempConfig(**config_data)
        return config_class(**config_data)

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except Exception as e:
        raise ConfigLoadError(str(e)) from e


def _add_yaml_methods():
    """Add YAML loading methods to configuration classes."""

    @classmethod
    def from_yaml(cls, config_path: str | Path):
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(cls, yaml_path: str | Path | None = None, env_file: str = ".env"):
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)

    for config_class in [GenericFamilyConfig, SourceConfig, AppConfig]:
        config_class.from_yaml = from_yaml
        config_class.from_env_and_yaml = from_env_and_yaml


_add_yaml_methods()
