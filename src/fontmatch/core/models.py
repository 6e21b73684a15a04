"""Value types used as matching input and output."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import EmptyFamilyError, EmptyFamilyNameError, NegativeFontIndexError


class Weight:
    """Named CSS font-weight values."""

    THIN: ClassVar[float] = 100.0
    EXTRA_LIGHT: ClassVar[float] = 200.0
    LIGHT: ClassVar[float] = 300.0
    NORMAL: ClassVar[float] = 400.0
    MEDIUM: ClassVar[float] = 500.0
    SEMIBOLD: ClassVar[float] = 600.0
    BOLD: ClassVar[float] = 700.0
    EXTRA_BOLD: ClassVar[float] = 800.0
    BLACK: ClassVar[float] = 900.0

    MIN: ClassVar[float] = 1.0
    MAX: ClassVar[float] = 1000.0


class Stretch:
    """Named CSS font-stretch values, as fractions of normal width."""

    ULTRA_CONDENSED: ClassVar[float] = 0.5
    EXTRA_CONDENSED: ClassVar[float] = 0.625
    CONDENSED: ClassVar[float] = 0.75
    SEMI_CONDENSED: ClassVar[float] = 0.875
    NORMAL: ClassVar[float] = 1.0
    SEMI_EXPANDED: ClassVar[float] = 1.125
    EXPANDED: ClassVar[float] = 1.25
    EXTRA_EXPANDED: ClassVar[float] = 1.5
    ULTRA_EXPANDED: ClassVar[float] = 2.0

    # Index i is the OS/2 usWidthClass i + 1.
    MAPPING: ClassVar[tuple[float, ...]] = (0.5, 0.625, 0.75, 0.875, 1.0, 1.125, 1.25, 1.5, 2.0)

    MIN: ClassVar[float] = 0.5
    MAX: ClassVar[float] = 2.0


class Style(str, Enum):
    """Slant of a font face."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class Properties(BaseModel):
    """Desired or actual visual properties of a font face."""

    model_config = ConfigDict(frozen=True)

    weight: float = Field(Weight.NORMAL, ge=Weight.MIN, le=Weight.MAX, description="CSS weight")
    stretch: float = Field(Stretch.NORMAL, ge=Stretch.MIN, le=Stretch.MAX, description="CSS stretch")
    style: Style = Field(Style.NORMAL, description="Slant")

    def with_weight(self, weight: float) -> "Properties":
        return Properties(weight=weight, stretch=self.stretch, style=self.style)

    def with_stretch(self, stretch: float) -> "Properties":
        return Properties(weight=self.weight, stretch=stretch, style=self.style)

    def with_style(self, style: Style) -> "Properties":
        return Properties(weight=self.weight, stretch=self.stretch, style=style)

    def __str__(self) -> str:
        return f"weight={self.weight:g} stretch={self.stretch:g} style={self.style.value}"


class FamilyKind(str, Enum):
    """Which kind of family name a preference carries."""

    TITLE = "title"
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"


@dataclass(frozen=True)
class FamilyName:
    """A family-name preference: either an explicit title or a generic class."""

    kind: FamilyKind
    name: str | None = None

    SERIF: ClassVar["FamilyName"]
    SANS_SERIF: ClassVar["FamilyName"]
    MONOSPACE: ClassVar["FamilyName"]
    CURSIVE: ClassVar["FamilyName"]
    FANTASY: ClassVar["FamilyName"]

    def __post_init__(self):
        if self.kind is FamilyKind.TITLE and not (self.name and self.name.strip()):
            raise EmptyFamilyNameError()

    @classmethod
    def title(cls, name: str) -> "FamilyName":
        """Create an explicit family-name preference."""
        return cls(FamilyKind.TITLE, name)

    @classmethod
    def parse(cls, text: str) -> "FamilyName":
        """
        Parse a CSS font-family list entry.

        Unquoted generic keywords become generic preferences; anything else,
        including quoted keywords, is taken as an explicit family title.
        """
        stripped = text.strip()
        if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in "'\"":
            return cls.title(stripped[1:-1])
        lowered = stripped.lower()
        for kind in FamilyKind:
            if kind is not FamilyKind.TITLE and kind.value == lowered:
                return cls(kind)
        return cls.title(stripped)

    @property
    def is_generic(self) -> bool:
        return self.kind is not FamilyKind.TITLE

    def __str__(self) -> str:
        return self.name if self.kind is FamilyKind.TITLE else self.kind.value


FamilyName.SERIF = FamilyName(FamilyKind.SERIF)
FamilyName.SANS_SERIF = FamilyName(FamilyKind.SANS_SERIF)
FamilyName.MONOSPACE = FamilyName(FamilyKind.MONOSPACE)
FamilyName.CURSIVE = FamilyName(FamilyKind.CURSIVE)
FamilyName.FANTASY = FamilyName(FamilyKind.FANTASY)


@dataclass(frozen=True)
class PathHandle:
    """A font face stored on disk."""

    path: Path
    font_index: int = 0

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))
        if self.font_index < 0:
            raise NegativeFontIndexError()

    def __str__(self) -> str:
        return f"{self.path}#{self.font_index}"


@dataclass(frozen=True)
class MemoryHandle:
    """A font face held in an owned byte buffer."""

    data: bytes = field(repr=False)
    font_index: int = 0

    def __post_init__(self):
        object.__setattr__(self, "data", bytes(self.data))
        if self.font_index < 0:
            raise NegativeFontIndexError()

    def __str__(self) -> str:
        return f"<memory {len(self.data)} bytes>#{self.font_index}"


Handle = Union[PathHandle, MemoryHandle]


@dataclass(frozen=True)
class FamilyHandle:
    """Ordered, non-empty set of handles belonging to one family."""

    fonts: tuple[Handle, ...]

    def __post_init__(self):
        object.__setattr__(self, "fonts", tuple(self.fonts))
        if not self.fonts:
            raise EmptyFamilyError()

    @classmethod
    def from_font_handles(cls, handles: Iterable[Handle]) -> "FamilyHandle":
        return cls(tuple(handles))

    def __iter__(self) -> Iterator[Handle]:
        return iter(self.fonts)

    def __len__(self) -> int:
        return len(self.fonts)

    def __getitem__(self, index: int) -> Handle:
        return self.fonts[index]


@dataclass(frozen=True)
class Description:
    """Family name and properties of one font face, as reported by a source."""

    family_name: str
    properties: Properties = field(default_factory=Properties)
    postscript_name: str | None = None

    def __str__(self) -> str:
        return f"{self.family_name} ({self.properties})"
