"""
Pytest configuration and fixtures for font matching tests.
"""

import io
import tempfile
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTCollection, TTFont

from fontmatch.core.models import Description, PathHandle, Properties, Style
from fontmatch.sources import MemorySource

FS_SELECTION_ITALIC = 0x01
FS_SELECTION_REGULAR = 0x40
FS_SELECTION_OBLIQUE = 0x200


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 500))
    pen.lineTo((500, 500))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def build_font(
    family: str,
    style_name: str = "Regular",
    postscript_name: str | None = None,
    weight: int = 400,
    width_class: int = 5,
    fs_selection: int = FS_SELECTION_REGULAR,
) -> FontBuilder:
    """Build a minimal TrueType font with the given naming and OS/2 values."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({0x41: "A"})
    fb.setupGlyf({".notdef": _square_glyph(), "A": _square_glyph()})
    fb.setupHorizontalMetrics({".notdef": (600, 0), "A": (600, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style_name,
            "psName": postscript_name or f"{family.replace(' ', '')}-{style_name}",
        }
    )
    fb.setupOS2(
        version=4, usWeightClass=weight, usWidthClass=width_class, fsSelection=fs_selection
    )
    fb.setupPost()
    return fb


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def make_font_file(temp_dir):
    """Factory writing a generated font into the temporary directory."""

    def _make(filename: str, family: str, **kwargs) -> Path:
        path = temp_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        build_font(family, **kwargs).save(str(path))
        return path

    return _make


@pytest.fixture
def make_font_bytes():
    """Factory returning a generated font as bytes."""

    def _make(family: str, **kwargs) -> bytes:
        buffer = io.BytesIO()
        build_font(family, **kwargs).save(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
def make_collection_file(temp_dir):
    """Factory writing a font collection with one face per (family, kwargs) pair."""

    def _make(filename: str, faces: list[tuple[str, dict]]) -> Path:
        fonts = []
        for family, kwargs in faces:
            buffer = io.BytesIO()
            build_font(family, **kwargs).save(buffer)
            buffer.seek(0)
            fonts.append(TTFont(buffer))
        collection = TTCollection()
        collection.fonts = fonts
        path = temp_dir / filename
        collection.save(str(path))
        return path

    return _make


@pytest.fixture
def font_dir(make_font_file, temp_dir):
    """Directory with two small families on disk."""
    make_font_file("TestSans-Regular.ttf", "Test Sans", postscript_name="TestSans-Regular")
    make_font_file(
        "TestSans-Bold.ttf",
        "Test Sans",
        style_name="Bold",
        postscript_name="TestSans-Bold",
        weight=700,
    )
    make_font_file(
        "serif/TestSerif-Italic.ttf",
        "Test Serif",
        style_name="Italic",
        postscript_name="TestSerif-Italic",
        fs_selection=FS_SELECTION_ITALIC,
    )
    (temp_dir / "README.txt").write_text("not a font")
    return temp_dir


def description(family, weight=400.0, stretch=1.0, style=Style.NORMAL, postscript_name=None):
    return Description(
        family_name=family,
        properties=Properties(weight=weight, stretch=stretch, style=style),
        postscript_name=postscript_name,
    )


@pytest.fixture
def sample_fonts():
    """Handle/description pairs for an in-memory catalog."""
    return [
        (PathHandle("/fonts/Arial.ttf"), description("Arial", postscript_name="ArialMT")),
        (
            PathHandle("/fonts/Arial Bold.ttf"),
            description("Arial", weight=700, postscript_name="Arial-BoldMT"),
        ),
        (
            PathHandle("/fonts/Arial Italic.ttf"),
            description("Arial", style=Style.ITALIC, postscript_name="Arial-ItalicMT"),
        ),
        (
            PathHandle("/fonts/Times.ttc", 0),
            description("Times New Roman", postscript_name="TimesNewRomanPSMT"),
        ),
        (
            PathHandle("/fonts/Times.ttc", 1),
            description("Times New Roman", weight=700, postscript_name="TimesNewRomanPS-BoldMT"),
        ),
        (
            PathHandle("/fonts/CourierNew.ttf"),
            description("Courier New", postscript_name="CourierNewPSMT"),
        ),
    ]


@pytest.fixture
def memory_source(sample_fonts):
    """In-memory source over the sample fonts."""
    return MemorySource(sample_fonts)


@pytest.fixture
def make_description():
    """Factory for descriptions with default properties."""
    return description
