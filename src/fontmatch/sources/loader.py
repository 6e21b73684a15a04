"""
Font Loader
===========

Reads the family name, PostScript name and style properties of font faces
with fontTools. Only the ``name``, ``OS/2`` and ``head`` tables are touched;
glyph data is never parsed.
"""

import io
import logging
from pathlib import Path

from fontTools.ttLib import TTCollection, TTFont

from ..core.exceptions import FontLoadError, UnsupportedFontFileError
from ..core.models import Description, Handle, MemoryHandle, PathHandle, Properties, Style, Weight
from ..utils.scale import clamp, width_class_to_css

logger = logging.getLogger(__name__)

COLLECTION_TAG = b"ttcf"
SFNT_TAGS = {b"\x00\x01\x00\x00", b"OTTO", b"true", b"wOFF", b"wOF2", COLLECTION_TAG}

FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_OBLIQUE = 1 << 9
MAC_STYLE_ITALIC = 1 << 1

NAME_ID_FAMILY = 1
NAME_ID_POSTSCRIPT = 6
NAME_ID_TYPOGRAPHIC_FAMILY = 16


def _open_stream(handle_or_path: Handle | Path | str):
    if isinstance(handle_or_path, MemoryHandle):
        return io.BytesIO(handle_or_path.data)
    if isinstance(handle_or_path, PathHandle):
        return open(handle_or_path.path, "rb")
    return open(handle_or_path, "rb")


def _read_tag(stream) -> bytes:
    tag = stream.read(4)
    stream.seek(0)
    return tag


def count_faces(resource: Handle | Path | str) -> int:
    """
    Count the faces stored in a font file or buffer.

    Raises:
        UnsupportedFontFileError: If the data is not an sfnt-based font
        FontLoadError: If the data cannot be read
    """
    try:
        with _open_stream(resource) as stream:
            tag = _read_tag(stream)
            if tag not in SFNT_TAGS:
                raise UnsupportedFontFileError(str(resource))
            if tag != COLLECTION_TAG:
                return 1
            with TTCollection(stream, lazy=True) as collection:
                return len(collection.fonts)
    except FontLoadError:
        raise
    except Exception as e:
        raise FontLoadError(str(resource), str(e)) from e


def load_handles_from_path(path: Path | str) -> list[PathHandle]:
    """Create one handle per face in a font file."""
    path = Path(path)
    return [PathHandle(path, index) for index in range(count_faces(path))]


def load_handles_from_data(data: bytes) -> list[MemoryHandle]:
    """Create one handle per face in an in-memory font."""
    handle = MemoryHandle(data)
    return [MemoryHandle(handle.data, index) for index in range(count_faces(handle))]


def _style_from_tables(font: TTFont) -> Style:
    if "OS/2" in font:
        fs_selection = font["OS/2"].fsSelection
        if fs_selection & FS_SELECTION_OBLIQUE:
            return Style.OBLIQUE
        if fs_selection & FS_SELECTION_ITALIC:
            return Style.ITALIC
        return Style.NORMAL
    if "head" in font and font["head"].macStyle & MAC_STYLE_ITALIC:
        return Style.ITALIC
    return Style.NORMAL


def describe_font(font: TTFont) -> Description:
    """Build a description from an open fontTools font."""
    name_table = font["name"]
    family_name = name_table.getDebugName(NAME_ID_TYPOGRAPHIC_FAMILY) or name_table.getDebugName(
        NAME_ID_FAMILY
    )
    if not family_name:
        raise ValueError("font has no family name")

    weight = Weight.NORMAL
    stretch = 1.0
    if "OS/2" in font:
        os2 = font["OS/2"]
        weight = clamp(float(os2.usWeightClass), Weight.MIN, Weight.MAX)
        stretch = width_class_to_css(os2.usWidthClass)

    return Description(
        family_name=family_name,
        properties=Properties(weight=weight, stretch=stretch, style=_style_from_tables(font)),
        postscript_name=name_table.getDebugName(NAME_ID_POSTSCRIPT),
    )


def describe_handle(handle: Handle) -> Description:
    """
    Describe the face a handle refers to.

    Raises:
        FontLoadError: If the face cannot be read
    """
    try:
        with _open_stream(handle) as stream, TTFont(
            stream, fontNumber=handle.font_index, lazy=True
        ) as font:
            return describe_font(font)
    except Exception as e:
        logger.debug(f"Failed to describe {handle}: {e}")
        raise FontLoadError(str(handle), str(e)) from e
