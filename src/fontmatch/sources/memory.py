"""
Memory Font Source
==================

A font source whose inventory is held entirely in memory. Fonts are either
registered with a known description or loaded from handles and described with
the fontTools loader.
"""

import logging
from collections.abc import Iterable

from ..core.exceptions import FamilyNotFoundError, UnknownHandleError
from ..core.models import Description, FamilyHandle, Handle
from .base import FontSource
from .loader import describe_handle, load_handles_from_data

logger = logging.getLogger(__name__)


class MemorySource(FontSource):
    """
    Font source over a fixed list of fonts.

    Families are listed in order of first appearance and each family keeps its
    fonts in registration order. The inventory never changes after
    construction, so concurrent reads are safe.
    """

    def __init__(self, fonts: Iterable[tuple[Handle, Description]] = ()):
        """
        Initialize memory source.

        Args:
            fonts: Pairs of handle and description, in catalog order
        """
        self._descriptions: dict[Handle, Description] = {}
        self._families: dict[str, list[Handle]] = {}

        for handle, description in fonts:
            if handle in self._descriptions:
                logger.debug(f"Ignoring duplicate font handle {handle}")
                continue
            self._descriptions[handle] = description
            self._families.setdefault(description.family_name, []).append(handle)

        logger.debug(
            f"MemorySource initialized with {len(self._descriptions)} fonts "
            f"in {len(self._families)} families"
        )

    @classmethod
    def from_handles(cls, handles: Iterable[Handle]) -> "MemorySource":
        """
        Build a source by describing each handle with the font loader.

        Raises:
            FontLoadError: If any handle cannot be described
        """
        return cls((handle, describe_handle(handle)) for handle in handles)

    @classmethod
    def from_font_data(cls, fonts: Iterable[bytes]) -> "MemorySource":
        """Build a source from raw font files, one entry per face."""
        handles = [handle for data in fonts for handle in load_handles_from_data(data)]
        return cls.from_handles(handles)

    def __len__(self) -> int:
        return len(self._descriptions)

    def all_families(self) -> list[str]:
        return list(self._families)

    def all_fonts(self) -> list[Handle]:
        return list(self._descriptions)

    def select_family_by_name(self, family_name: str) -> FamilyHandle:
        handles = self._families.get(family_name)
        if not handles:
            raise FamilyNotFoundError(family_name)
        return FamilyHandle.from_font_handles(handles)

    def describe(self, handle: Handle) -> Description:
        try:
            return self._descriptions[handle]
        except KeyError:
            raise UnknownHandleError(handle) from None

