"""
Font Selector
=============

Facade that binds a font source, the generic family defaults and a matching
policy together so callers can issue style requests without passing them on
every call.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..core.config import GenericFamilyConfig
from ..core.models import Description, FamilyHandle, FamilyName, Handle, Properties
from . import selector
from .policy import MatchingPolicy, find_best_match

if TYPE_CHECKING:
    from ..sources.base import FontSource

logger = logging.getLogger(__name__)


class FontSelector:
    """
    Stateless font selection engine over one font source.

    The selector holds no enumeration state of its own. It is safe to share
    between threads as long as the source supports concurrent reads.
    """

    def __init__(
        self,
        source: "FontSource",
        generic_families: GenericFamilyConfig | None = None,
        policy: MatchingPolicy | None = None,
    ):
        """
        Initialize font selector.

        Args:
            source: Font source to query
            generic_families: Defaults for generic family classes
            policy: In-family matching policy; CSS Fonts Level 3 by default
        """
        self._source = source
        self._generic_families = generic_families or selector.DEFAULT_GENERIC_FAMILIES
        self._policy = policy or find_best_match

        logger.debug(f"FontSelector initialized over {type(source).__name__}")

    @property
    def source(self) -> "FontSource":
        return self._source

    @property
    def generic_families(self) -> GenericFamilyConfig:
        return self._generic_families

    def all_families(self) -> list[str]:
        return self._source.all_families()

    def describe(self, handle: Handle) -> Description:
        return self._source.describe(handle)

    def select_family_by_generic_name(self, family_name: FamilyName) -> FamilyHandle:
        return selector.select_family_by_generic_name(
            self._source, family_name, self._generic_families
        )

    def select_best_match(
        self, family_names: Sequence[FamilyName], properties: Properties | None = None
    ) -> Handle:
        """Select the best font for a family list; default properties if omitted."""
        return selector.select_best_match(
            self._source,
            family_names,
            properties or Properties(),
            generic_families=self._generic_families,
            policy=self._policy,
        )

    def select_by_postscript_name(self, postscript_name: str) -> Handle:
        return self._source.select_by_postscript_name(postscript_name)

    def select_descriptions_in_family(self, family: FamilyHandle) -> list[Description]:
        return selector.select_descriptions_in_family(self._source, family)
