"""
Font Source Interface
=====================

The capability contract every font registry backend implements. A source
answers three questions: which families exist, which fonts belong to a family,
and what a given font looks like. Selection algorithms are provided on top of
those three answers.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..core.config import GenericFamilyConfig
from ..core.models import Description, FamilyHandle, FamilyName, Handle, Properties
from ..matching import selector
from ..matching.policy import MatchingPolicy


class FontSource(ABC):
    """A queryable database of installed fonts."""

    @abstractmethod
    def all_families(self) -> list[str]:
        """
        List every installed family name.

        Raises:
            SourceAccessError: If the registry cannot be enumerated
        """

    @abstractmethod
    def select_family_by_name(self, family_name: str) -> FamilyHandle:
        """
        Look up a family by exact name.

        Raises:
            FamilyNotFoundError: If no font belongs to the family
            SourceAccessError: If the registry cannot be queried
        """

    @abstractmethod
    def describe(self, handle: Handle) -> Description:
        """
        Report the family name and properties of one font.

        Must succeed for any handle returned by ``select_family_by_name`` and
        return equal descriptions for repeated calls.

        Raises:
            SourceAccessError: If the font cannot be read
        """

    def select_by_postscript_name(self, postscript_name: str) -> Handle:
        """Select a font by PostScript name; brute-force unless overridden."""
        return selector.select_by_postscript_name(self, postscript_name)

    def select_family_by_generic_name(
        self, family_name: FamilyName, generic_families: GenericFamilyConfig | None = None
    ) -> FamilyHandle:
        return selector.select_family_by_generic_name(self, family_name, generic_families)

    def select_best_match(
        self,
        family_names: Sequence[FamilyName],
        properties: Properties,
        generic_families: GenericFamilyConfig | None = None,
        policy: MatchingPolicy | None = None,
    ) -> Handle:
        """Select a font following CSS Fonts Level 3 matching."""
        return selector.select_best_match(
            self, family_names, properties, generic_families=generic_families, policy=policy
        )

    def select_descriptions_in_family(self, family: FamilyHandle) -> list[Description]:
        return selector.select_descriptions_in_family(self, family)
