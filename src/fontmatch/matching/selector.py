"""
Font Selection
==============

Source-independent selection algorithms. Every function takes the font source
to query as its first argument and keeps no state between calls, so the same
functions serve every backend.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..core.config import GenericFamilyConfig
from ..core.exceptions import (
    FontNotFoundError,
    NoMatchingFontError,
    PostScriptNameNotFoundError,
    SourceAccessError,
)
from ..core.models import Description, FamilyHandle, FamilyName, Handle, Properties
from .policy import MatchingPolicy, find_best_match

if TYPE_CHECKING:
    from ..sources.base import FontSource

logger = logging.getLogger(__name__)

# Built-in defaults; environment overrides apply only to explicitly loaded configs.
DEFAULT_GENERIC_FAMILIES = GenericFamilyConfig.model_construct()


def select_family_by_generic_name(
    source: "FontSource",
    family_name: FamilyName,
    generic_families: GenericFamilyConfig | None = None,
) -> FamilyHandle:
    """
    Resolve a family-name preference to one family.

    Generic classes resolve through ``generic_families`` to a single default
    family, even though a generic class could stand for several.

    Raises:
        FamilyNotFoundError: If the family does not exist in the source
        SourceAccessError: If the source could not be queried
    """
    if generic_families is None:
        generic_families = DEFAULT_GENERIC_FAMILIES
    title = generic_families.family_for(family_name)
    if family_name.is_generic:
        logger.debug(f"Generic family {family_name} resolves to '{title}'")
    return source.select_family_by_name(title)


def select_descriptions_in_family(
    source: "FontSource", family: FamilyHandle
) -> list[Description]:
    """
    Describe every font in a family, preserving order.

    Raises:
        SourceAccessError: On the first font that cannot be described
    """
    return [source.describe(handle) for handle in family]


def select_best_match(
    source: "FontSource",
    family_names: Sequence[FamilyName],
    properties: Properties,
    *,
    generic_families: GenericFamilyConfig | None = None,
    policy: MatchingPolicy | None = None,
) -> Handle:
    """
    Select the best font for a prioritized family list and desired properties.

    The first family, in preference order, that resolves and yields a match
    wins; later families are never consulted. This is not a global search for
    the best face across all families.

    Args:
        source: Font source to query
        family_names: Family preferences, most preferred first
        properties: Desired weight, stretch and style
        generic_families: Defaults for generic family classes
        policy: In-family matching policy; CSS Fonts Level 3 by default

    Returns:
        Handle of the chosen font

    Raises:
        NoMatchingFontError: If no preference yields a font
        SourceAccessError: If the source fails while describing candidates
    """
    policy = policy or find_best_match

    for family_name in family_names:
        try:
            family = select_family_by_generic_name(source, family_name, generic_families)
        except FontNotFoundError:
            logger.debug(f"Family {family_name} not found, trying next preference")
            continue

        candidates = select_descriptions_in_family(source, family)
        try:
            index = policy(candidates, properties)
        except FontNotFoundError:
            logger.debug(f"No candidate in {family_name} matches {properties}")
            continue

        return family[index]

    raise NoMatchingFontError(list(family_names))


def select_by_postscript_name(source: "FontSource", postscript_name: str) -> Handle:
    """
    Find a font by PostScript name by describing every installed font.

    Cost is linear in the number of installed fonts. Families that fail to
    resolve or describe are skipped.

    Raises:
        PostScriptNameNotFoundError: If no installed font has the name
        SourceAccessError: If the family list itself cannot be read
    """
    # TODO: check families whose names prefix the PostScript name first
    for family_name in source.all_families():
        try:
            family = source.select_family_by_name(family_name)
            descriptions = select_descriptions_in_family(source, family)
        except (FontNotFoundError, SourceAccessError) as e:
            logger.debug(f"Skipping family '{family_name}': {e}")
            continue

        for handle, description in zip(family, descriptions, strict=True):
            if description.postscript_name == postscript_name:
                return handle

    raise PostScriptNameNotFoundError(postscript_name)
