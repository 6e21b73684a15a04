"""
Matching Policy
===============

Font matching within a single family, after CSS Fonts Level 3 section 5.2,
step 4. Candidates are narrowed by stretch, then style, then weight; the first
survivor in catalog order wins. Font size (step 4d) is ignored because the
fonts handled here are unsized.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from ..core.exceptions import EmptyCandidateSetError
from ..core.models import Description, Properties, Stretch, Style, Weight

logger = logging.getLogger(__name__)

STYLE_PREFERENCES: dict[Style, tuple[Style, ...]] = {
    Style.ITALIC: (Style.ITALIC, Style.OBLIQUE, Style.NORMAL),
    Style.OBLIQUE: (Style.OBLIQUE, Style.ITALIC, Style.NORMAL),
    Style.NORMAL: (Style.NORMAL, Style.OBLIQUE, Style.ITALIC),
}


class MatchingPolicy(Protocol):
    """Chooses one candidate index, or raises ``FontNotFoundError``."""

    def __call__(self, candidates: Sequence[Description], query: Properties) -> int: ...


def _closest(values: list[float], target: float) -> float:
    return min(values, key=lambda value: abs(value - target))


def _match_stretch(stretches: list[float], query: float) -> float:
    if query in stretches:
        return query

    narrower = [stretch for stretch in stretches if stretch < query]
    wider = [stretch for stretch in stretches if stretch > query]
    if query <= Stretch.NORMAL:
        preferred, fallback = narrower, wider
    else:
        preferred, fallback = wider, narrower

    return _closest(preferred or fallback, query)


def _match_style(styles: list[Style], query: Style) -> Style:
    return next(style for style in STYLE_PREFERENCES[query] if style in styles)


def _match_weight(weights: list[float], query: float) -> float:
    if query in weights:
        return query

    # The 400-500 band is split at 450: below it 500 is tried first, above it 400.
    if Weight.NORMAL <= query < 450.0 and Weight.MEDIUM in weights:
        return Weight.MEDIUM
    if 450.0 <= query <= Weight.MEDIUM and Weight.NORMAL in weights:
        return Weight.NORMAL

    lighter = [weight for weight in weights if weight <= query]
    heavier = [weight for weight in weights if weight >= query]
    if query <= Weight.MEDIUM:
        preferred, fallback = lighter, heavier
    else:
        preferred, fallback = heavier, lighter

    return _closest(preferred or fallback, query)


def find_best_match(candidates: Sequence[Description], query: Properties) -> int:
    """
    Find the candidate that best matches the queried properties.

    Args:
        candidates: Descriptions of every face in one family, in catalog order
        query: Desired properties

    Returns:
        Index into ``candidates`` of the chosen face

    Raises:
        EmptyCandidateSetError: If ``candidates`` is empty
    """
    matching_set = list(range(len(candidates)))
    if not matching_set:
        raise EmptyCandidateSetError()

    properties = [candidate.properties for candidate in candidates]

    stretch = _match_stretch([properties[i].stretch for i in matching_set], query.stretch)
    matching_set = [i for i in matching_set if properties[i].stretch == stretch]

    style = _match_style([properties[i].style for i in matching_set], query.style)
    matching_set = [i for i in matching_set if properties[i].style == style]

    weight = _match_weight([properties[i].weight for i in matching_set], query.weight)
    matching_set = [i for i in matching_set if properties[i].weight == weight]

    logger.debug(
        f"Matched {query} to stretch={stretch:g} style={style.value} weight={weight:g} "
        f"({len(matching_set)} of {len(candidates)} candidates)"
    )
    return matching_set[0]
