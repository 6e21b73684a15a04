"""
Scale Conversion
================

Piecewise-linear conversion between the CSS property scales and the numeric
scales used by platform font registries.

A mapping is a strictly ascending table of breakpoints whose positions carry
meaning: ``piecewise_linear_lookup`` turns a fractional position into a value,
``piecewise_linear_find_index`` turns a value back into a fractional position.
"""

import math
from bisect import bisect_left
from collections.abc import Sequence

from ..core.exceptions import EmptyMappingError, UnsortedMappingError
from ..core.models import Stretch, Weight

# Core Text weight trait for CSS weights 100, 200, ..., 900.
FONT_WEIGHT_MAPPING: tuple[float, ...] = (-0.7, -0.5, -0.23, 0.0, 0.2, 0.3, 0.4, 0.6, 0.8)

# fontconfig FC_WEIGHT_* constants and the OpenType weights they correspond to.
FONTCONFIG_WEIGHT_MAPPING: tuple[float, ...] = (
    0.0,  # thin
    40.0,  # extralight
    50.0,  # light
    55.0,  # demilight
    75.0,  # book
    80.0,  # regular
    100.0,  # medium
    180.0,  # demibold
    200.0,  # bold
    205.0,  # extrabold
    210.0,  # black
    215.0,  # extrablack
)
CSS_WEIGHT_BREAKPOINTS: tuple[float, ...] = (
    100.0,
    200.0,
    300.0,
    350.0,
    380.0,
    400.0,
    500.0,
    600.0,
    700.0,
    800.0,
    900.0,
    1000.0,
)


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between ``a`` and ``b``."""
    return a + t * (b - a)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def check_mapping(mapping: Sequence[float]) -> None:
    """
    Verify that a mapping can be used for piecewise-linear conversion.

    Raises:
        EmptyMappingError: If the mapping has no breakpoints
        UnsortedMappingError: If the mapping is not strictly ascending
    """
    if not mapping:
        raise EmptyMappingError()
    for position in range(1, len(mapping)):
        if not mapping[position - 1] < mapping[position]:
            raise UnsortedMappingError(position)


def piecewise_linear_lookup(index: float, mapping: Sequence[float]) -> float:
    """
    Map a fractional table position to a value.

    ``index`` must lie within ``[0, len(mapping) - 1]``; callers clamp first.
    Integer positions return the breakpoint itself.
    """
    lower = math.floor(index)
    upper = math.ceil(index)
    return lerp(mapping[lower], mapping[upper], index - lower)


def piecewise_linear_find_index(query_value: float, mapping: Sequence[float]) -> float:
    """
    Map a value to a fractional table position.

    Args:
        query_value: Value on the mapping's scale
        mapping: Strictly ascending breakpoints

    Returns:
        Position of ``query_value`` in ``mapping``. Values below the first
        breakpoint collapse to 0 and values above the last to ``len - 1``.
    """
    upper_index = bisect_left(mapping, query_value)
    if upper_index < len(mapping) and mapping[upper_index] == query_value:
        return float(upper_index)
    if upper_index == 0:
        return 0.0
    if upper_index == len(mapping):
        return float(len(mapping) - 1)

    lower_index = upper_index - 1
    lower_value, upper_value = mapping[lower_index], mapping[upper_index]
    t = (query_value - lower_value) / (upper_value - lower_value)
    return lower_index + t


def css_to_core_text_font_weight(css_weight: float) -> float:
    """Convert a CSS weight to a Core Text weight trait in [-0.7, 0.8]."""
    css_weight = clamp(css_weight, Weight.THIN, Weight.BLACK)
    return piecewise_linear_lookup(css_weight / 100.0 - 1.0, FONT_WEIGHT_MAPPING)


def core_text_to_css_font_weight(core_text_weight: float) -> float:
    """Convert a Core Text weight trait to a CSS weight in [100, 900]."""
    index = piecewise_linear_find_index(core_text_weight, FONT_WEIGHT_MAPPING)
    return (index + 1.0) * 100.0


def css_stretchiness_to_core_text_width(css_stretchiness: float) -> float:
    """Convert a CSS stretch to a Core Text width trait in [-1.0, 1.0]."""
    css_stretchiness = clamp(css_stretchiness, Stretch.MIN, Stretch.MAX)
    return 0.25 * piecewise_linear_find_index(css_stretchiness, Stretch.MAPPING) - 1.0


def core_text_width_to_css_stretchiness(core_text_width: float) -> float:
    """Convert a Core Text width trait to a CSS stretch in [0.5, 2.0]."""
    core_text_width = clamp(core_text_width, -1.0, 1.0)
    return piecewise_linear_lookup((core_text_width + 1.0) * 4.0, Stretch.MAPPING)


def fontconfig_weight_to_css(fc_weight: float) -> float:
    """Convert an FC_WEIGHT value to a CSS weight in [100, 1000]."""
    index = piecewise_linear_find_index(fc_weight, FONTCONFIG_WEIGHT_MAPPING)
    return piecewise_linear_lookup(index, CSS_WEIGHT_BREAKPOINTS)


def css_weight_to_fontconfig(css_weight: float) -> float:
    """Convert a CSS weight to an FC_WEIGHT value in [0, 215]."""
    index = piecewise_linear_find_index(css_weight, CSS_WEIGHT_BREAKPOINTS)
    return piecewise_linear_lookup(index, FONTCONFIG_WEIGHT_MAPPING)


def fontconfig_width_to_css(fc_width: float) -> float:
    """Convert an FC_WIDTH percentage to a CSS stretch."""
    return clamp(fc_width / 100.0, Stretch.MIN, Stretch.MAX)


def width_class_to_css(width_class: int) -> float:
    """Convert an OS/2 usWidthClass (1-9) to a CSS stretch."""
    return Stretch.MAPPING[int(clamp(width_class, 1, 9)) - 1]
