"""Utility functions for font matching."""

from .scale import (
    FONT_WEIGHT_MAPPING,
    check_mapping,
    clamp,
    core_text_to_css_font_weight,
    core_text_width_to_css_stretchiness,
    css_stretchiness_to_core_text_width,
    css_to_core_text_font_weight,
    css_weight_to_fontconfig,
    fontconfig_weight_to_css,
    fontconfig_width_to_css,
    lerp,
    piecewise_linear_find_index,
    piecewise_linear_lookup,
    width_class_to_css,
)

__all__ = [
    "FONT_WEIGHT_MAPPING",
    "check_mapping",
    "clamp",
    "core_text_to_css_font_weight",
    "core_text_width_to_css_stretchiness",
    "css_stretchiness_to_core_text_width",
    "css_to_core_text_font_weight",
    "css_weight_to_fontconfig",
    "fontconfig_weight_to_css",
    "fontconfig_width_to_css",
    "lerp",
    "piecewise_linear_find_index",
    "piecewise_linear_lookup",
    "width_class_to_css",
]
