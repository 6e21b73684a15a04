"""Font matching: in-family policy and cross-family selection."""

from .engine import FontSelector
from .policy import MatchingPolicy, find_best_match
from .selector import (
    DEFAULT_GENERIC_FAMILIES,
    select_best_match,
    select_by_postscript_name,
    select_descriptions_in_family,
    select_family_by_generic_name,
)

__all__ = [
    "DEFAULT_GENERIC_FAMILIES",
    "FontSelector",
    "MatchingPolicy",
    "find_best_match",
    "select_best_match",
    "select_by_postscript_name",
    "select_descriptions_in_family",
    "select_family_by_generic_name",
]
