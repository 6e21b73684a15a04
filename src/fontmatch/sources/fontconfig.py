"""
Fontconfig Font Source
======================

Source backed by the fontconfig command line tools (``fc-list`` and
``fc-scan``). Fontconfig's native weight, width and slant scales are
translated to CSS properties on the way out.
"""

import logging
import shutil
import subprocess

from ..core.config import SourceConfig
from ..core.exceptions import (
    BackendUnavailableError,
    FamilyNotFoundError,
    FontLoadError,
    PostScriptNameNotFoundError,
    SourceCommandError,
)
from ..core.models import Description, FamilyHandle, Handle, PathHandle, Properties, Style
from ..utils.scale import fontconfig_weight_to_css, fontconfig_width_to_css
from .base import FontSource
from .loader import describe_handle

logger = logging.getLogger(__name__)

FC_SLANT_ITALIC = 100
FC_SLANT_OBLIQUE = 110
FC_WEIGHT_REGULAR = 80
FC_WIDTH_NORMAL = 100

HANDLE_FORMAT = "%{file}\\t%{index}\\n"
DESCRIPTION_FORMAT = (
    "%{index}\\t%{family[0]}\\t%{postscriptname}\\t%{weight}\\t%{width}\\t%{slant}\\n"
)
# Characters with meaning inside a fontconfig pattern string.
PATTERN_SPECIAL_CHARS = "\\-:,="


def escape_pattern_value(value: str) -> str:
    """Escape a value for use in a fontconfig pattern."""
    return "".join(f"\\{char}" if char in PATTERN_SPECIAL_CHARS else char for char in value)


def _parse_number(field: str, default: float) -> float:
    """Parse a fontconfig numeric field; ranges like ``[40 210]`` yield their start."""
    field = field.strip().strip("[]")
    if not field:
        return default
    try:
        return float(field.split()[0])
    except ValueError:
        return default


def _slant_to_style(slant: float) -> Style:
    if slant >= FC_SLANT_OBLIQUE:
        return Style.OBLIQUE
    if slant >= FC_SLANT_ITALIC:
        return Style.ITALIC
    return Style.NORMAL


class FontconfigSource(FontSource):
    """Font source that queries fontconfig for every request."""

    def __init__(self, config: SourceConfig | None = None):
        """
        Initialize fontconfig source.

        Args:
            config: Source configuration; only ``fc_timeout`` is used

        Raises:
            BackendUnavailableError: If the fontconfig tools are not installed
        """
        self.timeout = config.fc_timeout if config else 10.0
        self.fc_list_path = shutil.which("fc-list")
        self.fc_scan_path = shutil.which("fc-scan")
        if not self.fc_list_path:
            raise BackendUnavailableError("fontconfig", "fc-list not found in PATH")

        logger.debug(f"FontconfigSource using {self.fc_list_path}")

    def _run(self, command: list[str]) -> list[str]:
        """Run a fontconfig command and return its non-empty output lines."""
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise SourceCommandError(command[0], f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise SourceCommandError(command[0], str(e)) from e

        if result.returncode != 0:
            raise SourceCommandError(command[0], result.stderr.strip() or f"exit {result.returncode}")

        return [line for line in result.stdout.splitlines() if line.strip()]

    def _list_handles(self, pattern: str) -> list[PathHandle]:
        handles = []
        for line in self._run([self.fc_list_path, "--format", HANDLE_FORMAT, pattern]):
            path, _, index = line.partition("\t")
            handles.append(PathHandle(path, int(_parse_number(index, 0))))
        return handles

    def all_families(self) -> list[str]:
        lines = self._run([self.fc_list_path, "--format", "%{family[0]}\\n"])
        return list(dict.fromkeys(line.strip() for line in lines))

    def select_family_by_name(self, family_name: str) -> FamilyHandle:
        handles = self._list_handles(f":family={escape_pattern_value(family_name)}")
        if not handles:
            raise FamilyNotFoundError(family_name)
        return FamilyHandle.from_font_handles(handles)

    def select_by_postscript_name(self, postscript_name: str) -> Handle:
        handles = self._list_handles(f":postscriptname={escape_pattern_value(postscript_name)}")
        if not handles:
            raise PostScriptNameNotFoundError(postscript_name)
        return handles[0]

    def describe(self, handle: Handle) -> Description:
        if not isinstance(handle, PathHandle) or not self.fc_scan_path:
            return describe_handle(handle)

        lines = self._run([self.fc_scan_path, "--format", DESCRIPTION_FORMAT, str(handle.path)])
        for line in lines:
            fields = line.split("\t")
            if len(fields) != 6 or int(_parse_number(fields[0], -1)) != handle.font_index:
                continue
            _, family, postscript_name, weight, width, slant = fields
            return Description(
                family_name=family,
                properties=Properties(
                    weight=fontconfig_weight_to_css(_parse_number(weight, FC_WEIGHT_REGULAR)),
                    stretch=fontconfig_width_to_css(_parse_number(width, FC_WIDTH_NORMAL)),
                    style=_slant_to_style(_parse_number(slant, 0)),
                ),
                postscript_name=postscript_name or None,
            )

        raise FontLoadError(str(handle), "face not reported by fc-scan")
