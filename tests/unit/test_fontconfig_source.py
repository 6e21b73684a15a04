"""Tests for the fontconfig font source with the command line tools mocked."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from fontmatch.core.config import SourceConfig
from fontmatch.core.exceptions import (
    BackendUnavailableError,
    FamilyNotFoundError,
    FontLoadError,
    PostScriptNameNotFoundError,
    SourceCommandError,
)
from fontmatch.core.models import FamilyName, MemoryHandle, PathHandle, Properties, Style
from fontmatch.sources.fontconfig import FontconfigSource, escape_pattern_value


def completed(stdout="", returncode=0, stderr=""):
    return Mock(stdout=stdout, returncode=returncode, stderr=stderr)


@pytest.fixture
def mock_which():
    with patch("fontmatch.sources.fontconfig.shutil.which") as which:
        which.side_effect = lambda name: f"/usr/bin/{name}"
        yield which


@pytest.fixture
def mock_run(mock_which):
    with patch("fontmatch.sources.fontconfig.subprocess.run") as run:
        yield run


@pytest.fixture
def source(mock_run):
    return FontconfigSource(SourceConfig(_env_file=None, backend="fontconfig", fc_timeout=2.0))


class TestEscaping:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("DejaVu Sans", "DejaVu Sans"),
            ("Foo-Bar", "Foo\\-Bar"),
            ("a:b,c=d", "a\\:b\\,c\\=d"),
            ("back\\slash", "back\\\\slash"),
        ],
    )
    def test_escape_pattern_value(self, value, expected):
        assert escape_pattern_value(value) == expected


class TestFontconfigSource:
    """Test FontconfigSource command handling and parsing."""

    def test_missing_fc_list(self):
        with patch("fontmatch.sources.fontconfig.shutil.which", return_value=None):
            with pytest.raises(BackendUnavailableError):
                FontconfigSource()

    def test_all_families_deduplicated(self, source, mock_run):
        mock_run.return_value = completed("DejaVu Sans\nDejaVu Serif\nDejaVu Sans\n\n")

        assert source.all_families() == ["DejaVu Sans", "DejaVu Serif"]
        command = mock_run.call_args[0][0]
        assert command[0] == "/usr/bin/fc-list"
        assert mock_run.call_args[1]["timeout"] == 2.0

    def test_select_family_by_name(self, source, mock_run):
        mock_run.return_value = completed(
            "/usr/share/fonts/DejaVuSans.ttf\t0\n/usr/share/fonts/DejaVuSans-Bold.ttf\t0\n"
        )

        family = source.select_family_by_name("DejaVu Sans")

        assert list(family) == [
            PathHandle("/usr/share/fonts/DejaVuSans.ttf", 0),
            PathHandle("/usr/share/fonts/DejaVuSans-Bold.ttf", 0),
        ]
        assert mock_run.call_args[0][0][-1] == ":family=DejaVu Sans"

    def test_family_pattern_is_escaped(self, source, mock_run):
        mock_run.return_value = completed("/fonts/a.ttf\t0\n")

        source.select_family_by_name("Odd:Name")

        assert mock_run.call_args[0][0][-1] == ":family=Odd\\:Name"

    def test_family_not_found(self, source, mock_run):
        mock_run.return_value = completed("")

        with pytest.raises(FamilyNotFoundError):
            source.select_family_by_name("Missing")

    def test_collection_index(self, source, mock_run):
        mock_run.return_value = completed("/fonts/Noto.ttc\t3\n")

        assert source.select_family_by_name("Noto")[0] == PathHandle("/fonts/Noto.ttc", 3)

    def test_select_by_postscript_name(self, source, mock_run):
        mock_run.return_value = completed("/fonts/Bold.ttf\t0\n/fonts/Bold-Copy.ttf\t0\n")

        handle = source.select_by_postscript_name("DejaVuSans-Bold")

        assert handle == PathHandle("/fonts/Bold.ttf", 0)
        assert mock_run.call_args[0][0][-1] == ":postscriptname=DejaVuSans\\-Bold"

    def test_postscript_name_not_found(self, source, mock_run):
        mock_run.return_value = completed("")

        with pytest.raises(PostScriptNameNotFoundError):
            source.select_by_postscript_name("Nope")

    def test_command_failure(self, source, mock_run):
        mock_run.return_value = completed(returncode=1, stderr="Fontconfig error")

        with pytest.raises(SourceCommandError) as exc_info:
            source.all_families()

        assert "Fontconfig error" in str(exc_info.value)

    def test_command_timeout(self, source, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="fc-list", timeout=2.0)

        with pytest.raises(SourceCommandError) as exc_info:
            source.all_families()

        assert "timed out" in str(exc_info.value)

    def test_command_os_error(self, source, mock_run):
        mock_run.side_effect = OSError("exec format error")

        with pytest.raises(SourceCommandError):
            source.select_family_by_name("DejaVu Sans")


class TestFontconfigDescribe:
    """Test translation of fc-scan output to descriptions."""

    def test_describe_regular(self, source, mock_run):
        mock_run.return_value = completed("0\tDejaVu Sans\tDejaVuSans\t80\t100\t0\n")

        description = source.describe(PathHandle("/fonts/DejaVuSans.ttf"))

        assert description.family_name == "DejaVu Sans"
        assert description.postscript_name == "DejaVuSans"
        assert description.properties == Properties()
        assert mock_run.call_args[0][0][0] == "/usr/bin/fc-scan"

    def test_describe_bold_condensed_oblique(self, source, mock_run):
        mock_run.return_value = completed(
            "0\tDejaVu Sans\tDejaVuSansCondensed-BoldOblique\t200\t75\t110\n"
        )

        handle = PathHandle("/fonts/DejaVuSansCondensed-BoldOblique.ttf")
        properties = source.describe(handle).properties

        assert properties.weight == 700.0
        assert properties.stretch == 0.75
        assert properties.style is Style.OBLIQUE

    def test_describe_picks_face_index(self, source, mock_run):
        mock_run.return_value = completed(
            "0\tNoto Serif\tNotoSerif-Regular\t80\t100\t0\n"
            "1\tNoto Serif\tNotoSerif-Italic\t80\t100\t100\n"
        )

        description = source.describe(PathHandle("/fonts/NotoSerif.ttc", 1))

        assert description.postscript_name == "NotoSerif-Italic"
        assert description.properties.style is Style.ITALIC

    def test_describe_variable_font_range(self, source, mock_run):
        mock_run.return_value = completed("0\tInter\t\t[40 210]\t100\t0\n")

        description = source.describe(PathHandle("/fonts/Inter.ttf"))

        assert description.properties.weight == 200.0
        assert description.postscript_name is None

    def test_describe_missing_face(self, source, mock_run):
        mock_run.return_value = completed("0\tNoto Serif\tNotoSerif-Regular\t80\t100\t0\n")

        with pytest.raises(FontLoadError):
            source.describe(PathHandle("/fonts/NotoSerif.ttc", 4))

    def test_describe_memory_handle_uses_loader(self, source, mock_run, make_font_bytes):
        handle = MemoryHandle(make_font_bytes("Memory Sans", weight=700))

        description = source.describe(handle)

        assert description.family_name == "Memory Sans"
        assert description.properties.weight == 700.0
        mock_run.assert_not_called()

    def test_best_match(self, source, mock_run):
        mock_run.side_effect = [
            completed("/fonts/Regular.ttf\t0\n/fonts/Bold.ttf\t0\n"),
            completed("0\tDejaVu Sans\tDejaVuSans\t80\t100\t0\n"),
            completed("0\tDejaVu Sans\tDejaVuSans-Bold\t200\t100\t0\n"),
        ]

        handle = source.select_best_match([FamilyName.title("DejaVu Sans")], Properties(weight=700))

        assert handle == PathHandle("/fonts/Bold.ttf", 0)
