"""Command-line parsing."""

import pytest

from terminal_stopwatch import __version__
from terminal_stopwatch.__main__ import buildParser, themeFromArgs
from terminal_stopwatch.theme import NamedColor, Theme

class TestParser:
    """Flags and defaults."""

    def test_defaults(self):
        args = buildParser().parse_args([])
        assert themeFromArgs(args) == Theme()

    def test_short_flags(self):
        args = buildParser().parse_args(['-f', 'black', '-b', 'lightcyan'])
        assert themeFromArgs(args) == Theme(
            fg=NamedColor.Black, bg=NamedColor.LightCyan,
        )

    def test_long_flag_only_fg(self):
        args = buildParser().parse_args(['--fg', 'Red'])
        assert themeFromArgs(args) == Theme(fg=NamedColor.Red)

    def test_bad_color(self, capsys):
        with pytest.raises(SystemExit) as info:
            buildParser().parse_args(['--bg', 'chartreuse'])
        assert info.value.code == 2
        assert 'Unknown color' in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            buildParser().parse_args(['--version'])
        assert info.value.code == 0
        assert __version__ in capsys.readouterr().out
