import argparse
import sys
import typing as tp

from . import __version__
from .UI import StopwatchUI
from .theme import NamedColor, Theme

def parseColor(text: str) -> NamedColor:
    try:
        return NamedColor.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e

def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='terminal-stopwatch',
        description='Full-screen stopwatch. Space toggles, R resets, Escape exits.',
    )
    parser.add_argument(
        '-f', '--fg', type=parseColor, metavar='COLOR',
        help='Foreground color (default: white).',
    )
    parser.add_argument(
        '-b', '--bg', type=parseColor, metavar='COLOR',
        help='Background color (default: black).',
    )
    parser.add_argument(
        '-V', '--version', action='version',
        version=f'%(prog)s {__version__}',
    )
    return parser

def themeFromArgs(args: argparse.Namespace) -> Theme:
    default = Theme()
    return Theme(
        fg=args.fg or default.fg,
        bg=args.bg or default.bg,
    )

def main(argv: tp.Sequence[str] | None = None) -> int:
    args = buildParser().parse_args(argv)
    ui = StopwatchUI(themeFromArgs(args))
    ui.run()
    return ui.return_code or 0

if __name__ == '__main__':
    sys.exit(main())
