from __future__ import annotations

import typing as tp
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

class NamedColor(Enum):
    Black = 'black'
    Red = 'red'
    Green = 'green'
    Yellow = 'yellow'
    Blue = 'blue'
    Magenta = 'magenta'
    Cyan = 'cyan'
    Gray = 'gray'
    DarkGray = 'darkgray'
    LightRed = 'lightred'
    LightGreen = 'lightgreen'
    LightYellow = 'lightyellow'
    LightBlue = 'lightblue'
    LightMagenta = 'lightmagenta'
    LightCyan = 'lightcyan'
    White = 'white'
    
    @classmethod
    def parse(cls, text: str) -> NamedColor:
        '''
        Case-insensitive. Ignores "-", "_" and spaces, so
        "Light-Red" and "light red" both give `LightRed`.
        '''
        name = text.lower()
        for c in '-_ ':
            name = name.replace(c, '')
        name = name.replace('grey', 'gray')
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f'Unknown color {text!r}. Choose from: ' +
                ', '.join(c.value for c in cls)
            ) from None
    
    @property
    def css(self) -> str:
        return _CSS_NAMES[self]

_CSS_NAMES = {
    NamedColor.Black:        'ansi_black',
    NamedColor.Red:          'ansi_red',
    NamedColor.Green:        'ansi_green',
    NamedColor.Yellow:       'ansi_yellow',
    NamedColor.Blue:         'ansi_blue',
    NamedColor.Magenta:      'ansi_magenta',
    NamedColor.Cyan:         'ansi_cyan',
    NamedColor.Gray:         'ansi_white',
    NamedColor.DarkGray:     'ansi_bright_black',
    NamedColor.LightRed:     'ansi_bright_red',
    NamedColor.LightGreen:   'ansi_bright_green',
    NamedColor.LightYellow:  'ansi_bright_yellow',
    NamedColor.LightBlue:    'ansi_bright_blue',
    NamedColor.LightMagenta: 'ansi_bright_magenta',
    NamedColor.LightCyan:    'ansi_bright_cyan',
    NamedColor.White:        'ansi_bright_white',
}

class Theme(BaseModel):
    fg: NamedColor = NamedColor.White
    bg: NamedColor = NamedColor.Black

    model_config = ConfigDict(
        frozen=True,
    )
    
    @field_validator('fg', 'bg', mode='before')
    @classmethod
    def validate_color(cls, v: tp.Any) -> NamedColor:
        if isinstance(v, NamedColor):
            return v
        return NamedColor.parse(str(v))
