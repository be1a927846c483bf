from __future__ import annotations

from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict

# nearest microsecond to 1/60 s, 20 ppm long
FRAME_BUDGET = timedelta(microseconds=16_667)

INSTRUCTIONS = (
    'Toggle [b]<Space>[/b] Reset [b]<R>[/b] Exit [b]<Escape>[/b]'
)

class KeyEventKind(Enum):
    Press = 'press'
    Repeat = 'repeat'
    Release = 'release'

class KeyEvent(BaseModel):
    code: str
    modifiers: frozenset[str] = frozenset()
    kind: KeyEventKind = KeyEventKind.Press

    model_config = ConfigDict(
        frozen=True,
    )
    
    @classmethod
    def fromTextualKey(cls, key: str) -> KeyEvent:
        '''
        `key` is a textual key string, e.g. "ctrl+r", "space", "R".
        Textual only reports presses.
        '''
        *prefixes, code = key.split('+')
        modifiers = set(prefixes)
        if len(code) == 1 and code.isupper():
            modifiers.add('shift')
            code = code.lower()
        return cls(code=code, modifiers=frozenset(modifiers))

class Command(Enum):
    Toggle = 'toggle'
    Reset = 'reset'
    Exit = 'exit'

def commandFor(event: KeyEvent) -> Command | None:
    if event.kind != KeyEventKind.Press:
        return None
    if event.modifiers:
        return None
    match event.code:
        case 'escape':
            return Command.Exit
        case 'space':
            return Command.Toggle
        case 'r':
            return Command.Reset
        case _:
            return None

def formatElapsed(elapsed: timedelta) -> str:
    ms = elapsed // timedelta(milliseconds=1)
    seconds, milliseconds = divmod(ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f'{hours:02}:{minutes:02}:{seconds:02}.{milliseconds:03}'
