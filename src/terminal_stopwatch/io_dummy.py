import typing as tp
from dataclasses import dataclass
from datetime import timedelta

from .shared import KeyEvent
from .theme import Theme
from .io_interface import (
    InputInterface, DisplayInterface, InputPollError, RenderError,
)

ScriptItem = KeyEvent | BaseException | None

class ScriptedInput(InputInterface):
    def __init__(
        self, script: tp.Iterable[ScriptItem], 
        exhausted_error: bool = False, 
    ) -> None:
        '''
        One `script` item per poll: a `KeyEvent`, `None` for an idle
        frame, or an exception to raise.
        '''
        self.script = list(script)
        self.exhausted_error = exhausted_error
        self.polls: list[timedelta] = []
    
    async def pollEvent(self, budget: timedelta) -> KeyEvent | None:
        self.polls.append(budget)
        if not self.script:
            if self.exhausted_error:
                raise InputPollError('Script exhausted.')
            return None
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

@dataclass(frozen=True)
class Frame:
    elapsed: timedelta
    running: bool
    theme: Theme

class RecordingDisplay(DisplayInterface):
    def __init__(self, fail_on_frame: int | None = None) -> None:
        self.frames: list[Frame] = []
        self.fail_on_frame = fail_on_frame
    
    def renderFrame(
        self, elapsed: timedelta, running: bool, theme: Theme, 
    ) -> None:
        if len(self.frames) == self.fail_on_frame:
            raise RenderError(f'Refusing to render frame {self.fail_on_frame}.')
        self.frames.append(Frame(elapsed, running, theme))
