from abc import ABC, abstractmethod
from datetime import timedelta

from .shared import KeyEvent
from .theme import Theme

class StopwatchIOError(Exception):
    '''
    The terminal session is unusable. Never retried.
    '''

class InputPollError(StopwatchIOError):
    pass

class RenderError(StopwatchIOError):
    pass

class InputInterface(ABC):
    @abstractmethod
    async def pollEvent(self, budget: timedelta) -> KeyEvent | None:
        '''
        Returns within `budget`.
        `None` means no input this frame.
        '''
        raise NotImplementedError

class DisplayInterface(ABC):
    @abstractmethod
    def renderFrame(
        self, elapsed: timedelta, running: bool, theme: Theme, 
    ) -> None:
        raise NotImplementedError
