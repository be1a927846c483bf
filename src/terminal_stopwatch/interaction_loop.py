from __future__ import annotations

from datetime import timedelta

from textual import log

from .shared import FRAME_BUDGET, KeyEvent, Command, commandFor
from .state import StopwatchState
from .theme import Theme
from .io_interface import (
    InputInterface, DisplayInterface, InputPollError, RenderError,
)

class InteractionLoop:
    def __init__(
        self, 
        input_: InputInterface, 
        display: DisplayInterface, 
        theme: Theme = Theme(), 
        frame_budget: timedelta = FRAME_BUDGET, 
        state: StopwatchState | None = None, 
    ) -> None:
        '''
        `frame_budget` bounds each input poll and is also what
        `advance()` adds per running frame, so elapsed time is off
        by at most one frame per poll that returns early.
        '''
        self.input = input_
        self.display = display
        self.theme = theme
        self.frame_budget = frame_budget
        self.state = StopwatchState() if state is None else state
    
    async def run(self) -> StopwatchState:
        self.render()
        while not self.state.exit_requested:
            await self.step()
        log('Stopwatch loop finished.', elapsed=self.state.elapsed)
        return self.state
    
    async def step(self) -> None:
        event = await self.poll()
        if event is not None:
            command = commandFor(event)
            if command is not None:
                self.apply(command)
        if self.state.exit_requested:
            return
        # after the transition: a frame toggled to paused does not count
        self.state.advance(self.frame_budget)
        self.render()
    
    def apply(self, command: Command) -> None:
        match command:
            case Command.Exit:
                self.state.requestExit()
            case Command.Toggle:
                self.state.toggleRunning()
            case Command.Reset:
                self.state.reset()
        log(
            f'{command.value}:',
            running=self.state.running, elapsed=self.state.elapsed,
        )
    
    async def poll(self) -> KeyEvent | None:
        try:
            return await self.input.pollEvent(self.frame_budget)
        except InputPollError:
            raise
        except Exception as e:
            raise InputPollError(f'Cannot poll input: {e}') from e
    
    def render(self) -> None:
        try:
            self.display.renderFrame(
                self.state.elapsed, self.state.running, self.theme,
            )
        except RenderError:
            raise
        except Exception as e:
            raise RenderError(f'Cannot render frame: {e}') from e
