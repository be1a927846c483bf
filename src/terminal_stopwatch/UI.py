import asyncio
from datetime import timedelta

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Digits

from .shared import FRAME_BUDGET, INSTRUCTIONS, KeyEvent, formatElapsed
from .state import StopwatchState
from .theme import Theme
from .io_interface import InputInterface, DisplayInterface
from .interaction_loop import InteractionLoop

class StopwatchFace(Container):
    def __init__(self, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.digits = Digits(formatElapsed(timedelta()), id='elapsed')
        self.applied_theme: Theme | None = None
        self.border_subtitle = INSTRUCTIONS
    
    def compose(self) -> ComposeResult:
        yield self.digits
    
    def show(self, elapsed: timedelta, running: bool, theme: Theme) -> None:
        if theme != self.applied_theme:
            self.styles.color = theme.fg.css
            self.styles.background = theme.bg.css
            self.styles.border = ('round', theme.fg.css)
            self.applied_theme = theme
        self.digits.update(formatElapsed(elapsed))
        self.set_class(not running, '-paused')

class TerminalInput(InputInterface):
    '''
    Fed by `StopwatchUI.on_key`. Hands out one event per poll.
    '''
    def __init__(self) -> None:
        self.queue: asyncio.Queue[KeyEvent] = asyncio.Queue()
    
    def push(self, event: KeyEvent) -> None:
        self.queue.put_nowait(event)
    
    async def pollEvent(self, budget: timedelta) -> KeyEvent | None:
        try:
            return await asyncio.wait_for(
                self.queue.get(), budget.total_seconds(),
            )
        except asyncio.TimeoutError:
            return None

class FaceDisplay(DisplayInterface):
    def __init__(self, app: App) -> None:
        self.app = app
    
    def renderFrame(
        self, elapsed: timedelta, running: bool, theme: Theme, 
    ) -> None:
        face = self.app.query_one('#face', StopwatchFace)
        face.show(elapsed, running, theme)

class StopwatchUI(App, inherit_bindings=False):
    CSS_PATH = "styles.tcss"
    # Escape is the only way out; every other key goes to `on_key`.
    BINDINGS = []
    ENABLE_COMMAND_PALETTE = False
    
    def __init__(
        self, 
        stopwatch_theme: Theme = Theme(), 
        frame_budget: timedelta = FRAME_BUDGET, 
    ) -> None:
        super().__init__()

        self.stopwatch_theme = stopwatch_theme
        self.terminal_input = TerminalInput()
        self.interaction_loop = InteractionLoop(
            self.terminal_input, FaceDisplay(self),
            theme=stopwatch_theme, frame_budget=frame_budget,
        )

        self.title = "Stopwatch"
    
    @property
    def state(self) -> StopwatchState:
        return self.interaction_loop.state
    
    def compose(self) -> ComposeResult:
        yield StopwatchFace(id='face')
    
    def on_mount(self) -> None:
        self.log(
            'Stopwatch session started.',
            fg=self.stopwatch_theme.fg, bg=self.stopwatch_theme.bg,
        )
        self.run_worker(
            self.runLoop(), name='interaction-loop', exit_on_error=True,
        )
    
    async def runLoop(self) -> None:
        await self.interaction_loop.run()
        self.exit()
    
    def on_key(self, event: events.Key) -> None:
        self.terminal_input.push(KeyEvent.fromTextualKey(event.key))
