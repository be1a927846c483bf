from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

@dataclass
class StopwatchState:
    '''
    `elapsed` only grows while `running`.
    `exit_requested` is absorbing: once set, nothing else changes.
    '''
    elapsed: timedelta = field(default_factory=timedelta)
    running: bool = False
    exit_requested: bool = False
    
    def toggleRunning(self) -> None:
        if self.exit_requested:
            return
        self.running = not self.running
    
    def reset(self) -> None:
        if self.exit_requested:
            return
        self.elapsed = timedelta()
    
    def requestExit(self) -> None:
        self.exit_requested = True
    
    def advance(self, delta: timedelta) -> None:
        assert delta >= timedelta(), delta
        if self.exit_requested or not self.running:
            return
        self.elapsed += delta
