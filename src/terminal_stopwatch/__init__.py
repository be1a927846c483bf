from .UI import StopwatchUI
from .interaction_loop import InteractionLoop
from .state import StopwatchState
from .theme import NamedColor, Theme

__version__ = "0.1.0"

__all__ = ["StopwatchUI", "InteractionLoop", "StopwatchState", "NamedColor", "Theme"]
