"""Transition properties of StopwatchState."""

from datetime import timedelta

import pytest

from terminal_stopwatch.state import StopwatchState

ms = lambda n: timedelta(milliseconds=n)

class TestTransitions:
    """Single transitions from known states."""

    def test_defaults(self):
        state = StopwatchState()
        assert state.elapsed == timedelta()
        assert not state.running
        assert not state.exit_requested

    @pytest.mark.parametrize('n', [0, 1, 2, 3, 8, 13])
    def test_toggle_parity(self, n):
        state = StopwatchState()
        for _ in range(n):
            state.toggleRunning()
        assert state.running == (n % 2 == 1)
        assert state.elapsed == timedelta()

    @pytest.mark.parametrize('running', [False, True])
    def test_reset_zeroes_regardless_of_running(self, running):
        state = StopwatchState(elapsed=ms(45000), running=running)
        state.reset()
        assert state.elapsed == timedelta()
        assert state.running == running
        assert not state.exit_requested

    def test_advance_while_paused_is_noop(self):
        state = StopwatchState(elapsed=ms(1234))
        state.advance(ms(5000))
        assert state == StopwatchState(elapsed=ms(1234))

    def test_advance_rejects_negative(self):
        state = StopwatchState(running=True)
        with pytest.raises(AssertionError):
            state.advance(ms(-1))

class TestAccumulation:
    """Time only accumulates while running."""

    def test_three_seconds(self):
        state = StopwatchState()
        state.toggleRunning()
        for _ in range(3):
            state.advance(ms(1000))
        assert state.elapsed == ms(3000)
        assert state.running

    def test_fresh_state_ignores_advance(self):
        state = StopwatchState()
        state.advance(ms(5000))
        assert state.elapsed == timedelta()

    @pytest.mark.parametrize('d1, d2', [
        (timedelta(), timedelta()),
        (ms(1), ms(999)),
        (timedelta(seconds=1 / 60), timedelta(seconds=1 / 60)),
        (timedelta(hours=5), timedelta(microseconds=7)),
    ])
    def test_additive(self, d1, d2):
        split = StopwatchState(running=True)
        split.advance(d1)
        split.advance(d2)
        whole = StopwatchState(running=True)
        whole.advance(d1 + d2)
        assert split.elapsed == whole.elapsed

    def test_pause_freezes(self):
        state = StopwatchState(running=True)
        state.advance(ms(700))
        state.toggleRunning()
        state.advance(ms(300))
        state.toggleRunning()
        state.advance(ms(300))
        assert state.elapsed == ms(1000)

class TestExit:
    """Exit is absorbing."""

    def test_nothing_changes_after_exit(self):
        state = StopwatchState(elapsed=ms(500), running=True)
        state.requestExit()
        state.toggleRunning()
        state.reset()
        state.advance(ms(1000))
        state.requestExit()
        assert state == StopwatchState(
            elapsed=ms(500), running=True, exit_requested=True,
        )
