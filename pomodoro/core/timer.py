from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from pomodoro.core.settings import Settings


class Mode(str, Enum):
    WORK = "work"
    REST = "rest"


class RunState(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"


MODE_LABELS = {Mode.WORK: "Work", Mode.REST: "Rest"}
MODE_ICONS = {
    Mode.WORK: "preferences-system-time-symbolic",
    Mode.REST: "preferences-desktop-screensaver-symbolic",
}


@dataclass(frozen=True)
class TimerState:
    mode: Mode
    run: RunState
    remaining_seconds: int


# Pure transitions detached from any scheduler; TimerController owns the
# current value and performs the side effects.


def duration_seconds(mode: Mode, settings: Settings) -> int:
    minutes = settings.work_minutes if mode == Mode.WORK else settings.rest_minutes
    return minutes * 60


def total_seconds(state: TimerState, settings: Settings) -> int:
    return duration_seconds(state.mode, settings)


def next_mode(mode: Mode) -> Mode:
    return Mode.REST if mode == Mode.WORK else Mode.WORK


def initial(settings: Settings) -> TimerState:
    return TimerState(
        mode=Mode.WORK,
        run=RunState.STOPPED,
        remaining_seconds=duration_seconds(Mode.WORK, settings),
    )


def start(state: TimerState) -> tuple[TimerState, bool]:
    if state.run == RunState.RUNNING:
        return state, False
    return replace(state, run=RunState.RUNNING), True


def stop(state: TimerState) -> tuple[TimerState, bool]:
    if state.run == RunState.STOPPED:
        return state, False
    return replace(state, run=RunState.STOPPED), True


def tick(state: TimerState) -> TimerState:
    """Decrement by one second. Reaching zero does not switch modes."""
    if state.remaining_seconds == 0:
        return state
    return replace(state, remaining_seconds=state.remaining_seconds - 1)


def transition_to_next_mode(state: TimerState, settings: Settings) -> TimerState:
    mode = next_mode(state.mode)
    return TimerState(
        mode=mode,
        run=RunState.STOPPED,
        remaining_seconds=duration_seconds(mode, settings),
    )


def reset_to_current_mode(state: TimerState, settings: Settings) -> TimerState:
    return TimerState(
        mode=state.mode,
        run=RunState.STOPPED,
        remaining_seconds=duration_seconds(state.mode, settings),
    )


def format_time(seconds: int) -> str:
    seconds = max(0, seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def mode_label(mode: Mode) -> str:
    return MODE_LABELS[mode]


def mode_icon(mode: Mode) -> str:
    return MODE_ICONS[mode]


def start_stop_label(run: RunState) -> str:
    return "Start" if run == RunState.STOPPED else "Stop"
