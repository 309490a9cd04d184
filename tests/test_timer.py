from pomodoro.core import timer
from pomodoro.core.settings import Settings
from pomodoro.core.timer import Mode, RunState, TimerState


SETTINGS = Settings.make(25, 5)


def test_initial_state_is_stopped_work_with_full_duration() -> None:
    state = timer.initial(SETTINGS)

    assert state == TimerState(mode=Mode.WORK, run=RunState.STOPPED, remaining_seconds=1500)


def test_start_twice_reports_no_change_second_time() -> None:
    state, changed = timer.start(timer.initial(SETTINGS))
    again, changed_again = timer.start(state)

    assert changed is True
    assert changed_again is False
    assert again is state
    assert again.remaining_seconds == 1500
    assert again.mode == Mode.WORK


def test_stop_is_noop_when_already_stopped() -> None:
    state = timer.initial(SETTINGS)

    stopped, changed = timer.stop(state)
    assert changed is False
    assert stopped is state

    running, _ = timer.start(state)
    stopped, changed = timer.stop(running)
    assert changed is True
    assert stopped.run == RunState.STOPPED


def test_tick_counts_down_to_zero_then_stays() -> None:
    state = TimerState(mode=Mode.REST, run=RunState.RUNNING, remaining_seconds=3)
    for _ in range(3):
        state = timer.tick(state)

    assert state.remaining_seconds == 0
    assert state.mode == Mode.REST
    assert timer.tick(state) is state


def test_transition_flips_mode_and_stops_regardless_of_remaining() -> None:
    running = TimerState(mode=Mode.WORK, run=RunState.RUNNING, remaining_seconds=700)

    rest = timer.transition_to_next_mode(running, SETTINGS)
    work = timer.transition_to_next_mode(rest, SETTINGS)

    assert rest == TimerState(mode=Mode.REST, run=RunState.STOPPED, remaining_seconds=300)
    assert work == TimerState(mode=Mode.WORK, run=RunState.STOPPED, remaining_seconds=1500)


def test_reset_keeps_mode_and_restores_duration() -> None:
    state = TimerState(mode=Mode.REST, run=RunState.RUNNING, remaining_seconds=12)

    reset = timer.reset_to_current_mode(state, SETTINGS)

    assert reset == TimerState(mode=Mode.REST, run=RunState.STOPPED, remaining_seconds=300)


def test_total_seconds_follows_mode() -> None:
    work = timer.initial(SETTINGS)
    rest = timer.transition_to_next_mode(work, SETTINGS)

    assert timer.total_seconds(work, SETTINGS) == 1500
    assert timer.total_seconds(rest, SETTINGS) == 300


def test_format_time_pads_minutes_and_seconds() -> None:
    assert timer.format_time(1500) == "25:00"
    assert timer.format_time(65) == "01:05"
    assert timer.format_time(0) == "00:00"
    assert timer.format_time(120 * 60) == "120:00"


def test_labels() -> None:
    assert timer.mode_label(Mode.WORK) == "Work"
    assert timer.mode_label(Mode.REST) == "Rest"
    assert timer.start_stop_label(RunState.STOPPED) == "Start"
    assert timer.start_stop_label(RunState.RUNNING) == "Stop"
    assert timer.mode_icon(Mode.WORK) != timer.mode_icon(Mode.REST)
