import pytest

from arakit.sm import (
    FunctionGroupStates,
    Notifier,
    PowerModeMsg,
    PowerModeRespMsg,
    StateCell,
    Trigger,
    TriggerIn,
    TriggerInOut,
    TriggerOut,
)


class _Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_function_group_state_values_are_fixed():
    assert [s.value for s in FunctionGroupStates] == [0, 1, 2, 3]
    assert FunctionGroupStates(1) is FunctionGroupStates.RUNNING


def test_power_mode_members():
    assert [m.name for m in PowerModeMsg] == ["ON", "OFF", "SUSPEND"]
    assert [m.name for m in PowerModeRespMsg] == [
        "DONE",
        "FAILED",
        "BUSY",
        "NOT_SUPPORTED",
    ]
    assert PowerModeMsg(PowerModeMsg.OFF.value) is PowerModeMsg.OFF
    assert PowerModeRespMsg(PowerModeRespMsg.BUSY.value) is PowerModeRespMsg.BUSY


def test_notifier_reads_current_cell_value():
    cell = StateCell(FunctionGroupStates.OFF)
    notifier = Notifier(cell)
    assert notifier.read() is FunctionGroupStates.OFF
    cell.value = FunctionGroupStates.UPDATE
    assert notifier.read() is FunctionGroupStates.UPDATE


def test_notifier_calls_subscribers_in_order():
    cell = StateCell(FunctionGroupStates.RUNNING)
    notifier = Notifier(cell)
    received = []
    notifier.subscribe(lambda s: received.append(("first", s)))
    notifier.subscribe(lambda s: received.append(("second", s)))
    notifier.notify()
    assert received == [
        ("first", FunctionGroupStates.RUNNING),
        ("second", FunctionGroupStates.RUNNING),
    ]


def test_notifier_without_subscribers_leaves_state():
    cell = StateCell(FunctionGroupStates.VERIFY)
    notifier = Notifier(cell)
    notifier.notify()
    assert notifier.read() is FunctionGroupStates.VERIFY


def test_trigger_write_changes_state_and_calls_handler():
    cell = StateCell(FunctionGroupStates.OFF)
    counter = _Counter()
    trigger = Trigger(cell, counter)
    trigger.write(FunctionGroupStates.RUNNING)
    assert cell.value is FunctionGroupStates.RUNNING
    assert counter.calls == 1


def test_trigger_write_same_state_does_not_call_handler():
    cell = StateCell(FunctionGroupStates.OFF)
    counter = _Counter()
    trigger = Trigger(cell, counter)
    trigger.write(FunctionGroupStates.OFF)
    assert counter.calls == 0
    assert cell.value is FunctionGroupStates.OFF


@pytest.mark.parametrize(
    "sequence, expected_calls",
    [
        ([FunctionGroupStates.RUNNING, FunctionGroupStates.RUNNING], 1),
        ([FunctionGroupStates.UPDATE, FunctionGroupStates.VERIFY], 2),
        (
            [
                FunctionGroupStates.OFF,
                FunctionGroupStates.RUNNING,
                FunctionGroupStates.OFF,
            ],
            2,
        ),
    ],
)
def test_trigger_handler_counts_only_changes(sequence, expected_calls):
    cell = StateCell(FunctionGroupStates.OFF)
    counter = _Counter()
    trigger = Trigger(cell, counter)
    for state in sequence:
        trigger.write(state)
    assert counter.calls == expected_calls
    assert cell.value is sequence[-1]


def test_trigger_in_exposes_working_trigger():
    cell = StateCell(PowerModeMsg.ON)
    counter = _Counter()
    trigger_in = TriggerIn(cell, counter)
    trigger_in.trigger.write(PowerModeMsg.SUSPEND)
    assert cell.value is PowerModeMsg.SUSPEND
    assert counter.calls == 1


def test_trigger_out_notifier_sees_shared_state():
    cell = StateCell(PowerModeRespMsg.BUSY)
    trigger_out = TriggerOut(cell)
    received = []
    trigger_out.notifier.subscribe(received.append)
    cell.value = PowerModeRespMsg.DONE
    trigger_out.notifier.notify()
    assert received == [PowerModeRespMsg.DONE]


def test_trigger_inout_shares_state_between_trigger_and_notifier():
    cell = StateCell(FunctionGroupStates.OFF)
    received = []
    holder = {}

    def on_change():
        holder["inout"].notifier.notify()

    inout = TriggerInOut(cell, on_change)
    holder["inout"] = inout
    inout.notifier.subscribe(received.append)
    inout.trigger.write(FunctionGroupStates.UPDATE)
    assert inout.notifier.read() is FunctionGroupStates.UPDATE
    assert received == [FunctionGroupStates.UPDATE]
    inout.trigger.write(FunctionGroupStates.UPDATE)
    assert received == [FunctionGroupStates.UPDATE]