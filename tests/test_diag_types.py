import dataclasses

import pytest

from arakit.diag_types import (
    ConfirmationStatusType,
    Context,
    CounterBased,
    DataIdentifierReentrancyType,
    DebouncingState,
    LastResetType,
    ReentrancyType,
    ResetRequestType,
    SessionControlType,
    TimeBased,
)


def _counter_based(**overrides):
    values = dict(
        failed_threshold=100,
        passed_threshold=-100,
        failed_stepsize=10,
        passed_stepsize=10,
        failed_jump_value=0,
        passed_jump_value=0,
        use_jump_to_failed=False,
        use_jump_to_passed=True,
    )
    values.update(overrides)
    return CounterBased(**values)


def test_session_control_values_fixed_by_source():
    assert SessionControlType(0x03) is SessionControlType.EXTENDED_DIAGNOSTIC_SESSION
    assert SessionControlType.DEFAULT_SESSION == 0x01


def test_reset_types_round_trip():
    for member in ResetRequestType:
        assert ResetRequestType(int(member)) is member
    for member in LastResetType:
        assert LastResetType(int(member)) is member


def test_reset_request_excludes_regular():
    assert "REGULAR" not in ResetRequestType.__members__
    with pytest.raises(ValueError):
        ResetRequestType(0)


@pytest.mark.parametrize("value", [0x00, 0x01, 0x02, 0x04, 0x08])
def test_debouncing_states_from_source_values(value):
    member = DebouncingState(value)
    assert int(member) == value
    assert member == 0 or member & (member - 1) == 0


def test_debouncing_state_rejects_combined_bits():
    with pytest.raises(ValueError):
        DebouncingState(0x03)


def test_context_order():
    assert [Context(value) for value in range(3)] == list(Context)
    assert Context(2) is Context.DO_IP


def test_confirmation_status_is_contiguous():
    members = [ConfirmationStatusType(value) for value in range(8)]
    assert members == list(ConfirmationStatusType)
    with pytest.raises(ValueError):
        ConfirmationStatusType(8)


def test_data_identifier_reentrancy_converts_ints():
    reentrancy = DataIdentifierReentrancyType(0, 1, ReentrancyType.FULLY)
    assert reentrancy.read is ReentrancyType.FULLY
    assert reentrancy.write is ReentrancyType.NOT
    assert reentrancy.read_write is ReentrancyType.FULLY


def test_data_identifier_reentrancy_rejects_unknown():
    with pytest.raises(ValueError):
        DataIdentifierReentrancyType(0, 5, 0)


def test_counter_based_keeps_values():
    debouncing = _counter_based()
    assert debouncing.failed_threshold == 100
    assert debouncing.passed_threshold == -100
    assert debouncing.use_jump_to_passed is True


def test_counter_based_is_frozen():
    debouncing = _counter_based()
    with pytest.raises(dataclasses.FrozenInstanceError):
        debouncing.failed_threshold = 1
    assert debouncing.failed_threshold == 100


@pytest.mark.parametrize(
    "field, value",
    [
        ("failed_threshold", 1 << 15),
        ("passed_threshold", -(1 << 15) - 1),
        ("failed_stepsize", -1),
        ("passed_stepsize", 1 << 16),
    ],
)
def test_counter_based_rejects_out_of_range(field, value):
    with pytest.raises(ValueError):
        _counter_based(**{field: value})


def test_time_based_bounds():
    timing = TimeBased(passed_ms=0, failed_ms=(1 << 32) - 1)
    assert timing.failed_ms == (1 << 32) - 1
    with pytest.raises(ValueError):
        TimeBased(passed_ms=-1, failed_ms=0)
    with pytest.raises(ValueError):
        TimeBased(passed_ms=0, failed_ms=1 << 32)