"""Diagnostic data types: reentrancy, contexts, sessions, events, monitors and more."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_INT16_MIN = -(1 << 15)
_INT16_MAX = (1 << 15) - 1
_UINT16_MAX = (1 << 16) - 1
_UINT32_MAX = (1 << 32) - 1


def _check_range(name: str, value: int, minimum: int, maximum: int) -> None:
    if not minimum <= value <= maximum:
        raise ValueError(f"{name} {value} is out of range {minimum}..{maximum}")


class ReentrancyType(IntEnum):
    """Whether a diagnostic handler may be entered concurrently."""

    FULLY = 0x00
    NOT = 0x01


@dataclass(frozen=True)
class DataIdentifierReentrancyType:
    """Reentrancy of the read, write and read-write data identifier operations."""

    read: ReentrancyType
    write: ReentrancyType
    read_write: ReentrancyType

    def __post_init__(self) -> None:
        for name in ("read", "write", "read_write"):
            object.__setattr__(self, name, ReentrancyType(getattr(self, name)))


class Context(IntEnum):
    """Context that a diagnostic request comes from."""

    DIAGNOSTIC_COMMUNICATION = 0
    FAULT_MEMORY = 1
    DO_IP = 2


class ActivityStatusType(IntEnum):
    """Activity of a diagnostic conversation."""

    ACTIVE = 0x00
    INACTIVE = 0x01


class SessionControlType(IntEnum):
    """Diagnostic session."""

    DEFAULT_SESSION = 0x01
    PROGRAMMING_SESSION = 0x02
    EXTENDED_DIAGNOSTIC_SESSION = 0x03
    SAFETY_SYSTEM_DIAGNOSTIC_SESSION = 0x04


class SecurityLevelType(IntEnum):
    """Diagnostic security level."""

    LOCKED = 0x00


class DTCFormatType(IntEnum):
    """Format of a diagnostic trouble code number."""

    DTC_FORMAT_OBD = 0
    DTC_FORMAT_UDS = 1
    DTC_FORMAT_J1939 = 2


class DebouncingState(IntEnum):
    """Debouncing state of a diagnostic event."""

    NEUTRAL = 0x00
    TEMPORARILY_DEFECTIVE = 0x01
    FINALLY_DEFECTIVE = 0x02
    TEMPORARILY_HEALED = 0x04
    FINALLY_HEALED = 0x08


class LastResetType(IntEnum):
    """Cause of the last ECU reset."""

    REGULAR = 0
    UNEXPECTED = 1
    SOFT_RESET = 2
    HARD_RESET = 3
    KEY_OFF_ON_RESET = 4
    CUSTOM_RESET = 5


class ResetRequestType(IntEnum):
    """Kind of ECU reset requested."""

    SOFT_RESET = 1
    HARD_RESET = 2
    KEY_OFF_ON_RESET = 3
    CUSTOM_RESET = 4


@dataclass(frozen=True)
class CounterBased:
    """Counter-based debouncing parameters of a monitor."""

    failed_threshold: int
    passed_threshold: int
    failed_stepsize: int
    passed_stepsize: int
    failed_jump_value: int
    passed_jump_value: int
    use_jump_to_failed: bool
    use_jump_to_passed: bool

    def __post_init__(self) -> None:
        for name in (
            "failed_threshold",
            "passed_threshold",
            "failed_jump_value",
            "passed_jump_value",
        ):
            _check_range(name, getattr(self, name), _INT16_MIN, _INT16_MAX)
        for name in ("failed_stepsize", "passed_stepsize"):
            _check_range(name, getattr(self, name), 0, _UINT16_MAX)


@dataclass(frozen=True)
class TimeBased:
    """Time-based debouncing parameters of a monitor, in milliseconds."""

    passed_ms: int
    failed_ms: int

    def __post_init__(self) -> None:
        _check_range("passed_ms", self.passed_ms, 0, _UINT32_MAX)
        _check_range("failed_ms", self.failed_ms, 0, _UINT32_MAX)


class InitMonitorReason(IntEnum):
    """Reason a monitor is (re)initialised."""

    CLEAR = 0x00
    RESTART = 0x01
    REENABLED = 0x02


class MonitorAction(IntEnum):
    """Action reported by a monitor."""

    PASSED = 0x00
    FAILED = 0x01
    PREPASSED = 0x02
    PREFAILED = 0x03
    FDC_THRESHOLD_REACHED = 0x04
    RESET_TEST_FAILED = 0x05
    FREEZE_DEBOUNCING = 0x06
    RESET_DEBOUNCING = 0x07


class ControlDtcStatusType(IntEnum):
    """Whether DTC setting is switched on or off."""

    DTC_SETTING_ON = 0x00
    DTC_SETTING_OFF = 0x01


class IndicatorType(IntEnum):
    """State of a warning indicator."""

    OFF = 0x00
    CONTINUOUS = 0x01
    BINDING = 0x02
    BINDING_OR_CONTINUOUS = 0x03
    SLOW_FLASH = 0x04
    FAST_FLASH = 0x05
    ON_DEMAND = 0x06
    SHORT = 0x07


class ConditionType(IntEnum):
    """Value of a diagnostic enable condition."""

    CONDITION_FALSE = 0x00
    CONDITION_TRUE = 0x01


class OperationCycleType(IntEnum):
    """Start or end of an operation cycle."""

    OPERATION_CYCLE_START = 0x00
    OPERATION_CYCLE_END = 0x01


class KeyCompareResultType(IntEnum):
    """Result of comparing a security access key."""

    KEY_VALID = 0x00
    KEY_INVALID = 0x01


class ConfirmationStatusType(IntEnum):
    """Outcome of sending a diagnostic response."""

    RES_POS_OK = 0x00
    RES_POS_NOT_OK = 0x01
    RES_NEG_OK = 0x02
    RES_NEG_NOT_OK = 0x03
    RES_POS_SUPPRESSED = 0x04
    RES_NEG_SUPPRESSED = 0x05
    CANCELED = 0x06
    NO_PROCESSING_NO_RESPONSE = 0x07