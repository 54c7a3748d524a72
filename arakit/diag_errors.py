"""Diagnostic error codes and the exceptions that carry them."""

from __future__ import annotations

from enum import IntEnum


def _describe(code: IntEnum) -> str:
    return code.name.replace("_", " ").lower()


class DiagErrc(IntEnum):
    """General diagnostic error codes."""

    ALREADY_OFFERED = 101
    CONFIGURATION_MISMATCH = 102
    DEBOUNCING_CONFIGURATION_INCONSISTENT = 103
    REPORT_IGNORED = 104
    INVALID_ARGUMENT = 105
    NOT_OFFERED = 106
    GENERIC_ERROR = 107
    NO_SUCH_DTC = 108
    BUSY = 109
    FAILED = 110
    MEMORY_ERROR = 111
    WRONG_DTC = 112
    REJECTED = 113
    RESET_TYPE_NOT_SUPPORTED = 114
    REQUEST_FAILED = 115


class DiagOfferErrc(IntEnum):
    """Error codes of offering a diagnostic service."""

    ALREADY_OFFERED = 101
    CONFIGURATION_MISMATCH = 102
    DEBOUNCING_CONFIGURATION_INCONSISTENT = 103


class DiagReportingErrc(IntEnum):
    """Error codes of reporting to the diagnostic manager."""

    ALREADY_OFFERED = 101
    CONFIGURATION_MISMATCH = 102
    DEBOUNCING_CONFIGURATION_INCONSISTENT = 103
    REPORT_IGNORED = 104
    INVALID_ARGUMENT = 105
    NOT_OFFERED = 106
    GENERIC_ERROR = 107


class DiagUdsNrcErrc(IntEnum):
    """UDS negative response codes."""

    GENERAL_REJECT = 0x10
    SERVICE_NOT_SUPPORTED = 0x11
    SUBFUNCTION_NOT_SUPPORTED = 0x12
    INCORRECT_MESSAGE_LENGTH_OR_INVALID_FORMAT = 0x13
    RESPONSE_TOO_LONG = 0x14
    BUSY_REPEAT_REQUEST = 0x21
    CONDITIONS_NOT_CORRECT = 0x22
    REQUEST_SEQUENCE_ERROR = 0x24
    NO_RESPONSE_FROM_SUBNET_COMPONENT = 0x25
    FAILURE_PREVENTS_EXECUTION_OF_REQUESTED_ACTION = 0x26
    REQUEST_OUT_OF_RANGE = 0x31
    SECURITY_ACCESS_DENIED = 0x33
    INVALID_KEY = 0x35
    EXCEED_NUMBER_OF_ATTEMPTS = 0x36
    REQUIRED_TIME_DELAY_NOT_EXPIRED = 0x37
    UPLOAD_DOWNLOAD_NOT_ACCEPTED = 0x70
    TRANSFER_DATA_SUSPENDED = 0x71
    GENERAL_PROGRAMMING_FAILURE = 0x72
    WRONG_BLOCK_SEQUENCE_COUNTER = 0x73
    SUB_FUNCTION_NOT_SUPPORTED_IN_ACTIVE_SESSION = 0x7E
    SERVICE_NOT_SUPPORTED_IN_ACTIVE_SESSION = 0x7F
    RPM_TOO_HIGH = 0x81
    RPM_TOO_LOW = 0x82
    ENGINE_IS_RUNNING = 0x83
    ENGINE_IS_NOT_RUNNING = 0x84
    ENGINE_RUN_TIME_TOO_LOW = 0x85
    TEMPERATURE_TOO_HIGH = 0x86
    TEMPERATURE_TOO_LOW = 0x87
    VEHICLE_SPEED_TOO_HIGH = 0x88
    VEHICLE_SPEED_TOO_LOW = 0x89
    THROTTLE_PEDAL_TOO_HIGH = 0x8A
    THROTTLE_PEDAL_TOO_LOW = 0x8B
    TRANSMISSION_RANGE_NOT_IN_NEUTRAL = 0x8C
    TRANSMISSION_RANGE_NOT_IN_GEAR = 0x8D
    BRAKE_SWITCH_NOT_CLOSED = 0x8F
    SHIFTER_LEVER_NOT_IN_PARK = 0x90
    TORQUE_CONVERTER_CLUTCH_LOCKED = 0x91
    VOLTAGE_TOO_HIGH = 0x92
    VOLTAGE_TOO_LOW = 0x93
    RESOURCE_TEMPORARILY_NOT_AVAILABLE = 0x94
    NO_PROCESSING_NO_RESPONSE = 0xFF


class DiagException(Exception):
    """Raised for a diagnostic error; a plain integer is read as a DiagErrc."""

    def __init__(self, code: DiagErrc | DiagOfferErrc | DiagReportingErrc | int) -> None:
        if not isinstance(code, (DiagErrc, DiagOfferErrc, DiagReportingErrc)):
            code = DiagErrc(code)
        self.code = code
        super().__init__(_describe(code))


class DiagUdsNrcException(Exception):
    """Raised for a UDS negative response code."""

    def __init__(self, code: DiagUdsNrcErrc | int) -> None:
        self.code = DiagUdsNrcErrc(code)
        super().__init__(_describe(self.code))