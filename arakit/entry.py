"""Service discovery message entries and the options they may carry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Protocol

from arakit.payload import inject_int, inject_short

ANY_INSTANCE_ID = 0xFFFF
ANY_MAJOR_VERSION = 0xFF
OPTION_SIZE_BIT_LENGTH = 4

_TTL_BIT_LENGTH = 24
_MAX_TTL = (1 << _TTL_BIT_LENGTH) - 1


class EntryType(IntEnum):
    """Type of a service discovery entry."""

    FINDING = 0x00
    OFFERING = 0x01
    SUBSCRIBING = 0x06
    ACKNOWLEDGING = 0x07


class OptionType(IntEnum):
    """Type of a service discovery option."""

    CONFIGURATION = 0x01
    LOAD_BALANCING = 0x02
    IPV4_ENDPOINT = 0x04
    IPV6_ENDPOINT = 0x06
    IPV4_MULTICAST = 0x14
    IPV6_MULTICAST = 0x16
    IPV4_SD_ENDPOINT = 0x24
    IPV6_SD_ENDPOINT = 0x26


class _OptionLike(Protocol):
    @property
    def type(self) -> OptionType: ...


def _check_range(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} {value} is out of range 0..{maximum}")


class Entry(ABC):
    """A service discovery entry with its first and second options."""

    ANY_INSTANCE_ID = ANY_INSTANCE_ID
    ANY_MAJOR_VERSION = ANY_MAJOR_VERSION
    OPTION_SIZE_BIT_LENGTH = OPTION_SIZE_BIT_LENGTH

    def __init__(
        self,
        entry_type: EntryType,
        service_id: int,
        instance_id: int,
        ttl: int,
        major_version: int = ANY_MAJOR_VERSION,
    ) -> None:
        _check_range("service ID", service_id, 0xFFFF)
        _check_range("instance ID", instance_id, 0xFFFF)
        _check_range("TTL", ttl, _MAX_TTL)
        _check_range("major version", major_version, 0xFF)
        self._type = EntryType(entry_type)
        self._service_id = service_id
        self._instance_id = instance_id
        self._ttl = ttl
        self._major_version = major_version
        self._first_options: list[_OptionLike] = []
        self._second_options: list[_OptionLike] = []

    @property
    def type(self) -> EntryType:
        return self._type

    @property
    def service_id(self) -> int:
        return self._service_id

    @property
    def instance_id(self) -> int:
        return self._instance_id

    @property
    def major_version(self) -> int:
        return self._major_version

    @property
    def ttl(self) -> int:
        """Time to live in seconds."""
        return self._ttl

    @property
    def first_options(self) -> tuple[_OptionLike, ...]:
        return tuple(self._first_options)

    @property
    def second_options(self) -> tuple[_OptionLike, ...]:
        return tuple(self._second_options)

    def validate_option(self, option: _OptionLike) -> bool:
        """Return True if ``option`` may be added to this entry."""
        option_type = option.type
        if option_type in (OptionType.CONFIGURATION, OptionType.LOAD_BALANCING):
            # At most one configuration and one load balancing option per entry.
            return not self.contains_option(option_type)
        if option_type in (OptionType.IPV4_SD_ENDPOINT, OptionType.IPV6_SD_ENDPOINT):
            # Service discovery endpoints are not allowed in entries.
            return False
        return True

    def contains_option(self, option_type: OptionType) -> bool:
        """Return True if any first or second option has ``option_type``."""
        return any(
            option.type == option_type
            for option in (*self._first_options, *self._second_options)
        )

    def add_first_option(self, option: _OptionLike) -> None:
        """Add a general option; raise ValueError if it is not allowed."""
        if not self.validate_option(option):
            raise ValueError("The option cannot be added.")
        self._first_options.append(option)

    def add_second_option(self, option: _OptionLike) -> None:
        """Add a specific option; raise ValueError if it is not allowed."""
        if not self.validate_option(option):
            raise ValueError("The option cannot be added.")
        self._second_options.append(option)

    def base_payload(self, option_index: int) -> tuple[list[int], int]:
        """Serialize the common entry header.

        Return the bytes and the option index advanced past this entry's options.
        """
        result = [int(self._type), option_index & 0xFF]
        first_count = len(self._first_options) & 0xFF
        option_index = (option_index + first_count) & 0xFF
        result.append(option_index)
        second_count = len(self._second_options) & 0xFF
        option_index = (option_index + second_count) & 0xFF
        result.append(((first_count << OPTION_SIZE_BIT_LENGTH) & 0xFF) | second_count)
        inject_short(result, self._service_id)
        inject_short(result, self._instance_id)
        inject_int(result, (self._major_version << _TTL_BIT_LENGTH) | self._ttl)
        return result, option_index

    @abstractmethod
    def payload(self, option_index: int) -> tuple[list[int], int]:
        """Serialize the whole entry; return the bytes and the advanced option index."""