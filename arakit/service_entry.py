"""Entries to find, offer and stop offering a service."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from arakit.entry import ANY_INSTANCE_ID, ANY_MAJOR_VERSION, Entry, EntryType, OptionType
from arakit.payload import extract_int, inject_int

INFINITE_TTL = 0xFFFFFF
ANY_MINOR_VERSION = 0xFFFFFFFF
_STOP_OFFER_TTL = 0x000000


class ServiceEntry(Entry):
    """Entry to find or offer a service."""

    INFINITE_TTL = INFINITE_TTL
    ANY_MINOR_VERSION = ANY_MINOR_VERSION

    def __init__(
        self,
        entry_type: EntryType,
        service_id: int,
        instance_id: int,
        ttl: int,
        major_version: int,
        minor_version: int,
    ) -> None:
        super().__init__(entry_type, service_id, instance_id, ttl, major_version)
        if not 0 <= minor_version <= 0xFFFFFFFF:
            raise ValueError(f"minor version {minor_version} is out of range")
        self._minor_version = minor_version

    @property
    def minor_version(self) -> int:
        return self._minor_version

    def validate_option(self, option: Any) -> bool:
        # Multicast options are not allowed in service entries.
        return super().validate_option(option) and option.type not in (
            OptionType.IPV4_MULTICAST,
            OptionType.IPV6_MULTICAST,
        )

    def payload(self, option_index: int) -> tuple[list[int], int]:
        result, option_index = self.base_payload(option_index)
        inject_int(result, self._minor_version)
        return result, option_index

    @classmethod
    def create_find_service_entry(
        cls,
        service_id: int,
        ttl: int = INFINITE_TTL,
        instance_id: int = ANY_INSTANCE_ID,
        major_version: int = ANY_MAJOR_VERSION,
        minor_version: int = ANY_MINOR_VERSION,
    ) -> ServiceEntry:
        """Create a find-service entry; the TTL must not be zero."""
        if ttl == 0:
            raise ValueError("TTL cannot be zero.")
        return cls(
            EntryType.FINDING, service_id, instance_id, ttl, major_version, minor_version
        )

    @classmethod
    def create_offer_service_entry(
        cls,
        service_id: int,
        instance_id: int,
        major_version: int,
        minor_version: int,
        ttl: int = INFINITE_TTL,
    ) -> ServiceEntry:
        """Create an offer-service entry; the TTL must not be zero."""
        if ttl == 0:
            raise ValueError("TTL cannot be zero.")
        return cls(
            EntryType.OFFERING, service_id, instance_id, ttl, major_version, minor_version
        )

    @classmethod
    def create_stop_offer_entry(
        cls,
        service_id: int,
        instance_id: int,
        major_version: int,
        minor_version: int,
    ) -> ServiceEntry:
        """Create an entry that stops offering a service."""
        return cls(
            EntryType.OFFERING,
            service_id,
            instance_id,
            _STOP_OFFER_TTL,
            major_version,
            minor_version,
        )

    @classmethod
    def deserialize(
        cls,
        payload: Sequence[int],
        offset: int,
        entry_type: EntryType,
        service_id: int,
        instance_id: int,
        ttl: int,
        major_version: int,
    ) -> tuple[ServiceEntry, int]:
        """Read the service-specific part at ``offset``.

        Return the entry with the advanced offset.
        """
        minor_version, offset = extract_int(payload, offset)
        if entry_type == EntryType.FINDING:
            entry = cls.create_find_service_entry(
                service_id, ttl, instance_id, major_version, minor_version
            )
        elif entry_type == EntryType.OFFERING:
            if ttl > 0:
                entry = cls.create_offer_service_entry(
                    service_id, instance_id, major_version, minor_version, ttl
                )
            else:
                entry = cls.create_stop_offer_entry(
                    service_id, instance_id, major_version, minor_version
                )
        else:
            raise ValueError("The entry type does not belong to service entry series.")
        return entry, offset