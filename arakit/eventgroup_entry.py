"""Entries to subscribe to, unsubscribe from and acknowledge event-groups."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from arakit.entry import Entry, EntryType, OptionType
from arakit.payload import extract_short, inject_short

SUBSCRIBE_EVENT_TTL = 0xFFFFFF
_NACK_TTL = 0x000000
_UNSUBSCRIBE_EVENT_TTL = 0x000000
_COUNTER_MAX = 0x0F


class EventgroupEntry(Entry):
    """Entry to subscribe/unsubscribe to/from an event-group."""

    SUBSCRIBE_EVENT_TTL = SUBSCRIBE_EVENT_TTL

    def __init__(
        self,
        entry_type: EntryType,
        service_id: int,
        instance_id: int,
        ttl: int,
        major_version: int,
        counter: int,
        eventgroup_id: int,
    ) -> None:
        super().__init__(entry_type, service_id, instance_id, ttl, major_version)
        if not 0 <= counter <= _COUNTER_MAX:
            raise ValueError("The counter is out of range.")
        if not 0 <= eventgroup_id <= 0xFFFF:
            raise ValueError(f"event-group ID {eventgroup_id} is out of range")
        self._counter = counter
        self._eventgroup_id = eventgroup_id

    @property
    def counter(self) -> int:
        """Subscriber counter, a 4-bit unsigned integer."""
        return self._counter

    @property
    def eventgroup_id(self) -> int:
        return self._eventgroup_id

    @property
    def is_acknowledge(self) -> bool:
        """True for a positive acknowledgement entry."""
        return self.type == EntryType.ACKNOWLEDGING and self.ttl > _NACK_TTL

    def validate_option(self, option: Any) -> bool:
        if not super().validate_option(option):
            return False
        option_type = option.type
        if option_type in (OptionType.IPV4_ENDPOINT, OptionType.IPV6_ENDPOINT):
            # Endpoint options are allowed only in subscription entries.
            return self.type == EntryType.SUBSCRIBING
        if option_type in (OptionType.IPV4_MULTICAST, OptionType.IPV6_MULTICAST):
            # Multicast options are allowed only once, in positive acknowledgements.
            return self.is_acknowledge and not self.contains_option(option_type)
        return False

    def payload(self, option_index: int) -> tuple[list[int], int]:
        result, option_index = self.base_payload(option_index)
        inject_short(result, self._counter)
        inject_short(result, self._eventgroup_id)
        return result, option_index

    @classmethod
    def create_subscribe_event_entry(
        cls,
        service_id: int,
        instance_id: int,
        major_version: int,
        counter: int,
        eventgroup_id: int,
    ) -> EventgroupEntry:
        """Create an entry that subscribes to an event-group."""
        return cls(
            EntryType.SUBSCRIBING,
            service_id,
            instance_id,
            SUBSCRIBE_EVENT_TTL,
            major_version,
            counter,
            eventgroup_id,
        )

    @classmethod
    def create_unsubscribe_event_entry(
        cls,
        service_id: int,
        instance_id: int,
        major_version: int,
        counter: int,
        eventgroup_id: int,
    ) -> EventgroupEntry:
        """Create an entry that unsubscribes from an event-group."""
        return cls(
            EntryType.SUBSCRIBING,
            service_id,
            instance_id,
            _UNSUBSCRIBE_EVENT_TTL,
            major_version,
            counter,
            eventgroup_id,
        )

    @classmethod
    def create_acknowledge_entry(cls, entry: EventgroupEntry) -> EventgroupEntry:
        """Create a positive acknowledgement of a subscription entry."""
        return cls(
            EntryType.ACKNOWLEDGING,
            entry.service_id,
            entry.instance_id,
            entry.ttl,
            entry.major_version,
            entry.counter,
            entry.eventgroup_id,
        )

    @classmethod
    def create_negative_acknowledge_entry(
        cls, entry: EventgroupEntry
    ) -> EventgroupEntry:
        """Create a negative acknowledgement of a subscription entry."""
        return cls(
            EntryType.ACKNOWLEDGING,
            entry.service_id,
            entry.instance_id,
            _NACK_TTL,
            entry.major_version,
            entry.counter,
            entry.eventgroup_id,
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
    ) -> tuple[EventgroupEntry, int]:
        """Read the event-group-specific part at ``offset``.

        Return the entry with the advanced offset.
        """
        # Skip the reserved byte.
        offset += 1
        if offset < 0 or offset >= len(payload):
            raise IndexError(
                f"cannot read the counter at offset {offset} from {len(payload)} bytes"
            )
        counter = payload[offset]
        offset += 1
        eventgroup_id, offset = extract_short(payload, offset)

        if entry_type == EntryType.SUBSCRIBING:
            if ttl > _UNSUBSCRIBE_EVENT_TTL:
                entry = cls.create_subscribe_event_entry(
                    service_id, instance_id, major_version, counter, eventgroup_id
                )
            else:
                entry = cls.create_unsubscribe_event_entry(
                    service_id, instance_id, major_version, counter, eventgroup_id
                )
        elif entry_type == EntryType.ACKNOWLEDGING:
            entry = cls(
                entry_type,
                service_id,
                instance_id,
                ttl,
                major_version,
                counter,
                eventgroup_id,
            )
        else:
            raise ValueError(
                "The entry type does not belong to event-group entry series."
            )
        return entry, offset