"""Deserialization of any service discovery entry."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from arakit.entry import OPTION_SIZE_BIT_LENGTH, Entry, EntryType
from arakit.eventgroup_entry import EventgroupEntry
from arakit.payload import extract_int, extract_short
from arakit.service_entry import ServiceEntry

_TTL_BIT_LENGTH = 24
_TTL_MASK = 0x00FFFFFF
_SECOND_OPTIONS_NUMBER_MASK = 0x0F


@dataclass(frozen=True)
class DeserializedEntry:
    """An entry read from a payload, with its option counts and the next offset."""

    entry: Entry
    offset: int
    number_of_first_options: int
    number_of_second_options: int


def _byte_at(payload: Sequence[int], offset: int) -> int:
    if offset < 0 or offset >= len(payload):
        raise IndexError(
            f"cannot read a byte at offset {offset} from {len(payload)} bytes"
        )
    return payload[offset]


def deserialize_entry(payload: Sequence[int], offset: int) -> DeserializedEntry:
    """Read one entry starting at ``offset`` of ``payload``.

    Raise ValueError if the entry type is not supported.
    """
    raw_type = _byte_at(payload, offset)
    offset += 1
    try:
        entry_type = EntryType(raw_type)
    except ValueError:
        raise ValueError("Entry type is not supported for deserializing.") from None

    # Skip the first and the second options' index fields.
    offset += 2

    options_numbers = _byte_at(payload, offset)
    offset += 1
    first_count = options_numbers >> OPTION_SIZE_BIT_LENGTH
    second_count = options_numbers & _SECOND_OPTIONS_NUMBER_MASK

    service_id, offset = extract_short(payload, offset)
    instance_id, offset = extract_short(payload, offset)
    combined, offset = extract_int(payload, offset)
    major_version = combined >> _TTL_BIT_LENGTH
    ttl = combined & _TTL_MASK

    entry: Entry
    if entry_type in (EntryType.FINDING, EntryType.OFFERING):
        entry, offset = ServiceEntry.deserialize(
            payload, offset, entry_type, service_id, instance_id, ttl, major_version
        )
    else:
        entry, offset = EventgroupEntry.deserialize(
            payload, offset, entry_type, service_id, instance_id, ttl, major_version
        )
    return DeserializedEntry(entry, offset, first_count, second_count)