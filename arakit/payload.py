"""Big-endian integer packing helpers for message payloads."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

_SHORT_SIZE = 2
_INT_SIZE = 4


def _inject(buffer: MutableSequence[int], value: int, size: int) -> None:
    if not 0 <= value < 1 << (8 * size):
        raise ValueError(f"value {value} does not fit into {size} bytes")
    buffer.extend(value.to_bytes(size, "big"))


def _extract(data: Sequence[int], offset: int, size: int) -> tuple[int, int]:
    end = offset + size
    if offset < 0 or end > len(data):
        raise IndexError(
            f"cannot read {size} bytes at offset {offset} from {len(data)} bytes"
        )
    return int.from_bytes(bytes(data[offset:end]), "big"), end


def inject_short(buffer: MutableSequence[int], value: int) -> None:
    """Append a 16-bit unsigned value to ``buffer`` in big-endian order."""
    _inject(buffer, value, _SHORT_SIZE)


def inject_int(buffer: MutableSequence[int], value: int) -> None:
    """Append a 32-bit unsigned value to ``buffer`` in big-endian order."""
    _inject(buffer, value, _INT_SIZE)


def extract_short(data: Sequence[int], offset: int) -> tuple[int, int]:
    """Read a big-endian 16-bit value; return it with the advanced offset."""
    return _extract(data, offset, _SHORT_SIZE)


def extract_int(data: Sequence[int], offset: int) -> tuple[int, int]:
    """Read a big-endian 32-bit value; return it with the advanced offset."""
    return _extract(data, offset, _INT_SIZE)