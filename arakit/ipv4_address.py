"""IPv4 address value type with payload serialisation."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

_OCTET_COUNT = 4


@dataclass(frozen=True)
class Ipv4Address:
    """An IPv4 address made of four octets."""

    octet0: int
    octet1: int
    octet2: int
    octet3: int

    def __post_init__(self) -> None:
        for octet in self.octets:
            if not 0 <= octet <= 0xFF:
                raise ValueError(f"octet {octet} is out of range 0..255")

    @property
    def octets(self) -> tuple[int, int, int, int]:
        return (self.octet0, self.octet1, self.octet2, self.octet3)

    def inject(self, buffer: MutableSequence[int]) -> None:
        """Append the four octets to ``buffer``."""
        buffer.extend(self.octets)

    @classmethod
    def extract(cls, data: Sequence[int], offset: int) -> tuple[Ipv4Address, int]:
        """Read an address at ``offset``; return it with the advanced offset."""
        end = offset + _OCTET_COUNT
        if offset < 0 or end > len(data):
            raise IndexError(
                f"cannot read an IPv4 address at offset {offset} from {len(data)} bytes"
            )
        return cls(*data[offset:end]), end

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)