"""
MAC Address Value Object
=========================

Six-octet IEEE 802 MAC address with the classification the BSSID
validators need: broadcast, multicast (group bit set) or unicast.

Reference:
    IEEE. (2014). IEEE Std 802-2014. Section 8.2: Universal addresses
    and protocol identifiers.
"""

from __future__ import annotations

import enum

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class MacAddressType(str, enum.Enum):
    """Address class derived from the I/G bit and the broadcast value."""

    UNICAST = "unicast"
    MULTICAST = "multicast"
    BROADCAST = "broadcast"


class MacAddress:
    """An immutable 48-bit MAC address."""

    __slots__ = ("_octets",)

    def __init__(self, octets: bytes) -> None:
        if len(octets) != 6:
            raise ValueError(f"MAC address needs 6 octets, got {len(octets)}")
        self._octets = bytes(octets)

    @classmethod
    def from_string(cls, value: str) -> MacAddress:
        """Parse ``aa:bb:cc:dd:ee:ff`` (1-2 hex digits per group).

        Raises:
            ValueError: If *value* is not six colon-separated hex groups.
        """
        parts = value.split(":")
        if len(parts) != 6:
            raise ValueError(f"Malformed MAC address: {value!r}")
        for part in parts:
            if not 1 <= len(part) <= 2 or not set(part) <= _HEX_DIGITS:
                raise ValueError(f"Malformed MAC address: {value!r}")
        return cls(bytes(int(part, 16) for part in parts))

    @property
    def octets(self) -> bytes:
        return self._octets

    @property
    def address_type(self) -> MacAddressType:
        if self._octets == b"\xff" * 6:
            return MacAddressType.BROADCAST
        if self._octets[0] & 0x01:
            return MacAddressType.MULTICAST
        return MacAddressType.UNICAST

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MacAddress):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash(self._octets)

    def __repr__(self) -> str:
        return f"MacAddress('{self}')"

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self._octets)


BROADCAST_ADDRESS = MacAddress(b"\xff" * 6)
ALL_ZEROS_ADDRESS = MacAddress(b"\x00" * 6)
