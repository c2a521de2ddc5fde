#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
IPv4 subnet value type and subnet arithmetic.

A Subnet is a (network address, mask) pair. The network address is always
stored with its host bits cleared. Every derived value (broadcast, host
range, host count, next subnet) is computed from that pair.
"""
import functools
from collections.abc import Sequence
from typing import Iterator, Union

from .address import ADDRESS_BITS, ALL_ONES, IPv4Address, prefix_mask
from .errors import InvalidAddress, InvalidMask, InvalidSuffix, NetworkTooLarge

MaskLike = Union[IPv4Address, int]


def _mask_bits(value: MaskLike) -> str:
    value = int(value)
    if not 0 <= value <= ALL_ONES:
        raise InvalidMask(value, "outside the 32-bit range")
    return format(value, '032b')


def is_valid_mask(value: MaskLike) -> bool:
    """
    Check that ``value`` is a prefix mask: ones first, then only zeros.

    The all-zero mask (/0) and the all-ones mask (/32) are both valid.
    """
    bits = _mask_bits(value)
    return '0' not in bits[:bits.rfind('1') + 1]


def suffix_length(mask: MaskLike) -> int:
    """Number of leading one bits of a prefix mask."""
    return _mask_bits(mask).rfind('1') + 1


def _to_signed32(value: int) -> int:
    value &= ALL_ONES
    return value - (1 << ADDRESS_BITS) if value & (1 << (ADDRESS_BITS - 1)) else value


class AddressRange(Sequence):
    """
    Every address from ``first`` to ``last`` inclusive, in ascending order.

    Addresses are produced on demand, so iterating twice walks the range twice
    and nothing is stored besides the two bounds.
    """

    def __init__(self, first: IPv4Address, last: IPv4Address):
        self._range = range(int(first), int(last) + 1)

    def __len__(self) -> int:
        return len(self._range)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [IPv4Address(value) for value in self._range[index]]
        return IPv4Address(self._range[index])

    def __iter__(self) -> Iterator[IPv4Address]:
        for value in self._range:
            yield IPv4Address(value)

    def __contains__(self, address) -> bool:
        return isinstance(address, IPv4Address) and int(address) in self._range

    def __repr__(self) -> str:
        return f"AddressRange('{self[0]}', '{self[-1]}')"


@functools.total_ordering
class Subnet:
    """Immutable IPv4 network: a mask-aligned base address and a prefix mask."""

    __slots__ = ('_network', '_mask')

    def __init__(self, address: IPv4Address, mask: IPv4Address):
        if not isinstance(address, IPv4Address):
            raise InvalidAddress(address, "expected an IPv4Address")
        if not isinstance(mask, IPv4Address):
            raise InvalidMask(mask, "expected an IPv4Address")
        if not is_valid_mask(mask):
            raise InvalidMask(mask, "ones must be contiguous from the left")
        object.__setattr__(self, '_network', address & mask)
        object.__setattr__(self, '_mask', mask)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_suffix(cls, address: IPv4Address, suffix: int) -> 'Subnet':
        """Build the /``suffix`` network containing ``address``."""
        return cls(address, IPv4Address(prefix_mask(suffix)))

    @classmethod
    def parse(cls, text: str) -> 'Subnet':
        """
        Parse ``"A.B.C.D/N"`` or ``"A.B.C.D/E.F.G.H"``.

        The part after the slash is read as a dotted mask when it is a valid
        address and a valid prefix mask, otherwise as a suffix in 0-32.

        Raises:
            InvalidAddress: if the part before the slash is not an address
            InvalidMask: if the slash is missing or the part after it is
                neither a prefix mask nor a suffix in 0-32
        """
        if not isinstance(text, str):
            raise InvalidAddress(text, "expected a string")
        stripped = text.strip()
        if '/' not in stripped:
            raise InvalidMask(text, "missing '/' separator")
        left, right = stripped.split('/', 1)
        return cls.parse_pair(left, right)

    @classmethod
    def parse_pair(cls, address: str, mask: str) -> 'Subnet':
        """Parse an address and a separately supplied mask or suffix."""
        ip = IPv4Address.parse(address)
        return cls(ip, parse_mask(mask))

    @classmethod
    def natural(cls, address: IPv4Address) -> 'Subnet':
        """
        Derive a network from an address alone.

        The last octet always counts as host part, and so does every zero
        octet directly before it (the first octet excepted): ``192.168.1.5``
        gives ``/24``, ``192.168.1.0`` gives ``/16``, ``10.0.0.0`` gives ``/0``.
        """
        octets = address.octets
        index = 3
        host_octets = 1
        while index > 0 and octets[index] == 0:
            index -= 1
            host_octets += 1
        return cls.from_suffix(address, ADDRESS_BITS - 8 * host_octets)

    @property
    def network_address(self) -> IPv4Address:
        return self._network

    @property
    def mask(self) -> IPv4Address:
        return self._mask

    @property
    def mask_suffix_length(self) -> int:
        return suffix_length(self._mask)

    @property
    def host_mask(self) -> IPv4Address:
        return ~self._mask

    @property
    def broadcast_address(self) -> IPv4Address:
        return self._network | self.host_mask

    @property
    def number_of_hosts(self) -> int:
        """
        Host count as ``~mask - 1`` in signed 32-bit arithmetic.

        This gives 0 for /31, -1 for /32 and -2 for /0.
        """
        return _to_signed32(int(self.host_mask)) - 1

    @property
    def first_host_address(self) -> IPv4Address:
        return self._network + 1

    @property
    def last_host_address(self) -> IPv4Address:
        return self.broadcast_address - 1

    @property
    def next_subnet(self) -> 'Subnet':
        """The same-sized network right after this one (wraps past 255.255.255.255)."""
        return Subnet(self.broadcast_address + 1, self._mask)

    @property
    def is_private_subnet(self) -> bool:
        """True if the whole network lies inside a single private range."""
        network = self._network
        broadcast = self.broadcast_address
        return any(r.contains(network) and r.contains(broadcast) for r in PRIVATE_RANGES)

    @property
    def with_netmask(self) -> str:
        return f"{self._network}/{self._mask}"

    def contains(self, address: IPv4Address) -> bool:
        return (address & self._mask) == self._network

    def __contains__(self, address) -> bool:
        return isinstance(address, IPv4Address) and self.contains(address)

    def all_addresses(self) -> AddressRange:
        """
        Every address of the network, network and broadcast included.

        Raises:
            NetworkTooLarge: for a /0 network
        """
        if self.mask_suffix_length == 0:
            raise NetworkTooLarge(self, "cannot enumerate all 2**32 addresses")
        return AddressRange(self._network, self.broadcast_address)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Subnet):
            return NotImplemented
        return self._network == other._network and self._mask == other._mask

    def __lt__(self, other) -> bool:
        if not isinstance(other, Subnet):
            return NotImplemented
        return self._network < other._network

    def __hash__(self) -> int:
        return hash((Subnet, int(self._network), int(self._mask)))

    def __str__(self) -> str:
        return f"{self._network}/{self.mask_suffix_length}"

    def __repr__(self) -> str:
        return f"Subnet('{self}')"

    def __reduce__(self):
        return Subnet, (self._network, self._mask)


def parse_mask(text: str) -> IPv4Address:
    """
    Read a dotted prefix mask or a decimal suffix in 0-32 and return the mask.

    Raises:
        InvalidMask: if ``text`` is neither
    """
    if not isinstance(text, str):
        raise InvalidMask(text, "expected a string")
    stripped = text.strip()
    try:
        mask = IPv4Address.parse(stripped)
    except InvalidAddress:
        mask = None
    if mask is not None and is_valid_mask(mask):
        return mask
    if stripped.isdigit() and stripped.isascii():
        try:
            return IPv4Address(prefix_mask(int(stripped)))
        except InvalidSuffix as exc:
            raise InvalidMask(text, exc.reason) from exc
    raise InvalidMask(text, "expected a prefix mask or a suffix between 0 and 32")


# Reserved ranges
LOOPBACK = Subnet.parse("127.0.0.0/255.0.0.0")
PRIVATE_10 = Subnet.parse("10.0.0.0/255.0.0.0")
PRIVATE_172 = Subnet.parse("172.16.0.0/255.240.0.0")
PRIVATE_192 = Subnet.parse("192.168.0.0/255.255.0.0")
LINK_LOCAL = Subnet.parse("169.254.0.0/255.255.0.0")
PRIVATE_RANGES = (PRIVATE_10, PRIVATE_172, PRIVATE_192)
