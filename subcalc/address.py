#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
IPv4 address value type.

An address is a single unsigned 32-bit integer. The first dotted segment is
the most significant octet. All arithmetic wraps modulo 2**32.
"""
import functools
import re
from typing import Tuple, Union

from .errors import IndexOutOfRange, InvalidAddress, InvalidSuffix

ADDRESS_BITS = 32
ALL_ONES = (1 << ADDRESS_BITS) - 1

_SEGMENT_RE = re.compile(r'[0-9]+\Z')


def prefix_mask(suffix: int) -> int:
    """
    Return the integer mask with ``suffix`` leading one bits.

    Args:
        suffix: prefix length in the range 0-32

    Returns:
        Mask as an unsigned 32-bit integer (0 for suffix 0)

    Raises:
        InvalidSuffix: if suffix is not an integer in 0-32
    """
    if isinstance(suffix, bool) or not isinstance(suffix, int):
        raise InvalidSuffix(suffix, "expected an integer")
    if not 0 <= suffix <= ADDRESS_BITS:
        raise InvalidSuffix(suffix, "must be between 0 and 32")
    if suffix == 0:
        return 0
    return (ALL_ONES << (ADDRESS_BITS - suffix)) & ALL_ONES


def _to_int(other) -> int:
    if isinstance(other, IPv4Address):
        return other._value
    if isinstance(other, int) and not isinstance(other, bool):
        return other & ALL_ONES
    raise TypeError(f"unsupported operand type: {type(other).__name__}")


@functools.total_ordering
class IPv4Address:
    """Immutable IPv4 address."""

    __slots__ = ('_value',)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidAddress(value, "expected an integer")
        if not 0 <= value <= ALL_ONES:
            raise InvalidAddress(value, "outside the 32-bit range")
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def parse(cls, text: str) -> 'IPv4Address':
        """
        Parse a dotted-quad string such as ``"192.168.1.10"``.

        Surrounding whitespace is ignored. Exactly three dots and four
        decimal segments in 0-255 are required.

        Raises:
            InvalidAddress: if the string is not a valid dotted quad
        """
        if not isinstance(text, str):
            raise InvalidAddress(text, "expected a string")
        stripped = text.strip()
        if stripped.count('.') != 3:
            raise InvalidAddress(text, "expected exactly 3 dots")
        octets = []
        for segment in stripped.split('.'):
            if not segment:
                raise InvalidAddress(text, "empty octet")
            if not _SEGMENT_RE.match(segment):
                raise InvalidAddress(text, f"octet '{segment}' is not a decimal number")
            octet = int(segment)
            if octet > 255:
                raise InvalidAddress(text, f"octet {octet} is out of range 0-255")
            octets.append(octet)
        return cls.from_octets(*octets)

    @classmethod
    def from_octets(cls, o0: int, o1: int, o2: int, o3: int) -> 'IPv4Address':
        """Compose an address from four octets, most significant first."""
        octets = (o0, o1, o2, o3)
        for octet in octets:
            if isinstance(octet, bool) or not isinstance(octet, int) or not 0 <= octet <= 255:
                raise InvalidAddress('.'.join(str(o) for o in octets), f"octet {octet!r} is out of range 0-255")
        return cls((o0 << 24) | (o1 << 16) | (o2 << 8) | o3)

    @property
    def as_integer(self) -> int:
        return self._value

    @property
    def octets(self) -> Tuple[int, int, int, int]:
        value = self._value
        return (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF

    def octet(self, index: int) -> int:
        """Return octet ``index`` (0 is the first dotted segment)."""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= 3:
            raise IndexOutOfRange(index, "must be between 0 and 3")
        return self.octets[index]

    @property
    def address_class(self) -> str:
        """Classful address class, decided by the first octet."""
        first = self.octet(0)
        if first < 128:
            return 'A'
        if first < 192:
            return 'B'
        if first < 224:
            return 'C'
        if first < 240:
            return 'D'
        return 'E'

    @property
    def is_loopback(self) -> bool:
        from .subnet import LOOPBACK
        return LOOPBACK.contains(self)

    @property
    def is_private(self) -> bool:
        from .subnet import PRIVATE_RANGES
        return any(network.contains(self) for network in PRIVATE_RANGES)

    @property
    def is_link_local(self) -> bool:
        from .subnet import LINK_LOCAL
        return LINK_LOCAL.contains(self)

    def network_address(self, suffix: int) -> 'IPv4Address':
        """Return this address with every bit past ``suffix`` cleared."""
        return IPv4Address(self._value & prefix_mask(suffix))

    # Arithmetic

    def __add__(self, other: int) -> 'IPv4Address':
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return IPv4Address((self._value + other) & ALL_ONES)

    __radd__ = __add__

    def __sub__(self, other: int) -> 'IPv4Address':
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return IPv4Address((self._value - other) & ALL_ONES)

    def __and__(self, other: Union['IPv4Address', int]) -> 'IPv4Address':
        return IPv4Address(self._value & _to_int(other))

    def __or__(self, other: Union['IPv4Address', int]) -> 'IPv4Address':
        return IPv4Address(self._value | _to_int(other))

    def __invert__(self) -> 'IPv4Address':
        return IPv4Address(~self._value & ALL_ONES)

    def __int__(self) -> int:
        return self._value

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, IPv4Address):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if not isinstance(other, IPv4Address):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((IPv4Address, self._value))

    def __str__(self) -> str:
        return '.'.join(str(octet) for octet in self.octets)

    def __repr__(self) -> str:
        return f"IPv4Address('{self}')"

    def __reduce__(self):
        return IPv4Address, (self._value,)


def parse_address(text: str) -> IPv4Address:
    """Parse a dotted-quad string. See :meth:`IPv4Address.parse`."""
    return IPv4Address.parse(text)


def network_address(address: IPv4Address, suffix: int) -> IPv4Address:
    """Return ``address`` masked to its first ``suffix`` bits."""
    return address.network_address(suffix)
