#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
SubCalc - IPv4 subnet calculator library with a CLI.

Computes network address, broadcast address, host range, host count,
private/loopback/link-local classification and the next adjacent subnet
from address/mask or address/CIDR input.
"""

__version__ = "1.2.0"
__author__ = 'SubCalc contributors'

from .errors import (
    ValidationError,
    InvalidAddress,
    InvalidMask,
    InvalidSuffix,
    IndexOutOfRange,
    NetworkTooLarge,
)
from .address import IPv4Address, network_address, parse_address, prefix_mask
from .subnet import AddressRange, Subnet, is_valid_mask, parse_mask, suffix_length

__all__ = [
    "__version__",
    "__author__",
    "ValidationError",
    "InvalidAddress",
    "InvalidMask",
    "InvalidSuffix",
    "IndexOutOfRange",
    "NetworkTooLarge",
    "IPv4Address",
    "network_address",
    "parse_address",
    "prefix_mask",
    "AddressRange",
    "Subnet",
    "is_valid_mask",
    "parse_mask",
    "suffix_length",
]
