#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core functionality for SubCalc - turns user input into subnet results.

Thin service layer over the address and subnet value types: it normalizes
the accepted input forms and flattens a Subnet into a plain result dict.
"""
import functools
import logging
import sys
import time
from typing import Any, Dict, Iterator, Optional

from .address import IPv4Address
from .errors import InvalidAddress
from .subnet import Subnet


# Global configuration
DEBUG_MODE = False


# Configure logging with dynamic level
def setup_logging(debug: bool = False) -> None:
    """Setup logging with optional debug mode."""
    global DEBUG_MODE
    DEBUG_MODE = debug

    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        handlers=[logging.StreamHandler(sys.stderr)],
        level=level,
        format='%(asctime)s.%(msecs)03d [%(levelname)s]: (%(name)s.%(funcName)s) - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True
    )


setup_logging()
logger = logging.getLogger(__name__)

RESULT_FIELDS = ("network", "prefix", "netmask", "broadcast", "hosts", "hostmin", "hostmax", "next")


def debug_log(func):
    """Decorator for debug logging with timing."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if DEBUG_MODE:
            start_time = time.time()
            logger.debug(f"Entering {func.__name__} with args={args}, kwargs={kwargs}")

            try:
                result = func(*args, **kwargs)
                elapsed = (time.time() - start_time) * 1000
                logger.debug(f"Exiting {func.__name__} in {elapsed:.2f}ms with result={result}")
                return result
            except Exception as e:
                elapsed = (time.time() - start_time) * 1000
                logger.debug(f"Exception in {func.__name__} after {elapsed:.2f}ms: {e}")
                raise
        else:
            return func(*args, **kwargs)
    return wrapper


@debug_log
def parse_address(text: str) -> IPv4Address:
    """Parse a dotted-quad IPv4 address or raise InvalidAddress."""
    return IPv4Address.parse(text)


@debug_log
def parse_subnet(text: str, mask: Optional[str] = None) -> Subnet:
    """
    Parse any of the accepted subnet input forms.

    Accepted forms:
        - "192.168.1.10/24" or "192.168.1.10/255.255.255.0"
        - "192.168.1.10 24" or "192.168.1.10 255.255.255.0"
        - text="192.168.1.10", mask="24" (mask supplied separately)
        - "192.168.1.10" alone, giving the natural subnet of the address

    Raises:
        InvalidAddress, InvalidMask: if the input is not valid
    """
    if mask is not None:
        return Subnet.parse_pair(text, mask)

    if not isinstance(text, str) or not text.strip():
        raise InvalidAddress(text, "empty input, expected e.g. 192.168.1.1/24")

    text = text.strip()
    if '/' in text:
        return Subnet.parse(text)

    parts = text.split()
    if len(parts) == 2:
        if DEBUG_MODE:
            logger.debug(f"Treating '{text}' as address and mask separated by whitespace")
        return Subnet.parse_pair(parts[0], parts[1])
    if len(parts) > 2:
        raise InvalidAddress(text, "expected an address and at most one mask or suffix")

    if DEBUG_MODE:
        logger.debug(f"No mask given for '{text}', using the natural subnet")
    return Subnet.natural(IPv4Address.parse(text))


@debug_log
def classify_subnet(subnet: Subnet) -> str:
    """
    Return a short comment for reserved ranges, empty string otherwise.

    Special ranges:
        - loopback: 127.0.0.0/8 → "RFC 3330 Loopback"
        - link_local: 169.254.0.0/16 → "RFC 3927 Link-local"
        - private: 10/8, 172.16/12 or 192.168/16 → "RFC 1918 Private"
    """
    network = subnet.network_address
    if network.is_loopback:
        return 'RFC 3330 Loopback'
    if network.is_link_local:
        return 'RFC 3927 Link-local'
    if subnet.is_private_subnet:
        return 'RFC 1918 Private'
    return ''


@debug_log
def compute(subnet: Subnet) -> Dict[str, Any]:
    """
    Flatten a subnet into a result dict.

    Returns:
        Dictionary with network parameters:
        - network: network address
        - prefix: prefix length with slash
        - netmask: subnet mask
        - broadcast: broadcast address
        - hosts: number of hosts as ~mask - 1 (0 for /31, -1 for /32)
        - hostmin: network address + 1
        - hostmax: broadcast address - 1
        - next: the following subnet of the same size
        - private: whether the whole subnet is in one private range
        - class: classful address class of the network address
        - comment: reserved range note (empty for plain unicast)
    """
    result = {
        "network": str(subnet.network_address),
        "prefix": f"/{subnet.mask_suffix_length}",
        "netmask": str(subnet.mask),
        "broadcast": str(subnet.broadcast_address),
        "hosts": str(subnet.number_of_hosts),
        "hostmin": str(subnet.first_host_address),
        "hostmax": str(subnet.last_host_address),
        "next": str(subnet.next_subnet),
        "private": subnet.is_private_subnet,
        "class": subnet.network_address.address_class,
        "comment": classify_subnet(subnet),
    }

    if DEBUG_MODE:
        logger.debug(f"Computation completed for {subnet}: {result}")

    return result


@debug_log
def compute_from_cidr(text: str, mask: Optional[str] = None) -> Dict[str, Any]:
    """
    Compute network parameters from user input.

    Args:
        text: subnet input, see parse_subnet for the accepted forms
        mask: optional mask or suffix given as a separate token

    Returns:
        Dictionary with network parameters

    Raises:
        ValueError: if the input is invalid
    """
    return compute(parse_subnet(text, mask))


@debug_log
def iter_addresses(text: str, mask: Optional[str] = None) -> Iterator[str]:
    """
    Yield every address of the subnet as a dotted string, lowest first.

    Raises:
        NetworkTooLarge: for a /0 subnet (raised before anything is yielded)
    """
    addresses = parse_subnet(text, mask).all_addresses()
    return (str(address) for address in addresses)
