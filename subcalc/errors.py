#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Validation errors raised by the address and subnet core.
"""


class ValidationError(ValueError):
    """Base class for every input rejected by SubCalc."""

    kind = "value"

    def __init__(self, value, reason: str = ""):
        self.value = value
        self.reason = reason
        message = f"Invalid {self.kind} '{value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidAddress(ValidationError):
    """The string is not four octets in [0, 255] separated by three dots."""

    kind = "address"


class InvalidMask(ValidationError):
    """The mask part is neither a prefix mask nor a suffix in [0, 32]."""

    kind = "mask"


class InvalidSuffix(ValidationError):
    kind = "suffix"


class IndexOutOfRange(ValidationError, IndexError):
    kind = "octet index"


class NetworkTooLarge(ValidationError):
    """Enumeration was requested on a network that spans the whole address space."""

    kind = "network"
