"""Common imports, logger and error types across the ECH decoding code."""

from typing import Any, override, Self
from collections.abc import Iterable, Mapping, Callable
from functools import cached_property
from dataclasses import dataclass, field

from .config import *

import logging
logger = logging.getLogger('echinspect')
logging.basicConfig(format='[%(levelname)s] %(message)s')

if DEBUG:
    logger.setLevel(logging.DEBUG)
else:
    logger.setLevel(logging.WARNING)


class EchError(ValueError):
    """Anything that makes one attempt at decoding ECH bytes fail."""
    pass

@dataclass
class Base64DecodeError(EchError):
    detail: str

    @override
    def __str__(self) -> str:
        return f"Base64 decoding failed: {self.detail}"

@dataclass
class BufferOverflow(EchError):
    needed: int
    available: int
    offset: int

    @override
    def __str__(self) -> str:
        return (f"Buffer overflow: need {self.needed} bytes, but only "
                f"{self.available} remaining at offset {self.offset}.")

@dataclass
class UnknownVersion(EchError):
    version: int
    offset: int

    @override
    def __str__(self) -> str:
        return f"Unknown ECH version: 0x{self.version:04X} at offset {self.offset}"

@dataclass
class ConfigLengthExceedsBuffer(EchError):
    length: int
    available: int

    @override
    def __str__(self) -> str:
        return f"Config length ({self.length}) exceeds remaining buffer ({self.available})"

@dataclass
class InvalidPublicKeyLength(EchError):
    length: int

    @override
    def __str__(self) -> str:
        return f"Invalid public key length: {self.length}"

@dataclass
class InvalidCipherSuiteLength(EchError):
    length: int

    @override
    def __str__(self) -> str:
        return f"Invalid cipher suites length: {self.length}"

@dataclass
class NoConfigFound(EchError):
    message: str

    @override
    def __str__(self) -> str:
        return self.message


class DnsLookupError(RuntimeError):
    pass
