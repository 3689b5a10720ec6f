"""Static id -> label tables for ECH config fields."""

from enum import IntEnum
from types import MappingProxyType
from collections.abc import Mapping

UNKNOWN = 'Unknown'

class EchVersion(IntEnum):
    DRAFT_13 = 0xfe0d
    DRAFT_12 = 0xfe0c
    DRAFT_11 = 0xfe0b

# every known version shares this high byte
VERSION_HIGH_BYTE = 0xfe
# second byte of the versions the offset scanner looks for
SCAN_VERSION_LOW_BYTES = frozenset((0x0d, 0x0c))

VERSION_NAMES: Mapping[int, str] = MappingProxyType({
    EchVersion.DRAFT_13: 'Draft-13',
    EchVersion.DRAFT_12: 'Draft-12',
    EchVersion.DRAFT_11: 'Draft-11',
})

KEM_NAMES: Mapping[int, str] = MappingProxyType({
    0x0020: 'DHKEM(X25519, HKDF-SHA256)',
    0x0021: 'DHKEM(P-256, HKDF-SHA256)',
    0x0022: 'DHKEM(P-384, HKDF-SHA384)',
    0x0023: 'DHKEM(P-521, HKDF-SHA512)',
})

CIPHER_SUITE_NAMES: Mapping[int, str] = MappingProxyType({
    0x0001: 'AES_128_GCM_SHA256',
    0x0002: 'AES_256_GCM_SHA384',
    0x0003: 'CHACHA20_POLY1305_SHA256',
})

def is_known_version(version: int) -> bool:
    return version in VERSION_NAMES

def version_name(version: int) -> str:
    return VERSION_NAMES.get(version, UNKNOWN)

def kem_name(kem_id: int) -> str:
    return KEM_NAMES.get(kem_id, UNKNOWN)

def cipher_suite_name(suite_id: int) -> str:
    return CIPHER_SUITE_NAMES.get(suite_id, UNKNOWN)
