"""Decoding of Encrypted Client Hello config lists from DNS HTTPS records."""

from .ech_common import (
    EchError,
    Base64DecodeError,
    BufferOverflow,
    UnknownVersion,
    ConfigLengthExceedsBuffer,
    InvalidPublicKeyLength,
    InvalidCipherSuiteLength,
    NoConfigFound,
    DnsLookupError,
)
from .ech_config import CipherSuite, ConfigEntry, ConfigList
from .ech_decode import decode_ech, decode_ech_bytes, DecodeResult, DecodeSuccess, DecodeFailure
from .doh_client import fetch_https_record, HttpsRecord
