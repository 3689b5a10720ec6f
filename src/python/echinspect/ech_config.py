"""Decoded ECH configuration objects.

Everything here is built once by the parsers in ech_parse and never changed.
Each field keeps the exact bytes it was read from (including any length
prefix), so a display can show the raw encoding next to the decoded value.
"""

from .ech_common import *
from .ech_tables import version_name, kem_name, cipher_suite_name
from .util import bytes_to_hex

from cryptography.hazmat.primitives.hashes import Hash, SHA256

type Json = int | float | str | bool | None | list[Json] | dict[str, Json]


@dataclass(frozen=True)
class CipherSuite:
    id: int

    @property
    def name(self) -> str:
        return cipher_suite_name(self.id)

    def jsonify(self) -> Json:
        return {'id': self.id, 'name': self.name}


@dataclass(frozen=True)
class ConfigEntry:
    version: int
    version_raw: bytes
    config_length: int
    config_length_raw: bytes
    config_id: int
    config_id_raw: bytes
    kem_id: int
    kem_id_raw: bytes
    public_key: bytes
    public_key_raw: bytes
    cipher_suites: tuple[CipherSuite, ...]
    cipher_suites_raw: bytes
    max_name_len: int
    max_name_len_raw: bytes
    public_name: str
    public_name_raw: bytes
    contents: bytes

    @property
    def version_name(self) -> str:
        return version_name(self.version)

    @property
    def kem_name(self) -> str:
        return kem_name(self.kem_id)

    @cached_property
    def key_fingerprint(self) -> str:
        """SHA-256 of the public key bytes; a label for comparing keys, not a check."""
        h = Hash(SHA256())
        h.update(self.public_key)
        return h.finalize().hex()

    def jsonify(self) -> Json:
        return {
            'version': self.version,
            'version_name': self.version_name,
            'version_hex': bytes_to_hex(self.version_raw),
            'config_length': self.config_length,
            'config_length_hex': bytes_to_hex(self.config_length_raw),
            'config_id': self.config_id,
            'config_id_hex': bytes_to_hex(self.config_id_raw),
            'kem_id': self.kem_id,
            'kem_name': self.kem_name,
            'kem_id_hex': bytes_to_hex(self.kem_id_raw),
            'public_key': bytes_to_hex(self.public_key),
            'public_key_hex': bytes_to_hex(self.public_key_raw),
            'public_key_sha256': self.key_fingerprint,
            'cipher_suites': [cs.jsonify() for cs in self.cipher_suites],
            'cipher_suites_hex': bytes_to_hex(self.cipher_suites_raw),
            'max_name_len': self.max_name_len,
            'max_name_len_hex': bytes_to_hex(self.max_name_len_raw),
            'public_name': self.public_name,
            'public_name_hex': bytes_to_hex(self.public_name_raw),
            'contents_hex': bytes_to_hex(self.contents),
        }


@dataclass(frozen=True)
class ConfigList:
    list_length_raw: bytes|None = None
    entries: tuple[ConfigEntry, ...] = ()

    @property
    def list_length(self) -> int|None:
        if self.list_length_raw is None:
            return None
        return int.from_bytes(self.list_length_raw, 'big')

    def __len__(self) -> int:
        return len(self.entries)

    def jsonify(self) -> Json:
        return {
            'list_length': self.list_length,
            'list_length_hex': (None if self.list_length_raw is None
                                else bytes_to_hex(self.list_length_raw)),
            'configs': [entry.jsonify() for entry in self.entries],
        }
