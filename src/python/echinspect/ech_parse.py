"""Structural parsing of ECHConfigList bytes.

    ECHConfigList  = [u16 list length] ECHConfig*        (prefix optional)
    ECHConfig      = u16 version, u16 length, contents[length]
    contents       = u8 config_id, u16 kem_id, u16-prefixed public_key,
                     u16-prefixed cipher_suites (u16 each), u8 max_name_len,
                     u8-prefixed public_name

Parse failures raise the EchError subclasses from ech_common.
"""

from .ech_common import *
from .ech_config import CipherSuite, ConfigEntry, ConfigList
from .ech_tables import is_known_version, VERSION_HIGH_BYTE
from .reader import ByteReader

# version + length
ENTRY_HEADER_SIZE = 4


def _read_u8(rdr: ByteReader) -> tuple[int, bytes]:
    """Value and its encoding."""
    raw = rdr.peek(1)
    return rdr.read_u8(), raw

def _read_u16(rdr: ByteReader) -> tuple[int, bytes]:
    raw = rdr.peek(2)
    return rdr.read_u16(), raw


def parse_entry_contents(
    contents: bytes,
    version: int,
    version_raw: bytes,
    config_length_raw: bytes,
) -> ConfigEntry:
    """Parses the contents of one entry, whose header the caller already read.

    Bytes left over after public_name are ignored.
    """
    rdr = ByteReader.from_raw(contents)

    config_id, config_id_raw = _read_u8(rdr)
    kem_id, kem_id_raw = _read_u16(rdr)

    pk_len, pk_len_raw = _read_u16(rdr)
    if pk_len > rdr.remaining():
        raise InvalidPublicKeyLength(pk_len)
    public_key = rdr.read(pk_len)

    cs_len, cs_len_raw = _read_u16(rdr)
    if cs_len % 2 != 0 or cs_len > rdr.remaining():
        raise InvalidCipherSuiteLength(cs_len)
    cs_bytes = rdr.peek(cs_len)
    cipher_suites = tuple(CipherSuite(rdr.read_u16()) for _ in range(cs_len // 2))

    max_name_len, max_name_len_raw = _read_u8(rdr)

    name_len, name_len_raw = _read_u8(rdr)
    name_bytes = rdr.read(name_len)
    public_name = name_bytes.decode('utf-8', errors='replace')

    if rdr.remaining():
        logger.debug(f'ignoring {rdr.remaining()} trailing bytes in config {config_id}')

    return ConfigEntry(
        version           = version,
        version_raw       = version_raw,
        config_length     = len(contents),
        config_length_raw = config_length_raw,
        config_id         = config_id,
        config_id_raw     = config_id_raw,
        kem_id            = kem_id,
        kem_id_raw        = kem_id_raw,
        public_key        = public_key,
        public_key_raw    = pk_len_raw + public_key,
        cipher_suites     = cipher_suites,
        cipher_suites_raw = cs_len_raw + cs_bytes,
        max_name_len      = max_name_len,
        max_name_len_raw  = max_name_len_raw,
        public_name       = public_name,
        public_name_raw   = name_len_raw + name_bytes,
        contents          = contents,
    )


def has_list_prefix(rdr: ByteReader) -> bool:
    """Whether the next two bytes look like a list length rather than a version.

    All known versions are 0xFExx, so anything else is taken as a length.
    Does not advance the reader.
    """
    return rdr.remaining() >= 2 and rdr.peek(2)[0] != VERSION_HIGH_BYTE


def parse_config_list(raw: bytes, start: int = 0) -> ConfigList:
    """Parses every ECHConfig found from start to the end of raw.

    Stops quietly once fewer than ENTRY_HEADER_SIZE bytes are left, so the
    result may have no entries at all.
    """
    rdr = ByteReader.from_raw(raw, start)

    list_length_raw = None
    if has_list_prefix(rdr):
        list_length_raw = rdr.read(2)

    entries: list[ConfigEntry] = []
    while rdr.remaining() >= ENTRY_HEADER_SIZE:
        version_offset = rdr.offset
        version, version_raw = _read_u16(rdr)
        if not is_known_version(version):
            raise UnknownVersion(version=version, offset=version_offset)

        length, length_raw = _read_u16(rdr)
        if length > rdr.remaining():
            raise ConfigLengthExceedsBuffer(length=length, available=rdr.remaining())

        entries.append(parse_entry_contents(
            contents          = rdr.read(length),
            version           = version,
            version_raw       = version_raw,
            config_length_raw = length_raw,
        ))

    return ConfigList(list_length_raw=list_length_raw, entries=tuple(entries))
