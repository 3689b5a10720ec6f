"""Plain-text rendering of decode results for the terminal."""

from .ech_config import ConfigEntry, ConfigList
from .ech_decode import DecodeResult, DecodeSuccess, DecodeFailure
from .doh_client import HttpsRecord
from .util import bytes_to_hex, hex_dump, to_hex

INDENT = '    '


def _field(label: str, value: str, raw: bytes|None = None) -> list[str]:
    lines = [f"{label + ':':<18}{value}"]
    if raw is not None:
        lines.append(f"{'':<18}hex: {bytes_to_hex(raw)}")
    return lines


def render_entry(entry: ConfigEntry) -> list[str]:
    lines: list[str] = []
    lines += _field('Version', f"{entry.version_name} (0x{to_hex(entry.version, 4)})", entry.version_raw)
    lines += _field('Config Length', f"{entry.config_length} bytes", entry.config_length_raw)
    lines += _field('Config ID', str(entry.config_id), entry.config_id_raw)
    lines += _field('KEM', f"{entry.kem_name} (0x{to_hex(entry.kem_id, 4)})", entry.kem_id_raw)
    lines += _field('Public Key', f"{len(entry.public_key)} bytes, sha256 {entry.key_fingerprint}",
                    entry.public_key_raw)
    suites = ', '.join(f"{cs.name} (0x{to_hex(cs.id, 4)})" for cs in entry.cipher_suites)
    lines += _field('Cipher Suites', suites or '(none)', entry.cipher_suites_raw)
    lines += _field('Max Name Length', str(entry.max_name_len), entry.max_name_len_raw)
    lines += _field('Public Name', entry.public_name or '(empty)', entry.public_name_raw)
    return lines


def render_list(config_list: ConfigList) -> list[str]:
    lines: list[str] = []
    if config_list.list_length_raw is not None:
        lines += _field('List Length', f"{config_list.list_length} bytes", config_list.list_length_raw)
    for idx, entry in enumerate(config_list.entries):
        lines.append(f"ECH Config #{idx + 1}")
        lines += [INDENT + line for line in render_entry(entry)]
    return lines


def render_result(result: DecodeResult) -> str:
    match result:
        case DecodeSuccess() as ok:
            lines = []
            if ok.offset_used > 0:
                lines.append(f"Non-standard header detected; decoded at offset {ok.offset_used}.")
            lines += render_list(ok.config_list)
            return '\n'.join(lines)
        case DecodeFailure() as fail:
            lines = [f"ECH decode error: {fail.message}"]
            if fail.raw is not None:
                lines.append(f"Raw bytes ({len(fail.raw)}):")
                lines.append(hex_dump(fail.raw))
            return '\n'.join(lines)
    raise TypeError(f"not a decode result: {result!r}")


def render_params(record: HttpsRecord) -> str:
    lines = [f"HTTPS record for {record.domain}:", INDENT + record.data]
    others = {k: v for k, v in record.params.items() if k != 'ech'}
    if others:
        lines.append('SvcParams:')
        lines += [f"{INDENT}{key} = {value}" for key, value in others.items()]
    return '\n'.join(lines)
