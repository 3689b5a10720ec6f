import base64

from echinspect import decode_ech, decode_ech_bytes
from echinspect.doh_client import HttpsRecord
from echinspect.render import render_result, render_params

from ech_builders import build_contents, build_entry, build_list


def test_success_fields(config_list_b64: str) -> None:
    out = render_result(decode_ech(config_list_b64))
    assert 'Non-standard header' not in out
    assert 'List Length:      67 bytes' in out
    assert 'ECH Config #1' in out
    assert 'Version:          Draft-13 (0xFE0D)' in out
    assert 'hex: FE 0D' in out
    assert 'Config Length:    63 bytes' in out
    assert 'KEM:              DHKEM(X25519, HKDF-SHA256) (0x0020)' in out
    assert 'AES_128_GCM_SHA256 (0x0001), CHACHA20_POLY1305_SHA256 (0x0003)' in out
    assert 'Public Name:      cloudflare-ech.com' in out

def test_public_key_raw_hex() -> None:
    raw = build_entry(build_contents(public_key=b'\xab\xcd'))
    out = render_result(decode_ech_bytes(raw))
    assert 'hex: 00 02 AB CD' in out
    assert 'Public Key:       2 bytes, sha256 ' in out

def test_offset_notice(config_list: bytes) -> None:
    out = render_result(decode_ech_bytes(b'\x01\x02\x03' + config_list))
    assert out.splitlines()[0] == 'Non-standard header detected; decoded at offset 3.'

def test_unknown_and_empty_fields() -> None:
    raw = build_entry(build_contents(kem_id=0x0099, cipher_suites=(), public_name=b''))
    out = render_result(decode_ech_bytes(raw))
    assert 'KEM:              Unknown (0x0099)' in out
    assert 'Cipher Suites:    (none)' in out
    assert 'Public Name:      (empty)' in out

def test_several_configs_numbered() -> None:
    raw = build_list(build_entry(), build_entry(version=0xfe0c))
    out = render_result(decode_ech_bytes(raw))
    assert 'ECH Config #2' in out
    assert 'Draft-12 (0xFE0C)' in out

def test_failure_with_dump() -> None:
    raw = build_entry(version=0xfe0a)
    out = render_result(decode_ech(base64.b64encode(raw).decode()))
    lines = out.splitlines()
    assert lines[0] == 'ECH decode error: Unknown ECH version: 0xFE0A at offset 0'
    assert lines[1] == f'Raw bytes ({len(raw)}):'
    assert lines[2].startswith('0000: FE 0A 00 3F 07 00 20')

def test_failure_without_bytes() -> None:
    out = render_result(decode_ech('****'))
    assert out.startswith('ECH decode error: Base64 decoding failed')
    assert 'Raw bytes' not in out

def test_render_params() -> None:
    record = HttpsRecord(
        domain = 'example.com',
        data = '1 . alpn="h3" ech=AAAA',
        params = {'alpn': 'h3', 'ech': 'AAAA'},
    )
    out = render_params(record)
    assert out.splitlines()[0] == 'HTTPS record for example.com:'
    assert '    alpn = h3' in out
    assert 'ech =' not in out
