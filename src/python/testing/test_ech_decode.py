import base64
import json

import pytest

from echinspect import decode_ech, decode_ech_bytes, DecodeSuccess, DecodeFailure
from echinspect.ech_common import Base64DecodeError
from echinspect import ech_decode
from echinspect.ech_decode import decode_b64
from echinspect.ech_scan import ParseAttempt

from ech_builders import build_contents, build_entry, build_list, X25519_KEY


def b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode('ascii')

def b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode('ascii').rstrip('=')


class TestDecodeEch:
    def test_success(self, config_list: bytes, config_list_b64: str) -> None:
        result = decode_ech(config_list_b64)
        assert isinstance(result, DecodeSuccess)
        assert result.ok
        assert result.offset_used == 0
        assert result.raw == config_list
        (entry,) = result.config_list.entries
        assert entry.public_key == X25519_KEY
        assert entry.public_name == 'cloudflare-ech.com'

    def test_messy_input(self, config_list: bytes) -> None:
        text = '  "' + b64url(config_list)[:20] + '\n' + b64url(config_list)[20:] + '"\t'
        result = decode_ech(text)
        assert isinstance(result, DecodeSuccess)
        assert result.raw == config_list

    def test_prefix_changes_only_list_length(self, entry: bytes, config_list: bytes) -> None:
        bare = decode_ech(b64(entry))
        prefixed = decode_ech(b64(config_list))
        assert isinstance(bare, DecodeSuccess) and isinstance(prefixed, DecodeSuccess)
        assert bare.config_list.entries == prefixed.config_list.entries
        assert bare.config_list.list_length_raw is None
        assert prefixed.config_list.list_length_raw == config_list[:2]

    def test_recovered_offset(self, config_list: bytes) -> None:
        result = decode_ech(b64(b'\x01\x02\x03' + config_list))
        assert isinstance(result, DecodeSuccess)
        assert result.offset_used == 3
        assert result.config_list.entries[0].public_name == 'cloudflare-ech.com'

    def test_bad_base64(self) -> None:
        result = decode_ech('not*base64')
        assert isinstance(result, DecodeFailure)
        assert not result.ok
        assert result.raw is None
        assert result.message.startswith('Base64 decoding failed: ')

    def test_empty_input(self) -> None:
        result = decode_ech('')
        assert isinstance(result, DecodeFailure)
        assert result.message == 'No valid ECH config found'
        assert result.raw == b''

    def test_parse_failure_keeps_bytes(self) -> None:
        raw = build_entry(version=0xfe0a)
        result = decode_ech(b64(raw))
        assert isinstance(result, DecodeFailure)
        assert result.message == 'Unknown ECH version: 0xFE0A at offset 0'
        assert result.raw == raw

    @pytest.mark.parametrize('cut', [1, 2, 10, 30])
    def test_truncation_never_yields_short_entry(self, config_list: bytes, cut: int) -> None:
        result = decode_ech_bytes(config_list[:-cut])
        assert isinstance(result, DecodeFailure)
        assert result.raw == config_list[:-cut]

    def test_truncated_name_in_entry(self) -> None:
        contents = build_contents()[:-1]
        result = decode_ech_bytes(build_entry(contents))
        assert isinstance(result, DecodeFailure)
        assert result.message.startswith('Buffer overflow: need 18 bytes')

    def test_jsonify_success(self, config_list_b64: str) -> None:
        js = decode_ech(config_list_b64).jsonify()
        json.dumps(js)
        assert js['ok'] is True
        assert js['offset_used'] == 0
        assert js['list_length'] == 67
        assert js['list_length_hex'] == '00 43'
        (cfg,) = js['configs']
        assert cfg['version_name'] == 'Draft-13'
        assert cfg['version_hex'] == 'FE 0D'
        assert cfg['kem_id_hex'] == '00 20'
        assert cfg['cipher_suites'] == [
            {'id': 1, 'name': 'AES_128_GCM_SHA256'},
            {'id': 3, 'name': 'CHACHA20_POLY1305_SHA256'},
        ]
        assert cfg['cipher_suites_hex'] == '00 04 00 01 00 03'

    def test_jsonify_failure(self) -> None:
        js = decode_ech('AAA').jsonify()
        assert js == {'ok': False, 'error': 'No valid ECH config found', 'raw_hex': '00 00'}


def test_decode_b64_raises() -> None:
    with pytest.raises(Base64DecodeError) as info:
        decode_b64('@@@@')
    assert str(info.value).startswith('Base64 decoding failed')

def test_attempt_without_list_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ech_decode, 'scan', lambda raw: ParseAttempt(offset=2))
    with pytest.raises(ValueError, match='no config list at offset 2'):
        decode_ech_bytes(b'\x00\x00')
