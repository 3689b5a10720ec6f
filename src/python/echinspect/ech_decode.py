"""Top-level decoding: base64 text in, DecodeResult out. Never raises EchError."""

from .ech_common import *
from .ech_config import ConfigList, Json
from .ech_scan import ParseAttempt, scan
from .util import b64dec, bytes_to_hex


@dataclass(frozen=True)
class DecodeSuccess:
    config_list: ConfigList
    offset_used: int
    raw: bytes

    @property
    def ok(self) -> bool:
        return True

    def jsonify(self) -> Json:
        return {
            'ok': True,
            'offset_used': self.offset_used,
            'raw_hex': bytes_to_hex(self.raw),
            **self.config_list.jsonify(),
        }


@dataclass(frozen=True)
class DecodeFailure:
    message: str
    raw: bytes|None = None

    @property
    def ok(self) -> bool:
        return False

    def jsonify(self) -> Json:
        return {
            'ok': False,
            'error': self.message,
            'raw_hex': None if self.raw is None else bytes_to_hex(self.raw),
        }


type DecodeResult = DecodeSuccess | DecodeFailure


def decode_b64(text: str) -> bytes:
    try:
        return b64dec(text)
    except ValueError as e:
        raise Base64DecodeError(str(e)) from e


def decode_ech_bytes(raw: bytes) -> DecodeResult:
    try:
        attempt = scan(raw)
    except NoConfigFound as e:
        logger.info(f'ECH decode failed: {e}')
        return DecodeFailure(message=str(e), raw=raw)
    match attempt:
        case ParseAttempt(offset=offset, config_list=ConfigList() as config_list):
            return DecodeSuccess(config_list=config_list, offset_used=offset, raw=raw)
        case _:
            raise ValueError(f"scan accepted an attempt with no config list at offset {attempt.offset}")


def decode_ech(text: str) -> DecodeResult:
    """Decodes an `ech` SvcParam value as found in an HTTPS record or pasted by hand."""
    try:
        raw = decode_b64(text)
    except Base64DecodeError as e:
        logger.info(str(e))
        return DecodeFailure(message=str(e))
    return decode_ech_bytes(raw)
