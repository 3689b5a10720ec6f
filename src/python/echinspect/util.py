"""Various small utility or helper stuff not ECH specific."""

import base64
import re

def to_hex(num: int, width: int = 2) -> str:
    return f"{num:0{width}X}"

def bytes_to_hex(raw: bytes) -> str:
    """Uppercase two-digit hex, one space between bytes."""
    return ' '.join(to_hex(b) for b in raw)

def hex_dump(raw: bytes, width: int = 16) -> str:
    """Classic offset / hex / ascii dump, one line per `width` bytes."""
    lines = []
    for start in range(0, len(raw), width):
        chunk = raw[start:start+width]
        hexpart = bytes_to_hex(chunk).ljust(3*width - 1)
        text = ''.join(chr(b) if 32 <= b <= 126 else '.' for b in chunk)
        lines.append(f"{to_hex(start, 4)}: {hexpart}  |{text}|")
    return '\n'.join(lines)


_B64_JUNK = re.compile(r'''[\s"']''')

def normalize_b64(text: str) -> str:
    """Strip whitespace and quotes, map the URL-safe alphabet, re-pad."""
    clean = _B64_JUNK.sub('', text)
    clean = clean.replace('-', '+').replace('_', '/')
    return clean + '=' * (-len(clean) % 4)

def b64dec(b64_str: str) -> bytes:
    """Lenient front end, strict decoder: raises ValueError (binascii.Error) on bad input."""
    return base64.b64decode(normalize_b64(b64_str), validate=True)
