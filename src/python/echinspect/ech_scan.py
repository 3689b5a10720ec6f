"""Finding where an ECHConfigList actually starts.

ECH values seen in the wild come both with and without the outer u16 list
length, sometimes behind other stray bytes. Rather than guess, every position
that could start a list is tried in a fixed order and the first one that
parses into at least one config wins. This is a first-match search, not a
best-fit one: later candidates are never looked at once one succeeds.
"""

from collections.abc import Iterator

from .ech_common import *
from .ech_config import ConfigList
from .ech_parse import parse_config_list
from .ech_tables import VERSION_HIGH_BYTE, SCAN_VERSION_LOW_BYTES

NO_CONFIG_MESSAGE = 'No valid ECH config found'


@dataclass(frozen=True)
class ParseAttempt:
    """Outcome of parsing from one candidate offset: a list or an error, never both."""
    offset: int
    config_list: ConfigList|None = None
    error: EchError|None = None

    @property
    def accepted(self) -> bool:
        return self.error is None and self.config_list is not None and len(self.config_list) > 0


def candidate_offsets(raw: bytes) -> list[int]:
    """Offset 0, then for each version-looking pair at i: i-2 (outer length) and i."""
    offsets = [0]
    for i in range(len(raw) - 1):
        if raw[i] == VERSION_HIGH_BYTE and raw[i+1] in SCAN_VERSION_LOW_BYTES:
            if i >= 2:
                offsets.append(i - 2)
            offsets.append(i)
    return list(dict.fromkeys(offsets))


def try_parse(raw: bytes, offset: int) -> ParseAttempt:
    try:
        config_list = parse_config_list(raw, offset)
    except EchError as e:
        logger.debug(f'offset {offset}: {e}')
        return ParseAttempt(offset=offset, error=e)
    logger.debug(f'offset {offset}: {len(config_list)} configs')
    return ParseAttempt(offset=offset, config_list=config_list)


def attempts(raw: bytes) -> Iterator[ParseAttempt]:
    """Lazily yields one attempt per candidate offset, in candidate order."""
    for offset in candidate_offsets(raw):
        yield try_parse(raw, offset)


def scan(raw: bytes) -> ParseAttempt:
    """Returns the first accepted attempt.

    Raises NoConfigFound with the message of the last failed attempt, or a
    generic message if no attempt failed outright.
    """
    last_error: EchError|None = None
    for attempt in attempts(raw):
        if attempt.accepted:
            logger.info(f'decoded {len(attempt.config_list)} ECH configs at offset {attempt.offset}')
            return attempt
        if attempt.error is not None:
            last_error = attempt.error
    if last_error is None:
        raise NoConfigFound(NO_CONFIG_MESSAGE)
    raise NoConfigFound(str(last_error)) from last_error
