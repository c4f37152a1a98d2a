import time
from datetime import date, datetime, timedelta, timezone
from typing import Sequence

MS_PER_DAY = 86_400_000
DEFAULT_EPOCH = date(2025, 1, 1)

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def current_time_ms() -> int:
    return time.time_ns() // 1_000_000


def epoch_ms(epoch: date = DEFAULT_EPOCH) -> int:
    """UTC midnight of ``epoch`` as Unix milliseconds."""
    midnight = datetime(epoch.year, epoch.month, epoch.day, tzinfo=timezone.utc)
    return (midnight - _UNIX_EPOCH) // timedelta(milliseconds=1)


def current_game_index(now_ms: int, epoch: date = DEFAULT_EPOCH) -> int:
    """Whole UTC days elapsed since ``epoch``.

    Floor division, so instants before the epoch give negative indexes
    rather than rounding toward day zero.
    """
    return (now_ms - epoch_ms(epoch)) // MS_PER_DAY


def date_key(now_ms: int) -> str:
    """UTC calendar date as ``Y-M-D`` without zero padding (``2025-1-1``)."""
    moment = _UNIX_EPOCH + timedelta(milliseconds=now_ms)
    return f"{moment.year}-{moment.month}-{moment.day}"


def date_hash(text: str) -> int:
    """``hash = hash * 31 + code`` with 32-bit signed wraparound.

    The masking reproduces two's-complement overflow exactly; the word
    chosen for every date depends on it.
    """
    value = 0
    for ch in text:
        value = (value * 31 + ord(ch)) & 0xFFFFFFFF
    if value & 0x80000000:
        value -= 1 << 32
    return value


def daily_answer(now_ms: int, words: Sequence[str]) -> str:
    if not words:
        raise ValueError('word list is empty')
    return words[abs(date_hash(date_key(now_ms))) % len(words)]
