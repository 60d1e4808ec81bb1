"""Reading-time estimation for post bodies."""

import math
import re
from typing import NamedTuple

DEFAULT_WORDS_PER_MINUTE = 200

# CJK ideographs, kana and hangul are read per character, not per word
_CJK_RE = re.compile(r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uac00-\ud7af\uf900-\ufaff]")
_WORD_RE = re.compile(r"\S+")


class ReadingTime(NamedTuple):
    text: str
    minutes: float
    words: int


def count_words(text: str) -> int:
    """Count words in *text*. Each CJK character counts as one word."""
    cjk_chars = len(_CJK_RE.findall(text))
    remainder = _CJK_RE.sub(" ", text)
    return cjk_chars + len(_WORD_RE.findall(remainder))


def estimate_reading_time(
    text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> ReadingTime:
    """Estimate how long *text* takes to read.

    ``text`` on the result is rounded up to whole minutes, e.g. ``"3 min read"``.
    """
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")

    words = count_words(text or "")
    minutes = words / words_per_minute
    return ReadingTime(
        text=f"{math.ceil(minutes)} min read", minutes=minutes, words=words
    )
