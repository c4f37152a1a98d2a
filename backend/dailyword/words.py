import os
from typing import FrozenSet, Tuple

DEFAULT_WORDS_FILE = os.path.join(os.path.dirname(__file__), 'data', 'words.txt')
WORD_LENGTH = 5


def load_words(path: str = DEFAULT_WORDS_FILE) -> Tuple[str, ...]:
    """Read the ordered answer list, one word per line.

    Order matters: the daily answer is picked by position, so the file is
    kept as-is apart from trimming and lowercasing.
    """
    with open(path, 'r', encoding='utf-8') as f:
        words = tuple(line.strip().lower() for line in f if line.strip())
    if not words:
        raise ValueError(f'No words found in {path}')
    bad = [w for w in words if len(w) != WORD_LENGTH or not (w.isascii() and w.isalpha())]
    if bad:
        raise ValueError(f'{path}: entries must be {WORD_LENGTH} ASCII letters, got {bad[:5]}')
    return words


def build_vocabulary(words) -> FrozenSet[str]:
    return frozenset(words)
