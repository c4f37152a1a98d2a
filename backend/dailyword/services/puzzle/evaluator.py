from typing import List

CORRECT = 'correct'
PRESENT = 'present'
ABSENT = 'absent'

_USED = None


def evaluate(guess: str, answer: str) -> List[str]:
    """Score ``guess`` against ``answer`` one tag per position.

    Exact matches are settled first and consume their answer letter. Each
    remaining guess letter is then matched against at most one unmatched copy
    of that letter in the answer, so a letter is never tagged more times than
    the answer holds it: ``speed`` vs ``erase`` marks both ``e``s present,
    ``speed`` vs ``crane`` only the first.
    """
    if len(guess) != len(answer):
        raise ValueError('guess and answer must be the same length')

    result = [ABSENT] * len(guess)
    remaining = list(answer)
    pending = list(guess)

    for i, letter in enumerate(guess):
        if letter == answer[i]:
            result[i] = CORRECT
            remaining[i] = _USED
            pending[i] = _USED

    for i, letter in enumerate(pending):
        if letter is _USED:
            continue
        if letter in remaining:
            result[i] = PRESENT
            remaining[remaining.index(letter)] = _USED

    return result
