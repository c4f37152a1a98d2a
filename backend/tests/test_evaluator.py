from collections import Counter

import pytest

from dailyword.services.puzzle import ABSENT, CORRECT, PRESENT, evaluate
from dailyword.words import load_words


def test_exact_match_is_all_correct():
    for word in load_words()[:50]:
        assert evaluate(word, word) == [CORRECT] * 5


def test_no_shared_letters():
    assert evaluate('fifty', 'crane') == [ABSENT] * 5


def test_speed_against_erase_matches_each_e_once():
    # "erase" has two e's, so both guessed e's find a partner
    assert evaluate('speed', 'erase') == [PRESENT, ABSENT, PRESENT, PRESENT, ABSENT]


def test_repeated_guess_letter_against_single_answer_letter():
    assert evaluate('speed', 'crane') == [ABSENT, ABSENT, PRESENT, ABSENT, ABSENT]


def test_correct_position_consumes_letter_before_present_pass():
    # The trailing e is an exact hit; the earlier e must not also claim it
    assert evaluate('eerie', 'crane') == [ABSENT, ABSENT, PRESENT, ABSENT, CORRECT]
    assert evaluate('level', 'hotel') == [ABSENT, ABSENT, ABSENT, CORRECT, CORRECT]


def test_each_repeated_letter_needs_its_own_partner():
    assert evaluate('allow', 'local') == [PRESENT, PRESENT, PRESENT, PRESENT, ABSENT]
    assert evaluate('allow', 'clean') == [PRESENT, CORRECT, ABSENT, ABSENT, ABSENT]


@pytest.mark.parametrize('guess, answer', [
    ('speed', 'erase'),
    ('eerie', 'sheep'),
    ('llama', 'hello'),
    ('geese', 'level'),
    ('abbey', 'bobby'),
    ('tatty', 'treat'),
])
def test_letter_tags_never_exceed_answer_multiplicity(guess, answer):
    result = evaluate(guess, answer)
    matched = Counter(g for g, tag in zip(guess, result) if tag != ABSENT)
    available = Counter(answer)
    for letter, count in matched.items():
        assert count <= available[letter]
    correct_positions = sum(1 for g, a in zip(guess, answer) if g == a)
    assert result.count(CORRECT) == correct_positions


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        evaluate('four', 'crane')
