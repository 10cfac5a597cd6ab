import random
from collections import Counter

import pytest

from wordle_duel.config.game_settings import WORD_LIST
from wordle_duel.services.game_service import (
    evaluate_guess, is_well_formed_guess, is_winning_evaluation
)

C, P, A = 'correct', 'present', 'absent'


@pytest.mark.parametrize('target, guess, expected', [
    ('DREAM', 'ABIDE', [P, A, A, P, P]),
    ('ABBEY', 'BABES', [P, P, C, C, A]),
    ('ABBEY', 'KEBAB', [A, P, C, P, P]),
    ('THOSE', 'GEESE', [A, A, A, C, C]),
    ('LLAMA', 'ALLAY', [P, C, P, P, A]),
    ('ROBIN', 'OOOOO', [A, C, A, A, A]),
    ('CRANE', 'SLATE', [A, A, C, A, C]),
])
def test_evaluate_guess_examples(target, guess, expected):
    assert evaluate_guess(guess, target) == expected


def test_guessing_the_target_is_all_correct():
    for word in WORD_LIST:
        assert evaluate_guess(word, word) == [C] * 5


def test_repeated_letters_never_over_credited():
    rng = random.Random(1234)
    for _ in range(2000):
        target = rng.choice(WORD_LIST)
        guess = rng.choice(WORD_LIST)
        evaluation = evaluate_guess(guess, target)

        assert len(evaluation) == 5
        credited = Counter(
            letter for letter, status in zip(guess, evaluation) if status != A
        )
        target_counts = Counter(target)
        for letter, count in credited.items():
            assert count <= target_counts[letter]


def test_correct_positions_match_exactly():
    rng = random.Random(42)
    for _ in range(500):
        target = rng.choice(WORD_LIST)
        guess = rng.choice(WORD_LIST)
        evaluation = evaluate_guess(guess, target)
        for i, status in enumerate(evaluation):
            assert (status == C) == (guess[i] == target[i])


def test_is_winning_evaluation():
    assert is_winning_evaluation([C] * 5)
    assert not is_winning_evaluation([C, C, C, C, P])
    assert not is_winning_evaluation([])


@pytest.mark.parametrize('guess, ok', [
    ('CRANE', True),
    ('crane', False),
    ('CRAN', False),
    ('CRANES', False),
    ('CR4NE', False),
    ('CRÂNE', False),
    (12345, False),
    (None, False),
])
def test_is_well_formed_guess(guess, ok):
    assert is_well_formed_guess(guess) is ok
