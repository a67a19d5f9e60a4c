import pytest

from scratchcards.card import Card, points_for


@pytest.mark.parametrize(
    "match_count, expected",
    [(0, 0), (1, 1), (2, 2), (3, 4), (4, 8), (10, 512)],
)
def test_points_double_per_match(match_count, expected):
    assert points_for(match_count) == expected


def test_negative_match_count_scores_nothing():
    assert points_for(-1) == 0


def test_match_count_is_set_based():
    card = Card(index=0, winning=frozenset([1, 1, 2]), drawn=(1, 1, 3))
    assert card.match_count == 1
    assert card.matches == frozenset([1])
    assert card.points == 1


def test_no_matches():
    card = Card(index=3, winning=frozenset([5, 6]), drawn=(7, 8, 9))
    assert card.match_count == 0
    assert card.points == 0


def test_concrete_card():
    card = Card(index=0, winning=frozenset([1, 2, 3]), drawn=(1, 2, 99))
    assert card.match_count == 2
    assert card.points == 2
