import itertools
import random

import pytest

from swissreport.exceptions import InvalidPairingException
from swissreport.models import Pairing, Player, Tournament
from swissreport.pairing import (
    higher_and_lower,
    publication_key,
    publication_player_order,
    sort_pairings,
)


def _build_tournament(scores, accelerations=None):
    """Players with the given unaccelerated scores, ranked in list order."""
    accelerations = accelerations or [0.0] * len(scores)
    players = [
        Player(
            id=index,
            score_without_acceleration=score,
            rank_index=index,
            acceleration=acceleration,
        )
        for index, (score, acceleration) in enumerate(zip(scores, accelerations))
    ]
    return Tournament(players, played_rounds=3)


def _random_round(seed, num_players=21):
    rng = random.Random(seed)
    scores = sorted(
        (rng.randrange(0, 11) / 2 for _ in range(num_players)), reverse=True
    )
    tournament = _build_tournament(scores)
    indices = list(range(num_players))
    rng.shuffle(indices)
    pairings = [
        Pairing(indices[i], indices[i + 1]) for i in range(0, num_players - 1, 2)
    ]
    if num_players % 2:
        pairings.append(Pairing.bye(indices[-1]))
    return tournament, pairings


def test_rule_precedence_example():
    # 0: bye on 6 points, 1: 5 points, 2 and 3: 4 points, 4: 3 points
    tournament = _build_tournament([6.0, 5.0, 4.0, 4.0, 3.0])
    five_vs_three = Pairing(1, 4)
    four_vs_four = Pairing(2, 3)
    bye = Pairing.bye(0)

    ordered = sort_pairings([bye, five_vs_three, four_vs_four], tournament)

    assert ordered == [four_vs_four, five_vs_three, bye]


def test_byes_sort_last_regardless_of_score():
    tournament = _build_tournament([10.0, 1.0, 0.5, 0.0, 0.0])
    bye = Pairing.bye(0)

    ordered = sort_pairings([bye, Pairing(1, 2), Pairing(3, 4)], tournament)

    assert ordered[-1] == bye


def test_lower_player_score_breaks_ties():
    tournament = _build_tournament([3.0, 3.0, 2.5, 1.0])
    strong_board = Pairing(0, 2)
    weak_board = Pairing(3, 1)

    ordered = sort_pairings([strong_board, weak_board], tournament)

    assert ordered == [weak_board, strong_board]


def test_rank_index_breaks_equal_scores():
    tournament = _build_tournament([2.0, 2.0, 2.0, 2.0])

    ordered = sort_pairings([Pairing(3, 1), Pairing(2, 0)], tournament)

    assert ordered == [Pairing(2, 0), Pairing(3, 1)]


def test_acceleration_does_not_change_order():
    plain = _build_tournament([2.0, 1.0, 1.0, 0.0])
    accelerated = _build_tournament([2.0, 1.0, 1.0, 0.0], [0.0, 0.0, 1.0, 3.0])
    pairings = [Pairing(0, 3), Pairing(1, 2)]

    assert sort_pairings(pairings, plain) == sort_pairings(pairings, accelerated)


def test_orientation_does_not_change_position():
    tournament, pairings = _random_round(seed=7)
    ordered = sort_pairings(pairings, tournament)

    for position, pairing in enumerate(ordered):
        swapped = Pairing(pairing.black, pairing.white)
        others = [p for p in pairings if p != pairing] + [swapped]
        assert sort_pairings(others, tournament)[position] == swapped
        assert publication_key(swapped, tournament) == publication_key(
            pairing, tournament
        )


@pytest.mark.parametrize("seed", [1, 2, 3, 42])
def test_keys_form_a_strict_total_order(seed):
    tournament, pairings = _random_round(seed)
    keys = {pairing: publication_key(pairing, tournament) for pairing in pairings}

    for first, second in itertools.combinations(pairings, 2):
        assert (keys[first] < keys[second]) != (keys[second] < keys[first])

    ordered = sort_pairings(pairings, tournament)
    ordered_keys = [keys[pairing] for pairing in ordered]
    assert all(a < b for a, b in zip(ordered_keys, ordered_keys[1:]))


@pytest.mark.parametrize("seed", [5, 11])
def test_sorting_is_idempotent(seed):
    tournament, pairings = _random_round(seed)
    ordered = sort_pairings(pairings, tournament)

    assert sort_pairings(ordered, tournament) == ordered
    assert sort_pairings(reversed(ordered), tournament) == ordered


def test_input_is_not_modified():
    tournament = _build_tournament([2.0, 1.0, 1.0, 0.0])
    pairings = [Pairing(0, 3), Pairing(1, 2)]

    sort_pairings(pairings, tournament)

    assert pairings == [Pairing(0, 3), Pairing(1, 2)]


def test_higher_and_lower_resolution():
    tournament = _build_tournament([1.0, 1.0, 2.0])

    higher, lower = higher_and_lower(Pairing(0, 2), tournament)
    assert (higher.id, lower.id) == (2, 0)

    higher, lower = higher_and_lower(Pairing(1, 0), tournament)
    assert (higher.id, lower.id) == (0, 1)

    higher, lower = higher_and_lower(Pairing.bye(1), tournament)
    assert higher is lower


def test_custom_standings_comparator():
    tournament = _build_tournament([1.0, 1.0, 3.0, 0.0])

    def by_rank_only(player0, player1):
        return player0.rank_index > player1.rank_index

    higher, lower = higher_and_lower(Pairing(2, 0), tournament, by_rank_only)
    assert (higher.id, lower.id) == (0, 2)

    # Higher players are 0 (score 1.0) and 1 (score 1.0); lower scores 3.0 vs 0.0
    ordered = sort_pairings([Pairing(0, 2), Pairing(1, 3)], tournament, by_rank_only)
    assert ordered == [Pairing(1, 3), Pairing(0, 2)]


def test_unknown_player_index_is_rejected():
    tournament = _build_tournament([1.0, 0.0])

    with pytest.raises(InvalidPairingException):
        sort_pairings([Pairing(0, 5)], tournament)


def test_player_paired_twice_is_rejected():
    tournament = _build_tournament([1.0, 1.0, 0.0])

    with pytest.raises(InvalidPairingException):
        sort_pairings([Pairing(0, 1), Pairing.bye(1)], tournament)


def test_publication_player_order():
    tournament = _build_tournament([2.0, 1.0, 1.0, 0.0, 0.0])
    ordered = [Pairing(3, 2), Pairing(1, 0), Pairing.bye(4)]

    players = publication_player_order(ordered, tournament)

    assert [player.id for player in players] == [3, 2, 1, 0, 4]
