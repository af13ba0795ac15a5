import io

import pytest

from swissreport import get_info, publication_player_order, sort_pairings
from swissreport.exceptions import UnsupportedSwissSystemException
from swissreport.models import (
    Colour,
    Match,
    Pairing,
    Player,
    SwissSystem,
    Tournament,
    TournamentConfig,
)
from swissreport.systems import (
    BursteinInfo,
    SwissSystemInfo,
    TiebreakCalculator,
    supported_systems,
)


def _build_tournament(points_for_win=1.0):
    """Four players after two rounds.

    Round 1: 1-2 1-0, 3-4 draw. Round 2: 3-1 0-1, 2-4 1-0.
    """
    scale = points_for_win

    def game(opponent, colour, score):
        return Match(opponent=opponent, colour=colour, score=score * scale)

    players = [
        Player(
            id=0,
            score_without_acceleration=2.0 * scale,
            rank_index=0,
            matches=[game(1, Colour.WHITE, 1.0), game(2, Colour.BLACK, 1.0)],
        ),
        Player(
            id=1,
            score_without_acceleration=1.0 * scale,
            rank_index=1,
            matches=[game(0, Colour.BLACK, 0.0), game(3, Colour.WHITE, 1.0)],
        ),
        Player(
            id=2,
            score_without_acceleration=0.5 * scale,
            rank_index=2,
            matches=[game(3, Colour.WHITE, 0.5), game(0, Colour.WHITE, 0.0)],
        ),
        Player(
            id=3,
            score_without_acceleration=0.5 * scale,
            rank_index=3,
            matches=[game(2, Colour.BLACK, 0.5), game(1, Colour.BLACK, 0.0)],
        ),
    ]
    config = TournamentConfig(name="Club Open", points_for_win=points_for_win)
    return Tournament(players, played_rounds=2, config=config)


def test_burstein_is_registered():
    info = get_info(SwissSystem.BURSTEIN)

    assert isinstance(info, BursteinInfo)
    assert isinstance(info, SwissSystemInfo)
    assert get_info(SwissSystem.BURSTEIN) is info
    assert supported_systems() == frozenset({SwissSystem.BURSTEIN})


def test_unsupported_system_is_a_contract_violation():
    with pytest.raises(UnsupportedSwissSystemException):
        get_info(SwissSystem.DUTCH)


def test_burstein_headers():
    assert get_info(SwissSystem.BURSTEIN).specialty_headers() == ["SB", "Buch", "Med"]


def test_burstein_columns_align_with_headers():
    tournament = _build_tournament()
    info = get_info(SwissSystem.BURSTEIN)

    for player in tournament.players:
        assert len(info.specialty_columns(player, tournament)) == len(
            info.specialty_headers()
        )
    assert info.specialty_columns(tournament.players[0], tournament) == [
        "1.5",
        "1.5",
        "1.5",
    ]
    assert info.specialty_columns(tournament.players[2], tournament) == [
        "0.25",
        "2.5",
        "2.5",
    ]


def test_tiebreaks():
    tournament = _build_tournament()
    calculator = TiebreakCalculator(tournament)

    assert calculator.opponent_scores(tournament.players[1]) == [2.0, 0.5]
    assert calculator.calculate_player_tiebreaks(tournament.players[1]) == {
        "sb": 0.5,
        "buchholz": 2.5,
        "median": 2.5,
    }


def test_sonneborn_berger_scales_with_points_for_win():
    tournament = _build_tournament(points_for_win=3.0)
    calculator = TiebreakCalculator(tournament)

    # Opponents scored 0.5 and 2.0 wins; a draw and a loss
    assert calculator.sonneborn_berger(tournament.players[2]) == pytest.approx(0.75)


def test_median_buchholz_drops_both_ends():
    calculator = TiebreakCalculator(_build_tournament())

    assert calculator.median_buchholz([]) == 0.0
    assert calculator.median_buchholz([1.0, 3.0]) == 4.0
    assert calculator.median_buchholz([3.0, 1.0, 2.0, 0.5]) == 3.0


def test_unplayed_games_add_no_tiebreak():
    players = [
        Player(
            id=0,
            score_without_acceleration=1.0,
            matches=[Match(opponent=0, game_was_played=False, score=1.0)],
        ),
    ]
    calculator = TiebreakCalculator(Tournament(players, played_rounds=1))

    assert calculator.calculate_player_tiebreaks(players[0]) == {
        "sb": 0.0,
        "buchholz": 0.0,
        "median": 0.0,
    }


def test_round_report_end_to_end():
    tournament = _build_tournament()
    # Round 3 pairings as produced by the pairing engine
    pairings = [Pairing(1, 0), Pairing(3, 2)]

    ordered = sort_pairings(pairings, tournament)
    players = publication_player_order(ordered, tournament)
    stream = io.StringIO()
    get_info(tournament.config.swiss_system).write_checklist(
        stream, tournament, players
    )

    assert ordered == [Pairing(3, 2), Pairing(1, 0)]
    lines = stream.getvalue().split("\n")
    assert lines[1].split("\t")[:7] == ["ID", "Pts", "---", "Pref", "  SB", "Buch", "Med"]
    player_lines = [line for line in lines[2:] if line]
    assert [line.split("\t")[0] for line in player_lines] == [" 4", " 3", " 2", " 1"]
    assert stream.getvalue().endswith("\n\n\n")
