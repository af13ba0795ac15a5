import pytest

from swissreport.exceptions import (
    InvalidConfigurationException,
    InvalidPlayerDataException,
    PlayerNotFoundException,
)
from swissreport.models import (
    Colour,
    Match,
    Pairing,
    Player,
    SwissSystem,
    Tournament,
    TournamentConfig,
)
from swissreport.utils import format_points


def test_colour_opposite():
    assert Colour.WHITE.opposite() is Colour.BLACK
    assert Colour.BLACK.opposite() is Colour.WHITE
    assert Colour.NONE.opposite() is Colour.NONE


def test_absolute_preference_must_be_strong():
    with pytest.raises(InvalidPlayerDataException):
        Player(
            id=0,
            colour_preference=Colour.WHITE,
            absolute_colour_preference=True,
        )


def test_no_preference_cannot_be_strong():
    with pytest.raises(InvalidPlayerDataException):
        Player(id=0, strong_colour_preference=True)


def test_negative_indices_are_rejected():
    with pytest.raises(InvalidPlayerDataException):
        Player(id=-1)
    with pytest.raises(InvalidPlayerDataException):
        Player(id=0, rank_index=-1)


def test_score_with_acceleration():
    player = Player(id=0, score_without_acceleration=2.5, acceleration=1.0)

    assert player.score_with_acceleration == 3.5
    assert player.score_without_acceleration == 2.5


def test_match_history_is_appended_in_round_order():
    player = Player(id=0)
    player.record_match(Match(opponent=1, colour=Colour.WHITE, score=1.0))
    player.record_match(Match(opponent=0, game_was_played=False, score=1.0))
    player.record_match(Match(opponent=2, colour=Colour.BLACK))

    assert [match.opponent for match in player.matches] == [1, 0, 2]
    assert [match.opponent for match in player.played_matches()] == [1, 2]


def test_pairing_bye():
    bye = Pairing.bye(3)

    assert bye.is_bye
    assert bye.players() == (3,)
    assert not Pairing(1, 2).is_bye
    assert Pairing(1, 2).players() == (1, 2)


def test_tournament_player_lookup():
    tournament = Tournament([Player(id=0), Player(id=1)], played_rounds=1)

    assert tournament.player(1) is tournament.players[1]
    with pytest.raises(PlayerNotFoundException):
        tournament.player(2)
    with pytest.raises(PlayerNotFoundException):
        tournament.player(-1)


def test_tournament_requires_index_stable_players():
    with pytest.raises(InvalidPlayerDataException):
        Tournament([Player(id=1)])


def test_negative_round_count_is_rejected():
    with pytest.raises(ValueError):
        Tournament([], played_rounds=-1)


def test_unaccelerated_score_rank_compare():
    leader = Player(id=0, score_without_acceleration=3.0, rank_index=0)
    chaser = Player(
        id=1, score_without_acceleration=2.0, rank_index=1, acceleration=2.0
    )
    tied = Player(id=2, score_without_acceleration=2.0, rank_index=2)
    compare = Tournament.unaccelerated_score_rank_compare

    assert compare(chaser, leader)
    assert not compare(leader, chaser)
    assert compare(tied, chaser)
    assert not compare(chaser, tied)
    assert not compare(tied, tied)


def test_config_defaults():
    config = TournamentConfig()

    assert config.swiss_system is SwissSystem.BURSTEIN
    assert config.points_for_win == 1.0
    assert Tournament([]).config == config


def test_config_dict_round_trip():
    config = TournamentConfig(
        name="Spring Swiss",
        points_for_win=3.0,
        points_for_draw=1.0,
    )

    data = config.to_dict()

    assert data["swiss_system"] == "burstein"
    assert TournamentConfig.from_dict(data) == config


def test_config_rejects_non_positive_win_points():
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(points_for_win=0.0)


@pytest.mark.parametrize(
    "value, expected",
    [(0, "0.0"), (3.0, "3.0"), (2.5, "2.5"), (2.25, "2.25"), (10.75, "10.75")],
)
def test_format_points(value, expected):
    assert format_points(value) == expected
