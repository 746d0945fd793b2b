import pytest

from bberrors import ConfigurationError, DataIntegrityError, PostseasonError
from bbpostseason import Postseason, Series


@pytest.fixture
def seeded(make_team):
    return [make_team(f'S{seed}') for seed in range(1, 5)]


def test_series_goes_to_the_first_team_to_two_wins(seeded):
    series = Series(seeded[0], seeded[3], 3)
    assert series.wins_needed == 2
    assert series.record(5, 2) is seeded[0]
    assert series.record(1, 4) is seeded[3]
    assert not series.is_complete()
    assert series.winner() is None
    series.record(3, 2)
    assert series.winner() is seeded[0]
    with pytest.raises(DataIntegrityError):
        series.record(1, 0)
    assert len(series.games) == 3


def test_tied_game_cannot_be_recorded(seeded):
    with pytest.raises(DataIntegrityError):
        Series(seeded[0], seeded[1], 5).record(2, 2)


def test_semifinals_pair_best_against_worst(seeded):
    postseason = Postseason(seeded, (3, 5))
    assert postseason.round_name() == 'Semifinals'
    pairs = [(series.home.team_id, series.away.team_id, series.best_of) for series in postseason.current_round()]
    assert pairs == [('S1', 'S4', 3), ('S2', 'S3', 3)]


def test_winners_are_reseeded_for_the_finals(seeded):
    postseason = Postseason(seeded, (3, 5))
    top, bottom = postseason.current_round()
    for _ in range(2):
        top.record(1, 6)  # S4 upsets S1
        bottom.record(6, 1)
    postseason.advance_round()
    final = postseason.current_round()[0]
    assert postseason.round_name() == 'Finals'
    assert (final.home.team_id, final.away.team_id, final.best_of) == ('S2', 'S4', 5)
    for _ in range(3):
        final.record(0, 2)
    postseason.advance_round()
    assert postseason.is_complete()
    assert postseason.champion.team_id == 'S4'
    with pytest.raises(PostseasonError):
        postseason.advance_round()


def test_round_cannot_advance_with_open_series(seeded):
    postseason = Postseason(seeded)
    postseason.current_round()[0].record(3, 1)
    with pytest.raises(PostseasonError):
        postseason.advance_round()
    assert len(postseason.rounds) == 1


def test_series_for_team(seeded):
    postseason = Postseason(seeded)
    assert postseason.series_for_team(seeded[2]) is postseason.current_round()[1]
    series = postseason.current_round()[1]
    series.record(4, 0)
    series.record(4, 0)
    assert postseason.series_for_team(seeded[2]) is None


def test_bracket_must_be_a_power_of_two(seeded):
    with pytest.raises(ConfigurationError):
        Postseason(seeded[:3])


def test_to_dict(seeded):
    postseason = Postseason(seeded)
    postseason.current_round()[0].record(2, 1)
    data = postseason.to_dict()
    assert data['seeds'] == {'S1': 1, 'S2': 2, 'S3': 3, 'S4': 4}
    assert data['rounds'][0][0]['games'] == [[2, 1]]
    assert data['champion'] is None
