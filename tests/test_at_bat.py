import pytest

from at_bat import OutCome, SimAB, pitches_for_plate_appearance
from bbbaserunners import Bases


@pytest.fixture
def batter(make_player):
    return make_player('batter', 'CF', contact=50, power=50)


@pytest.fixture
def pitcher(make_player):
    return make_player('pitcher', 'P', pitching=50)


def test_hit_chance_baseline(batter, pitcher):
    assert SimAB.hit_chance(batter, pitcher) == pytest.approx(0.5)


def test_hit_chance_clamped(make_player):
    slugger, ace = make_player('s', 'DH', contact=99), make_player('a', 'P', pitching=99, contact=0)
    assert SimAB.hit_chance(slugger, make_player('bp', 'P', pitching=0)) == pytest.approx(0.6)
    assert SimAB.hit_chance(ace, ace) == pytest.approx(0.05)


def test_strong_hitter_hits_the_ceiling(make_player):
    assert SimAB.hit_chance(make_player('s', 'DH', contact=90), make_player('p', 'P', pitching=10)) == 0.6


def test_defense_and_fatigue_shift_hit_chance(batter, pitcher):
    assert SimAB.hit_chance(batter, pitcher, fielding_defense=100) == pytest.approx(0.44)
    assert SimAB.hit_chance(batter, pitcher, fatigue=0.05) == pytest.approx(0.55)


@pytest.mark.parametrize('rolls, expected', [
    ([0.1, 0.0], 'HR'),
    ([0.1, 0.2], '2B'),
    ([0.1, 0.5], '1B'),
    ([0.52], 'BB'),
    ([0.538], 'HBP'),
    ([0.9, 0.1], 'SO'),
    ([0.9, 0.4], 'GO'),
    ([0.9, 0.7], 'FO'),
])
def test_outcome_rolls(scripted_rng, batter, pitcher, rolls, expected):
    rng = scripted_rng(rolls)
    outcome = SimAB(rng).calculate_outcome(batter, pitcher)
    assert outcome.score_book_cd == expected
    assert rng.random_calls == len(rolls)


def test_fly_out_with_runner_on_third_can_be_sac_fly(scripted_rng, make_player):
    bases = Bases()
    bases.load(third=make_player('r3', 'LF'))
    outcome = SimAB(scripted_rng([0.1])).situational_out(OutCome('FO'), bases)
    assert outcome.score_book_cd == 'SF'
    assert outcome.outs_on_play == 1


def test_ground_out_with_runner_on_first_can_be_double_play(scripted_rng, make_player):
    bases = Bases()
    bases.load(first=make_player('r1', 'LF'), outs=1)
    assert SimAB(scripted_rng([0.1])).situational_out(OutCome('GO'), bases).score_book_cd == 'DP'
    assert SimAB(scripted_rng([0.5])).situational_out(OutCome('GO'), bases).score_book_cd == 'GO'


def test_no_situational_roll_with_two_outs(scripted_rng, make_player):
    bases = Bases()
    bases.load(first=make_player('r1', 'LF'), third=make_player('r3', 'LF'), outs=2)
    rng = scripted_rng([0.0])
    sim = SimAB(rng)
    assert sim.situational_out(OutCome('GO'), bases).score_book_cd == 'GO'
    assert sim.situational_out(OutCome('FO'), bases).score_book_cd == 'FO'
    assert rng.random_calls == 0


def test_outcome_flags():
    assert OutCome('HR').bases_on_hit == 4
    assert OutCome('HR').is_at_bat
    assert not OutCome('BB').is_at_bat
    assert not OutCome('SF').is_at_bat
    assert OutCome('HBP').on_base_b
    assert OutCome('DP').outs_on_play == 2
    assert not OutCome('SO').is_hit


def test_pitches_per_plate_appearance(make_player):
    hitter, weak = make_player('h', 'CF', contact=99), make_player('w', 'CF', contact=0)
    ace, batting_practice = make_player('a', 'P', pitching=99), make_player('b', 'P', pitching=0)
    assert pitches_for_plate_appearance(hitter, batting_practice) == 8
    assert pitches_for_plate_appearance(weak, ace) == 3
    assert pitches_for_plate_appearance(hitter, make_player('m', 'P', pitching=99)) == 5
