import pytest

from at_bat import OutCome
from bbbaserunners import Bases
from bbconfig import LeagueSettings


@pytest.fixture
def runners(make_player):
    return [make_player(name, 'LF') for name in ('batter', 'r1', 'r2', 'r3')]


def play(bases, batter, cd, rng):
    bases.new_ab(batter)
    outcome = OutCome(cd)
    runs = bases.handle_runners(outcome, rng, LeagueSettings())
    assert outcome.runs_scored == runs
    return runs


def test_grand_slam(scripted_rng, runners):
    batter, r1, r2, r3 = runners
    bases = Bases()
    bases.load(r1, r2, r3)
    assert play(bases, batter, 'HR', scripted_rng()) == 4
    assert bases.runners_on() == 0
    assert bases.player_scored == [r3, r2, r1, batter]


def test_walk_only_forces_runners(scripted_rng, runners):
    batter, r1, _, r3 = runners
    bases = Bases()
    bases.load(first=r1, third=r3)
    assert play(bases, batter, 'BB', scripted_rng()) == 0
    assert (bases.first, bases.second, bases.third) == (batter, r1, r3)


def test_bases_loaded_hit_by_pitch_forces_in_a_run(scripted_rng, runners):
    batter, r1, r2, r3 = runners
    bases = Bases()
    bases.load(r1, r2, r3)
    assert play(bases, batter, 'HBP', scripted_rng()) == 1
    assert (bases.first, bases.second, bases.third) == (batter, r1, r2)


def test_single_scores_runner_from_third(scripted_rng, runners):
    batter, _, _, r3 = runners
    bases = Bases()
    bases.load(third=r3)
    rng = scripted_rng()
    assert play(bases, batter, '1B', rng) == 1
    assert bases.first is batter
    assert rng.random_calls == 0


def test_single_runner_on_second_holds_at_third(scripted_rng, runners):
    batter, _, r2, _ = runners
    bases = Bases()
    bases.load(second=r2)
    assert play(bases, batter, '1B', scripted_rng([0.9])) == 0
    assert (bases.first, bases.second, bases.third) == (batter, None, r2)


def test_single_runner_on_second_scores(scripted_rng, runners):
    batter, _, r2, _ = runners
    bases = Bases()
    bases.load(second=r2)
    assert play(bases, batter, '1B', scripted_rng([0.1, 0.99])) == 1
    assert (bases.first, bases.second, bases.third) == (batter, None, None)


def test_single_runner_thrown_out_at_home(scripted_rng, runners):
    batter, _, r2, _ = runners
    bases = Bases()
    bases.load(second=r2)
    assert play(bases, batter, '1B', scripted_rng([0.1, 0.0])) == 0
    assert bases.outs == 1
    assert (bases.first, bases.second, bases.third) == (batter, None, None)


def test_single_runner_on_first_stops_at_second(scripted_rng, runners):
    batter, r1, _, _ = runners
    bases = Bases()
    bases.load(first=r1)
    rng = scripted_rng([0.0])
    play(bases, batter, '1B', rng)
    assert (bases.first, bases.second) == (batter, r1)
    assert rng.random_calls == 0  # no first to third try with less than two outs


def test_third_out_on_the_bases_ends_the_play(scripted_rng, runners):
    batter, r1, _, _ = runners
    bases = Bases()
    bases.load(first=r1, outs=2)
    assert play(bases, batter, '1B', scripted_rng([0.1, 0.0])) == 0
    assert bases.outs == 3
    assert bases.is_over()
    assert bases.runners_on() == 0  # batter never reaches once the inning is over


def test_two_out_runner_takes_third(scripted_rng, runners):
    batter, r1, _, _ = runners
    bases = Bases()
    bases.load(first=r1, outs=2)
    play(bases, batter, '1B', scripted_rng([0.1, 0.99]))
    assert (bases.first, bases.second, bases.third) == (batter, None, r1)


def test_double_runner_from_first_holds_at_third(scripted_rng, runners):
    batter, r1, r2, r3 = runners
    bases = Bases()
    bases.load(r1, r2, r3)
    assert play(bases, batter, '2B', scripted_rng([0.9])) == 2
    assert (bases.first, bases.second, bases.third) == (None, batter, r1)


def test_triple_clears_the_bases(scripted_rng, runners):
    batter, r1, r2, _ = runners
    bases = Bases()
    bases.load(first=r1, second=r2)
    assert play(bases, batter, '3B', scripted_rng()) == 2
    assert (bases.first, bases.second, bases.third) == (None, None, batter)


def test_double_play_removes_runner_on_first(scripted_rng, runners):
    batter, r1, r2, _ = runners
    bases = Bases()
    bases.load(first=r1, second=r2)
    play(bases, batter, 'DP', scripted_rng())
    assert bases.outs == 2
    assert (bases.first, bases.second) == (None, r2)


def test_sac_fly_scores_runner_from_third(scripted_rng, runners):
    batter, _, _, r3 = runners
    bases = Bases()
    bases.load(third=r3, outs=1)
    assert play(bases, batter, 'SF', scripted_rng()) == 1
    assert bases.outs == 2


def test_outs_hold_runners(scripted_rng, runners):
    batter, r1, r2, r3 = runners
    for cd in ('SO', 'GO', 'FO'):
        bases = Bases()
        bases.load(r1, r2, r3)
        assert play(bases, batter, cd, scripted_rng()) == 0
        assert bases.outs == 1
        assert bases.runners_on() == 3


def test_walk_off_single_stops_at_winning_run(scripted_rng, runners):
    batter, _, r2, r3 = runners
    bases = Bases(walk_off_runs=1)
    bases.load(second=r2, third=r3)
    assert play(bases, batter, '1B', scripted_rng()) == 1
    assert bases.walk_off
    assert bases.second is r2  # nobody moves after the winning run scores
    assert bases.first is None


def test_walk_off_home_run_counts_every_run(scripted_rng, runners):
    batter, r1, r2, r3 = runners
    bases = Bases(walk_off_runs=1)
    bases.load(r1, r2, r3)
    assert play(bases, batter, 'HR', scripted_rng()) == 4
    assert bases.walk_off


def test_no_runs_after_the_half_is_over(runners):
    bases = Bases()
    bases.record_out(3)
    bases.score_runner(runners[1])
    assert bases.runs == 0
    bases.record_out(2)
    assert bases.outs == 3


def test_describe_lists_runners(runners):
    bases = Bases()
    bases.load(first=runners[1], third=runners[3])
    assert bases.describe() == ['1B: r1', '3B: r3']
