import pytest

from bbstamina import MAX_FATIGUE, PitcherStamina


@pytest.fixture
def tracked(make_team, scripted_rng):
    team = make_team()
    stamina = PitcherStamina(scripted_rng())  # every random factor is 1.0
    stamina.ensure_team(team)
    return team, stamina


def test_new_pitchers_start_fresh(tracked):
    team, stamina = tracked
    pitcher = team.pitchers()[0]
    assert stamina.stamina[pitcher.player_id] == 50
    assert stamina.ratio(pitcher) == 1.0
    assert stamina.fatigue_multiplier(pitcher) == 0.0


def test_max_stamina_floor(make_player):
    assert PitcherStamina.max_stamina(make_player('p', 'P', stamina=30)) == 50
    assert PitcherStamina.max_stamina(make_player('p', 'P', stamina=0)) == 80
    assert PitcherStamina.max_stamina(make_player('p', 'P', stamina=90)) == 90


def test_consume_drains_and_tires(tracked):
    team, stamina = tracked
    pitcher = team.pitchers()[0]
    assert stamina.consume(pitcher, 10) == pytest.approx(10)
    assert stamina.stamina[pitcher.player_id] == pytest.approx(40)
    assert stamina.pitch_count[pitcher.player_id] == 10
    assert stamina.fatigue_multiplier(pitcher) == pytest.approx(0.2 * MAX_FATIGUE)


def test_high_stamina_arm_drains_slower(make_player, scripted_rng):
    horse = make_player('horse', 'P', stamina=90)
    assert PitcherStamina(scripted_rng()).consume(horse, 10) == pytest.approx(8.5)


def test_stamina_never_below_zero(tracked):
    team, stamina = tracked
    pitcher = team.pitchers()[0]
    stamina.consume(pitcher, 500)
    assert stamina.stamina[pitcher.player_id] == 0
    assert stamina.fatigue_multiplier(pitcher) == pytest.approx(MAX_FATIGUE)


def test_recover_after_match(tracked):
    team, stamina = tracked
    worked, rested = team.pitchers()[:2]
    stamina.consume(worked, 10)
    stamina.recover_after_match([team])
    assert stamina.rest_days[worked.player_id] == 0
    assert stamina.rest_days[rested.player_id] == 3
    assert stamina.workload_history[worked.player_id] == [pytest.approx(10)]
    assert stamina.stamina[worked.player_id] == pytest.approx(40)  # recovery never lowers stamina
    assert stamina.stamina[rested.player_id] == 50
    assert stamina.workload == {}


def test_rest_brings_a_starter_back(tracked):
    team, stamina = tracked
    starter = team.current_starter()
    stamina.consume(starter, 45)
    stamina.recover_after_match([team])
    tired = stamina.stamina[starter.player_id]
    for _ in range(4):
        stamina.recover_after_match([team])
    assert tired == 20  # a heavy outing only comes back to the 0.4 floor
    assert stamina.stamina[starter.player_id] > 40


def test_recovery_cap_bounds(tracked):
    team, stamina = tracked
    pitcher = team.pitchers()[0]
    stamina.workload[pitcher.player_id] = 60
    stamina.rest_days[pitcher.player_id] = 0
    stamina.workload_history[pitcher.player_id] = [60, 60, 60]
    assert stamina.recovery_cap(pitcher, is_starter=False) == pytest.approx(0.4)
    assert 0.4 <= stamina.recovery_cap(pitcher, is_starter=True) <= 1.0
