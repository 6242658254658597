from ashbird.constants import FLAP_STRENGTH
from ashbird.data_models import GamePhase


def test_starts_on_splash(engine):
    assert engine.phase is GamePhase.SPLASH


def test_splash_to_ready_has_no_physics_effect(engine):
    engine.on_primary_input()
    assert engine.phase is GamePhase.READY
    assert engine.bird.velocity == 0.0
    assert engine.pipes == []


def test_ready_to_active_flaps_immediately(engine):
    engine.on_primary_input()
    engine.on_primary_input()
    assert engine.phase is GamePhase.ACTIVE
    assert engine.bird.velocity == FLAP_STRENGTH


def test_flap_overwrites_velocity(active_engine):
    active_engine.bird.velocity = 8.0
    active_engine.on_primary_input()
    assert active_engine.bird.velocity == FLAP_STRENGTH


def test_repeated_flaps_between_ticks_are_not_cumulative(active_engine):
    for _ in range(5):
        active_engine.on_primary_input()
    assert active_engine.bird.velocity == FLAP_STRENGTH


def test_update_is_noop_outside_active(engine):
    y = engine.bird.y
    engine.update(50)
    assert engine.bird.y == y
    engine.on_primary_input()
    engine.update(50)
    assert engine.bird.y == y
    assert engine.pipes == []


def test_collision_ends_round(active_engine):
    active_engine.bird.y = active_engine.ground_y
    active_engine.update(16)
    assert active_engine.phase is GamePhase.ENDED


def test_ended_ignores_updates(active_engine):
    active_engine.bird.y = active_engine.ground_y
    active_engine.update(16)
    y = active_engine.bird.y
    active_engine.update(100)
    assert active_engine.bird.y == y


def test_restart_goes_to_ready_not_active(active_engine):
    active_engine.bird.y = active_engine.ground_y
    active_engine.update(16)
    active_engine.on_primary_input()
    assert active_engine.phase is GamePhase.READY
    assert active_engine.bird.velocity == 0.0


def test_restart_resets_round_but_keeps_high_score(active_engine, store):
    engine = active_engine
    engine.round.score = 3
    engine.round.high_score = 7
    engine.round.is_new_high_score = True
    engine.update(16)
    engine.bird.y = engine.ground_y
    engine.bird.velocity = 5.0
    engine.update(16)
    assert engine.phase is GamePhase.ENDED

    engine.on_primary_input()

    assert engine.bird.x == 80
    assert engine.bird.y == 300
    assert engine.bird.velocity == 0.0
    assert engine.bird.rotation == 0.0
    assert engine.pipes == []
    assert engine.round.score == 0
    assert engine.round.is_new_high_score is False
    assert engine.round.high_score == 7
