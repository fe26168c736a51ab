import pytest

from swordmerge.core.rng import RNG
from swordmerge.models.item import create_item
from swordmerge.systems.upgrade import Outcome, OutcomeDistribution, UpgradeEngine


@pytest.fixture
def engine() -> UpgradeEngine:
    return UpgradeEngine(RNG(seed=42))


def test_distribution_at_level_zero(engine):
    dist = engine.outcome_distribution(0)
    assert dist.success == pytest.approx(0.9)
    assert dist.maintain == pytest.approx(0.1)
    assert dist.destroy == pytest.approx(0.0)


def test_distribution_at_level_three(engine):
    dist = engine.outcome_distribution(3)
    assert dist.success == pytest.approx(0.6)
    assert dist.maintain == pytest.approx(0.1)
    assert dist.destroy == pytest.approx(0.3)


@pytest.mark.parametrize("level", [6, 7, 10, 50])
def test_clamps_leave_maintain_at_point_two(engine, level):
    dist = engine.outcome_distribution(level)
    assert dist.success == pytest.approx(0.3)
    assert dist.destroy == pytest.approx(0.5)
    assert dist.maintain == pytest.approx(0.2)


@pytest.mark.parametrize("level", range(0, 40))
def test_distribution_is_consistent(engine, level):
    dist = engine.outcome_distribution(level)
    assert abs(dist.success + dist.maintain + dist.destroy - 1.0) <= 1e-9
    assert 0.3 - 1e-9 <= dist.success <= 0.9 + 1e-9
    assert 0.0 <= dist.destroy <= 0.5
    assert dist.maintain >= -1e-9


def test_roll_maps_draws_onto_ranges(fixed_rng):
    dist = OutcomeDistribution(success=0.6, maintain=0.1, destroy=0.3)
    engine = UpgradeEngine(fixed_rng(0.0, 0.59, 0.6, 0.69, 0.7, 0.99))
    outcomes = [engine.roll(dist) for _ in range(6)]
    assert outcomes == [
        Outcome.SUCCESS,
        Outcome.SUCCESS,
        Outcome.MAINTAIN,
        Outcome.MAINTAIN,
        Outcome.DESTROY,
        Outcome.DESTROY,
    ]


def test_attempt_does_not_mutate_item(fixed_rng):
    item = create_item(4, 2)
    engine = UpgradeEngine(fixed_rng(0.1))
    assert engine.attempt(item) is Outcome.SUCCESS
    assert item.upgrade_level == 2


def test_attempt_never_destroys_at_level_zero():
    engine = UpgradeEngine(RNG(seed=7))
    item = create_item(1)
    outcomes = {engine.attempt(item) for _ in range(500)}
    assert Outcome.DESTROY not in outcomes
    assert outcomes <= {Outcome.SUCCESS, Outcome.MAINTAIN}


def test_seeded_attempts_are_reproducible():
    item = create_item(1, 4)
    a = UpgradeEngine(RNG(seed=3))
    b = UpgradeEngine(RNG(seed=3))
    assert [a.attempt(item) for _ in range(20)] == [b.attempt(item) for _ in range(20)]


def test_outcome_values_are_closed_set():
    assert {o.value for o in Outcome} == {"SUCCESS", "MAINTAIN", "DESTROY"}


@pytest.mark.parametrize("bad", [None, "sword", 3])
def test_attempt_reports_missing_item_with_none(fixed_rng, bad):
    engine = UpgradeEngine(fixed_rng(0.1))
    assert engine.attempt(bad) is None


def test_attempt_rejects_negative_level_without_drawing(fixed_rng):
    item = create_item(2)
    item.upgrade_level = -1
    engine = UpgradeEngine(fixed_rng(0.1))
    assert engine.attempt(item) is None
    assert engine.attempt(create_item(2)) is Outcome.SUCCESS
