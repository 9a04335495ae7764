"""Unit tests for stages, payload stacking and the rocket flight sequence."""

import numpy as np
import pytest

from rocketStaging import (
    Fuel,
    Engine,
    Stage,
    SimpleStage,
    BoostedStage,
    StageWithPayload,
    Rocket,
    ConfigurationError,
    DegenerateStageError,
    g0,
)

UNIT_FUEL = Fuel("Unit", 1.0)


def make_engine(isp=300.0, thrust=1.0, rate=10.0, burn_time=100.0, name="Test engine"):
    """Engine burning ``rate`` kg/s of a unit-density fuel."""
    return Engine(name, ((UNIT_FUEL, rate),), isp=isp, thrust=thrust, mass=0.0, burn_time=burn_time)


def boosted_stage(booster_count=2):
    # core: 500 dry + 1000 propellant over 100 s, booster: 100 dry + 800 propellant over 40 s
    core = SimpleStage(500.0, [make_engine(rate=10.0, burn_time=100.0)])
    booster = SimpleStage(100.0, [make_engine(isp=250.0, thrust=5.0, rate=20.0, burn_time=40.0)])
    return BoostedStage(core, booster, booster_count)


def two_stage_rocket(payload_mass=0.0):
    lower = SimpleStage(500.0, [make_engine(isp=300.0, rate=15.0, burn_time=100.0)])
    upper = SimpleStage(100.0, [make_engine(isp=400.0, rate=4.0, burn_time=100.0)])
    return Rocket([lower, upper], payload_mass=payload_mass)


class EngineLessStage(Stage):
    def engines(self):
        return []

    def dry_mass(self):
        return 100.0

    def wet_mass(self):
        return 100.0


class NanStage(Stage):
    def engines(self):
        return [make_engine()]

    def dry_mass(self):
        return float("nan")

    def wet_mass(self):
        return float("nan")


def next_payload_step(payload_mass):
    if payload_mass < 50.0:
        return payload_mass + 10.0
    if payload_mass < 500.0:
        return payload_mass + 50.0
    return payload_mass + 100.0


# --- SimpleStage ---

def test_simple_stage_masses():
    """Wet mass is dry mass plus every engine's full-burn propellant."""
    engines = [make_engine(rate=10.0, burn_time=100.0), make_engine(rate=5.0, burn_time=50.0)]
    stage = SimpleStage(1000.0, engines)

    assert stage.dry_mass() == 1000.0
    assert np.isclose(stage.wet_mass() - stage.dry_mass(),
                      sum(e.propellant_mass_for_full_burn() for e in engines))
    assert np.isclose(stage.wet_mass(), 2250.0)


def test_single_engine_delta_v():
    """Rocket equation with g0 = 9.82: 2000 kg of propellant on a 1000 kg stage at 300 s."""
    stage = SimpleStage(1000.0, [make_engine(isp=300.0, rate=20.0, burn_time=100.0)])

    assert np.isclose(stage.wet_mass(), 3000.0)
    assert np.isclose(stage.delta_v(), 300.0 * np.log(3.0) * 9.82)
    assert g0 == 9.82


def test_isp_is_thrust_weighted():
    engines = [make_engine(isp=300.0, thrust=100.0), make_engine(isp=400.0, thrust=200.0)]
    stage = SimpleStage(1000.0, engines)

    assert np.isclose(stage.isp(), 300.0 / (100.0 / 300.0 + 200.0 / 400.0))


def test_burn_time_is_longest_engine():
    stage = SimpleStage(1000.0, [make_engine(burn_time=100.0), make_engine(burn_time=250.0)])

    assert stage.burn_time() == 250.0


def test_twr_and_max_g_force():
    """TWR uses wet mass, max g uses dry mass, thrust is converted from kN."""
    stage = SimpleStage(1000.0, [make_engine(thrust=30.0, rate=20.0, burn_time=100.0)])

    assert np.isclose(stage.twr(), 30000.0 / 3000.0 / 9.82)
    assert np.isclose(stage.max_g_force(), 30000.0 / 1000.0 / 9.82)


def test_zero_propellant_gives_zero_delta_v():
    stage = SimpleStage(1000.0, [make_engine(burn_time=0.0)])

    assert stage.wet_mass() == stage.dry_mass()
    assert stage.delta_v() == 0.0


def test_propellants_required_summed_by_fuel_name():
    kerosene = Fuel("Kerosene", 0.82)
    engine_a = Engine("A", ((kerosene, 2.0), (UNIT_FUEL, 1.0)), isp=300.0, thrust=1.0, mass=0.0, burn_time=10.0)
    engine_b = Engine("B", ((kerosene, 3.0),), isp=300.0, thrust=1.0, mass=0.0, burn_time=20.0)
    stage = SimpleStage(100.0, [engine_a, engine_b])

    assert stage.propellants_required() == pytest.approx({"Kerosene": 80.0, "Unit": 10.0})


def test_simple_stage_rejects_bad_configuration():
    with pytest.raises(ConfigurationError, match="at least one engine"):
        SimpleStage(1000.0, [])
    with pytest.raises(ConfigurationError):
        SimpleStage(0.0, [make_engine()])


def test_isp_of_stage_without_engines():
    """An engine-less stage fails loudly instead of producing NaN."""
    stage = EngineLessStage()

    assert stage.burn_time() == 0.0
    with pytest.raises(DegenerateStageError, match="no engines"):
        stage.isp()
    with pytest.raises(DegenerateStageError):
        stage.delta_v()


def test_with_remaining_burn_time():
    stage = SimpleStage(500.0, [make_engine(burn_time=100.0), make_engine(burn_time=80.0)])

    remaining = stage.with_remaining_burn_time(30.0)

    assert [e.burn_time for e in remaining.engines()] == [30.0, 30.0]
    assert remaining.dry_mass() == 500.0
    assert [e.burn_time for e in stage.engines()] == [100.0, 80.0]


def test_with_verniers():
    """Two verniers are added, burning as long as the first engine."""
    vernier = make_engine(isp=240.0, thrust=4.0, rate=1.0, burn_time=360.0, name="Vernier")
    stage = SimpleStage(500.0, [make_engine(burn_time=100.0)]).with_verniers(vernier)

    engines = stage.engines()
    assert len(engines) == 3
    assert [e.name for e in engines[1:]] == ["Vernier", "Vernier"]
    assert all(e.burn_time == 100.0 for e in engines)
    assert np.isclose(stage.wet_mass(), 500.0 + 1000.0 + 2 * 100.0)


# --- BoostedStage ---

def test_boosted_stage_engines():
    stage = boosted_stage(booster_count=2)

    engines = stage.engines()
    assert len(engines) == 3
    assert sum(e.thrust for e in engines) == 1.0 + 2 * 5.0


def test_boosted_stage_burn_time_is_booster_burn_time():
    """The boosted configuration ends when the boosters burn out, not when the core does."""
    stage = boosted_stage()

    assert stage.burn_time() == 40.0
    assert stage.core.burn_time() == 100.0


def test_boosted_stage_masses():
    stage = boosted_stage(booster_count=2)

    assert np.isclose(stage.wet_mass(), 1500.0 + 2 * 900.0)
    # core keeps 60 s of propellant when the boosters separate
    assert np.isclose(stage.dry_mass(), 500.0 + 600.0 + 2 * 100.0)


def test_boosted_stage_mass_identity():
    """Dry mass is the wet continuation stage plus the spent boosters."""
    for count in (0, 1, 3):
        stage = boosted_stage(booster_count=count)
        after = stage.stage_after_booster_separation()

        assert np.isclose(after.wet_mass() + stage.booster.dry_mass() * count, stage.dry_mass())


def test_stage_after_booster_separation():
    stage = boosted_stage()

    after = stage.next_stage()

    assert isinstance(after, SimpleStage)
    assert after.burn_time() == 60.0
    assert np.isclose(after.wet_mass(), 1100.0)
    assert after.next_stage() is None


def test_boosted_stage_rejects_booster_outlasting_core():
    core = SimpleStage(500.0, [make_engine(burn_time=30.0)])
    booster = SimpleStage(100.0, [make_engine(burn_time=40.0)])

    with pytest.raises(ConfigurationError, match="separate before the core"):
        BoostedStage(core, booster, 2)


def test_boosted_stage_rejects_negative_booster_count():
    with pytest.raises(ConfigurationError):
        boosted_stage(booster_count=-1)


# --- StageWithPayload ---

def test_stage_with_payload_adds_mass():
    inner = SimpleStage(1000.0, [make_engine(rate=20.0, burn_time=100.0)])
    stage = StageWithPayload(inner, 500.0)

    assert stage.dry_mass() == 1500.0
    assert np.isclose(stage.wet_mass(), 3500.0)
    assert stage.engines() == inner.engines()
    assert stage.isp() == inner.isp()
    assert np.isclose(stage.delta_v(), 300.0 * np.log(3500.0 / 1500.0) * 9.82)
    assert stage.next_stage() is None


def test_stage_with_payload_keeps_payload_through_separation():
    stage = StageWithPayload(boosted_stage(), 250.0)

    assert stage.burn_time() == 40.0

    after = stage.next_stage()
    assert isinstance(after, StageWithPayload)
    assert after.payload_mass == 250.0
    assert np.isclose(after.wet_mass(), 1100.0 + 250.0)
    assert after.next_stage() is None


def test_stage_with_payload_rejects_negative_payload():
    with pytest.raises(ConfigurationError):
        StageWithPayload(boosted_stage(), -1.0)


# --- Rocket ---

def test_two_stage_rocket_delta_v():
    """Lower stage carries the upper stage's wet mass as payload."""
    rocket = two_stage_rocket()

    lower_dv = 300.0 * np.log((2000.0 + 500.0) / (500.0 + 500.0)) * 9.82
    upper_dv = 400.0 * np.log(500.0 / 100.0) * 9.82

    assert np.isclose(rocket.delta_v(), lower_dv + upper_dv)


def test_flight_sequence_payloads():
    rocket = two_stage_rocket(payload_mass=50.0)

    lower, upper = rocket.flight_sequence()

    assert lower.payload_mass == 550.0
    assert upper.payload_mass == 50.0


def test_flight_sequence_expands_boosted_stages():
    """Each boosted stage contributes its boosted and its post-separation segment."""
    upper = SimpleStage(100.0, [make_engine(isp=400.0, rate=4.0)])
    rocket = Rocket([boosted_stage(), upper], payload_mass=10.0)

    sequence = rocket.flight_sequence()

    assert len(sequence) == len(rocket.stack) + 1
    assert isinstance(sequence[0].stage, BoostedStage)
    assert isinstance(sequence[1].stage, SimpleStage)
    assert sequence[1].stage.burn_time() == 60.0
    assert sequence[2].stage is upper
    assert sequence[0].payload_mass == sequence[1].payload_mass == upper.wet_mass() + 10.0
    assert sequence[2].payload_mass == 10.0


def test_flight_sequence_is_restartable():
    rocket = Rocket([boosted_stage(), boosted_stage(1)], payload_mass=10.0)

    first = rocket.stages()
    next(first)
    second = list(rocket.stages())

    assert len(second) == 4
    assert len(list(first)) == 3
    assert rocket.delta_v() == rocket.delta_v()


def test_rocket_delta_v_decreases_with_payload():
    rocket = Rocket([boosted_stage(), SimpleStage(100.0, [make_engine(rate=4.0)])])

    values = [rocket.with_payload_mass(mass).delta_v() for mass in (0.0, 10.0, 100.0, 1000.0)]

    assert all(a > b for a, b in zip(values, values[1:]))


def test_rocket_max_g_force():
    rocket = Rocket([boosted_stage(), SimpleStage(100.0, [make_engine(thrust=20.0, rate=4.0)])])

    expected = max(stage.max_g_force() for stage in rocket.stages())

    assert rocket.max_g_force() == expected


def test_empty_rocket():
    rocket = Rocket()

    assert list(rocket.stages()) == []
    assert rocket.delta_v() == 0.0
    assert rocket.max_g_force() == 0.0


def test_max_g_force_rejects_nan():
    rocket = Rocket([NanStage()])

    with pytest.raises(DegenerateStageError):
        rocket.max_g_force()


def test_rocket_rejects_bad_configuration():
    with pytest.raises(ConfigurationError):
        Rocket([make_engine()])
    with pytest.raises(ConfigurationError):
        Rocket([boosted_stage()], payload_mass=-10.0)


def test_with_payload():
    """A payload stage goes on top and resets the payload mass."""
    rocket = two_stage_rocket(payload_mass=100.0)
    probe = SimpleStage(50.0, [make_engine(rate=1.0)])

    with_probe = rocket.with_payload(probe)

    assert with_probe.stack[-1] is probe
    assert len(with_probe.stack) == 3
    assert with_probe.payload_mass == 0.0
    assert len(rocket.stack) == 2
    assert rocket.payload_mass == 100.0


def test_with_payload_mass():
    rocket = two_stage_rocket()

    heavier = rocket.with_payload_mass(300.0)

    assert heavier.payload_mass == 300.0
    assert heavier.stack == rocket.stack
    assert rocket.payload_mass == 0.0
    assert heavier.delta_v() < rocket.delta_v()


def test_set_payload_for_target_deltav_lands_on_schedule():
    """The result is the last schedule value before delta-v drops to the target."""
    rocket = two_stage_rocket()
    target = rocket.with_payload_mass(730.0).delta_v()

    payload = rocket.set_payload_for_target_deltav(target)

    assert payload == 700.0
    assert rocket.payload_mass == 700.0


def test_set_payload_for_target_deltav_brackets_target():
    rocket = two_stage_rocket()
    for target in (3000.0, 5000.0, 7000.0):
        payload = rocket.set_payload_for_target_deltav(target)

        if payload > 0:
            assert rocket.with_payload_mass(payload).delta_v() > target
        assert rocket.with_payload_mass(next_payload_step(payload)).delta_v() <= target


def test_set_payload_for_unreachable_target():
    rocket = two_stage_rocket(payload_mass=200.0)

    payload = rocket.set_payload_for_target_deltav(rocket.delta_v() * 10)

    assert payload == 0.0
    assert rocket.payload_mass == 0.0


def test_set_payload_rejects_non_positive_target():
    with pytest.raises(ValueError):
        two_stage_rocket().set_payload_for_target_deltav(0.0)


def test_payload_search_logs(caplog):
    caplog.set_level("DEBUG", logger="rocketStaging.core")

    two_stage_rocket().set_payload_for_target_deltav(5000.0)

    assert any("Payload search" in record.getMessage() for record in caplog.records)
