"""Tests for adaptations and adaptatype matching and blending."""

import math

import pytest

from ecofit import (
    DELTA,
    Adaptation,
    Adaptatype,
    EcoFactor,
    EvaluationError,
    Factor,
    Fitness,
    NoMatchingFactorsError,
    ShapedEcoFitness,
)
from ecofit.genetics import mean_blend, weighted_blend

TEMPERATURE = Factor("temperature")
HUMIDITY = Factor("humidity")


def _constant(value: float):
    return lambda eco_factor: Fitness(value)


def _environment(**values):
    return {name: EcoFactor(Factor(name), value) for name, value in values.items()}


def test_factor_name_cannot_be_empty() -> None:
    with pytest.raises(ValueError):
        Factor("  ")


def test_adaptation_delegates_to_its_capability() -> None:
    seen = []

    def capability(eco_factor):
        seen.append(eco_factor)
        return Fitness(0.3)

    adaptation = Adaptation(TEMPERATURE, capability)
    eco_factor = EcoFactor(TEMPERATURE, 21)
    assert adaptation(eco_factor) == Fitness(0.3)
    assert seen == [eco_factor]


def test_adaptation_does_not_check_the_factor() -> None:
    adaptation = Adaptation(TEMPERATURE, _constant(0.6))
    assert adaptation(EcoFactor(HUMIDITY, 0.1)) == Fitness(0.6)


def test_adaptation_repr_names_factor_and_capability() -> None:
    adaptation = Adaptation(TEMPERATURE, ShapedEcoFitness(12, DELTA))
    assert repr(adaptation) == "Adaptation(temperature, ShapedEcoFitness(delta, trait=12))"


@pytest.mark.parametrize("trait, expected", [(12, Fitness(1)), (8, Fitness(0))])
def test_single_threshold_adaptation(trait, expected) -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, ShapedEcoFitness(trait, DELTA))])
    assert adaptatype.fitness(_environment(temperature=10)) == expected


def test_multiplicative_blend_is_the_default() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, _constant(0.5)), Adaptation(HUMIDITY, _constant(0.4))])
    result = adaptatype.fitness(_environment(temperature=10, humidity=0.7))
    assert result.value == pytest.approx(0.2)


def test_caller_supplied_blend_is_used() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, _constant(0.5)), Adaptation(HUMIDITY, _constant(0.4))])
    result = adaptatype.fitness(_environment(temperature=10, humidity=0.7), mean_blend)
    assert result.value == pytest.approx(0.45)


def test_no_overlap_with_environment_raises() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, ShapedEcoFitness(12, DELTA))])
    with pytest.raises(NoMatchingFactorsError) as err:
        adaptatype.fitness(_environment(humidity=0.5))
    assert err.value.environment_keys == ("humidity",)
    assert err.value.expected_factors == ("temperature",)
    assert "humidity" in str(err.value) and "temperature" in str(err.value)


def test_empty_adaptatype_cannot_be_evaluated() -> None:
    with pytest.raises(NoMatchingFactorsError):
        Adaptatype().fitness(_environment(temperature=1))


def test_unmatched_adaptations_are_dropped_and_order_preserved() -> None:
    received = []

    def recording_blend(fitnesses):
        received.extend(fitnesses)
        return fitnesses[-1]

    adaptatype = Adaptatype(
        [
            Adaptation(HUMIDITY, _constant(0.1)),
            Adaptation(Factor("salinity"), _constant(0.9)),
            Adaptation(TEMPERATURE, _constant(0.2)),
        ]
    )
    environment = _environment(temperature=10, humidity=0.7)
    pairs = adaptatype.match(environment)
    assert [a.factor.name for a, _ in pairs] == ["humidity", "temperature"]
    assert adaptatype.fitness(environment, recording_blend) == Fitness(0.2)
    assert received == [Fitness(0.1), Fitness(0.2)]


def test_duplicate_factor_names_both_contribute() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, _constant(0.5)), Adaptation(TEMPERATURE, _constant(0.5))])
    assert adaptatype.fitness(_environment(temperature=3)) == Fitness(0.25)
    assert adaptatype.factor_names == ["temperature", "temperature"]


def test_a_single_failure_fails_the_whole_evaluation() -> None:
    blended = []

    def failing(eco_factor):
        raise EvaluationError("sensor offline", context={"factor": eco_factor.name})

    adaptatype = Adaptatype([Adaptation(TEMPERATURE, _constant(1.0)), Adaptation(HUMIDITY, failing)])
    with pytest.raises(EvaluationError) as err:
        adaptatype.fitness(_environment(temperature=10, humidity=0.7), lambda fs: blended.append(fs))
    assert "sensor offline" in str(err.value)
    assert blended == []


def test_first_failure_in_order_is_surfaced() -> None:
    calls = []

    def failing(label):
        def capability(eco_factor):
            calls.append(label)
            raise EvaluationError(label)

        return capability

    adaptatype = Adaptatype([Adaptation(HUMIDITY, failing("first")), Adaptation(TEMPERATURE, failing("second"))])
    with pytest.raises(EvaluationError, match="first"):
        adaptatype.fitness(_environment(temperature=10, humidity=0.7))
    assert calls == ["first"]


def test_shape_type_mismatch_becomes_evaluation_error() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, ShapedEcoFitness(12, DELTA))])
    with pytest.raises(EvaluationError) as err:
        adaptatype.fitness(_environment(temperature="warm"))
    assert isinstance(err.value.cause, TypeError)
    assert err.value.context["factor"] == "temperature"


def test_unexpected_capability_errors_are_wrapped() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, lambda e: Fitness(e.value / 0))])
    with pytest.raises(EvaluationError) as err:
        adaptatype.fitness(_environment(temperature=1.0))
    assert isinstance(err.value.__cause__, ZeroDivisionError)


def test_out_of_range_result_is_an_evaluation_error() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, lambda e: Fitness(e.value))])
    with pytest.raises(EvaluationError):
        adaptatype.fitness(_environment(temperature=3.0))


def test_non_fitness_result_is_an_evaluation_error() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, lambda e: 0.5)])
    with pytest.raises(EvaluationError, match="expected Fitness"):
        adaptatype.fitness(_environment(temperature=3.0))


def test_evaluate_returns_outcomes_instead_of_raising() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, ShapedEcoFitness(12, DELTA))])

    success = adaptatype.evaluate(_environment(temperature=10))
    assert success.ok and success.unwrap() == Fitness(1)

    mismatch = adaptatype.evaluate(_environment(humidity=1))
    assert not mismatch.ok
    assert isinstance(mismatch.error, NoMatchingFactorsError)
    assert mismatch.fitness_or(Fitness(0)) == Fitness(0)
    with pytest.raises(NoMatchingFactorsError):
        mismatch.unwrap()


def test_adaptatype_owns_an_immutable_copy_of_its_adaptations() -> None:
    adaptations = [Adaptation(TEMPERATURE, _constant(0.5))]
    adaptatype = Adaptatype(adaptations)
    adaptations.append(Adaptation(HUMIDITY, _constant(0.1)))
    assert len(adaptatype) == 1
    assert isinstance(adaptatype.adaptations, tuple)


def test_blend_failure_is_an_evaluation_error() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, _constant(0.5)), Adaptation(HUMIDITY, _constant(0.4))])
    with pytest.raises(EvaluationError) as err:
        adaptatype.fitness(_environment(temperature=10), weighted_blend([1.0, 1.0]))
    assert isinstance(err.value.cause, ValueError)
    assert err.value.context["blend"] == "blend"


def test_evaluate_reports_blend_failure_as_outcome() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, _constant(0.5)), Adaptation(HUMIDITY, _constant(0.4))])
    outcome = adaptatype.evaluate(_environment(temperature=10), weighted_blend([1.0, 1.0]))
    assert outcome.ok is False
    assert isinstance(outcome.error, EvaluationError)


def test_blend_must_return_fitness() -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, _constant(0.5))])
    with pytest.raises(EvaluationError, match="expected Fitness"):
        adaptatype.fitness(_environment(temperature=10), lambda fitnesses: 0.5)


@pytest.mark.parametrize("trait, env", [(math.nan, 10.0), (12.0, math.nan)])
def test_shaped_fitness_rejects_nan(trait, env) -> None:
    adaptatype = Adaptatype([Adaptation(TEMPERATURE, ShapedEcoFitness(trait, DELTA))])
    with pytest.raises(EvaluationError, match="NaN"):
        adaptatype.fitness(_environment(temperature=env))
