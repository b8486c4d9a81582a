import logging

import numpy as np
import pytest

from hicupp.core.errors import Cancelled
from hicupp.engine.maximizer import maximize
from hicupp.engine.parameters import Algorithm, GeneticParameters, SimplexParameters
from hicupp.engine.strategies import (
    AnnealingStrategy,
    GeneticStrategy,
    GradientAscentStrategy,
    SimplexStrategy,
    strategy_for,
)

# Genetic needs an equal-streak stop to settle on a flat objective.
FLAT_PARAMETERS = {
    Algorithm.GENETIC: GeneticParameters(converge_at_max_equals=True, max_equals=2),
}


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        (0, SimplexStrategy),
        ("annealing", AnnealingStrategy),
        (Algorithm.GENETIC, GeneticStrategy),
        (3, GradientAscentStrategy),
    ],
)
def test_strategy_for_dispatches(selector, expected):
    strategy = strategy_for(selector, seed=1)
    assert isinstance(strategy, expected)
    assert strategy.seed == 1


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_every_algorithm_maximizes_flat_function(algorithm, constant_function, recording_monitor):
    x = maximize(
        constant_function,
        algorithm,
        recording_monitor,
        FLAT_PARAMETERS.get(algorithm),
        seed=17,
    )

    assert x.shape == (constant_function.argument_count,)
    assert recording_monitor.iterations[0] == 1
    assert len(recording_monitor.lines) == len(recording_monitor.iterations)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_cancellation_stops_before_next_evaluation(algorithm, concave_function, counting_factory, monitor_factory):
    function = counting_factory(concave_function.evaluate, concave_function.argument_count)
    monitor = monitor_factory(cancel_after_evaluations=1)

    with pytest.raises(Cancelled):
        maximize(function, algorithm, monitor, seed=2)

    assert monitor.evaluations == 1
    assert len(function.calls) == 1


def test_monitor_does_not_change_the_result(concave_function, recording_monitor):
    silent = maximize(concave_function, Algorithm.SIMPLEX, seed=31)
    watched = maximize(concave_function, Algorithm.SIMPLEX, recording_monitor, seed=31)

    assert np.array_equal(silent, watched)


def test_simplex_is_the_default(concave_function, concave_center):
    x = maximize(concave_function, seed=4)
    assert np.max(np.abs(x - concave_center)) <= 1e-3


def test_mismatched_parameters_raise_type_error(concave_function):
    with pytest.raises(TypeError):
        maximize(concave_function, "genetic", parameters=SimplexParameters())


def test_strategy_for_names_expected_variant():
    with pytest.raises(TypeError, match="Genetic algorithm requires GeneticParameters, got SimplexParameters"):
        strategy_for(Algorithm.GENETIC, SimplexParameters())
    with pytest.raises(TypeError, match="Not an algorithm parameter variant"):
        strategy_for(Algorithm.SIMPLEX, {"max_iterations": 3})  # type: ignore[arg-type]


@pytest.mark.parametrize("selector", [7, -1, "newton"])
def test_unknown_algorithm_raises_value_error(concave_function, selector):
    with pytest.raises(ValueError):
        maximize(concave_function, selector)


def test_maximize_logs_run(constant_function, caplog):
    with caplog.at_level(logging.INFO, logger="hicupp.engine.maximizer"):
        maximize(constant_function, Algorithm.SIMPLEX, seed=0)

    messages = [record.getMessage() for record in caplog.records]
    assert any("algorithm=Simplex dimensions=4" in message for message in messages)
    assert any("Maximizer finished" in message for message in messages)
