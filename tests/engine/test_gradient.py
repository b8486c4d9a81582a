import numpy as np
import pytest

from hicupp.core.errors import NoConvergence
from hicupp.core.function import CallableFunction, wrap_for_evaluation
from hicupp.engine.parameters import AnnealingParameters, GradientAscentParameters
from hicupp.engine.strategies.gradient import GradientAscentStrategy
from hicupp.engine.types import Solution

CENTER = np.array([0.3, -0.2, 0.1])


@pytest.fixture
def bowl():
    return CallableFunction(fn=lambda x: 5.0 - float(np.sum((x - CENTER) ** 2)), dimensions=3)


def test_gradient_ascent_reaches_bowl_maximum(bowl):
    strategy = GradientAscentStrategy(parameters=GradientAscentParameters(max_iterations=400), seed=7)
    x = strategy.maximize(bowl)

    assert np.linalg.norm(x - CENTER) <= 0.02
    assert strategy.state()["converged"] >= 1


def test_gradient_ascent_without_converged_walker_raises():
    function = CallableFunction(fn=lambda x: 2000.0 + 1000.0 * float(x[0]), dimensions=5)
    strategy = GradientAscentStrategy(parameters=GradientAscentParameters(max_iterations=1), seed=13)

    with pytest.raises(NoConvergence, match="No solutions converged"):
        strategy.maximize(function)


def test_constant_function_settles_every_walker(constant_function):
    strategy = GradientAscentStrategy(seed=1)
    x = strategy.maximize(constant_function)

    assert len(strategy.history) == 1
    assert all(s.converged for s in strategy.solutions)
    assert np.linalg.norm(x) == pytest.approx(1.0)


def test_converged_walkers_are_frozen(bowl, recording_monitor):
    strategy = GradientAscentStrategy(
        parameters=GradientAscentParameters(max_iterations=400, converge_at_max_equals=False),
        seed=19,
    )
    snapshots = []
    recording_monitor.on_iteration = lambda _: snapshots.append(
        [(s.x.copy(), s.fx, s.converged) for s in strategy.solutions]
    )
    strategy.maximize(bowl, recording_monitor)
    snapshots.append([(s.x.copy(), s.fx, s.converged) for s in strategy.solutions])

    for before, after in zip(snapshots, snapshots[1:]):
        for (x0, fx0, done0), (x1, fx1, done1) in zip(before, after):
            if done0:
                assert done1
                assert np.array_equal(x0, x1)
                assert fx0 == fx1


def test_best_value_never_decreases(bowl):
    strategy = GradientAscentStrategy(parameters=GradientAscentParameters(max_iterations=400), seed=23)
    strategy.maximize(bowl)

    best = [stats.best for stats in strategy.history]
    assert best == sorted(best)


class TestStepRules:
    def test_step_leaving_the_box_converges_in_place(self):
        strategy = GradientAscentStrategy(seed=0)
        wrapper = wrap_for_evaluation(CallableFunction(fn=lambda x: 1.0 + float(x[0]), dimensions=2), None)
        solution = Solution(x=np.array([0.995, 0.0]), fx=1.995, gradient=np.array([3.0, 0.0]))

        strategy._step(solution, wrapper)

        assert solution.converged
        assert np.array_equal(solution.x, [0.995, 0.0])
        assert wrapper.evaluations == 0

    def test_negative_value_converges_in_place(self):
        strategy = GradientAscentStrategy(seed=0)
        wrapper = wrap_for_evaluation(CallableFunction(fn=lambda x: -1.0, dimensions=2), None)
        solution = Solution(x=np.array([0.0, 0.0]), fx=0.5, gradient=np.array([0.0, 2.0]))

        strategy._step(solution, wrapper)

        assert solution.converged
        assert solution.fx == 0.5
        assert np.array_equal(solution.x, [0.0, 0.0])

    def test_step_moves_along_unit_gradient(self):
        strategy = GradientAscentStrategy(parameters=GradientAscentParameters(learning_rate=0.1), seed=0)
        wrapper = wrap_for_evaluation(CallableFunction(fn=lambda x: 1.0 + float(x[1]), dimensions=2), None)
        solution = Solution(x=np.array([0.0, 0.0]), fx=1.0, gradient=np.array([0.0, 4.0]))

        strategy._step(solution, wrapper)

        assert not solution.converged
        assert solution.x == pytest.approx([0.0, 0.1])
        assert solution.fx == pytest.approx(1.1)
        assert solution.gradient == pytest.approx([0.0, 1.0])

    def test_backward_difference_when_forward_decreases(self):
        strategy = GradientAscentStrategy(seed=0)
        wrapper = wrap_for_evaluation(CallableFunction(fn=lambda x: 1.0 - 2.0 * float(x[0]), dimensions=1), None)
        solution = Solution(x=np.array([0.5]), fx=0.0)

        gradient = strategy._estimate_gradient(solution, wrapper)

        assert gradient == pytest.approx([-2.0], rel=1e-6)
        assert wrapper.evaluations == 2


def test_rejects_foreign_parameters():
    with pytest.raises(TypeError):
        GradientAscentStrategy(parameters=AnnealingParameters())  # type: ignore[arg-type]


def test_solution_gradient_defaults_to_zeros():
    solution = Solution(x=np.array([0.1, 0.2, 0.3]), fx=1.0)
    assert np.array_equal(solution.gradient, np.zeros(3))

    clone = solution.copy()
    clone.gradient[0] = 5.0
    assert solution.gradient[0] == 0.0
