"""Maximization engine surfaces."""

from .candidates import convergence_gap, generate_random_axis, time_evaluation
from .interfaces import Strategy
from .maximizer import maximize
from .parameters import (
    Algorithm,
    AlgorithmParameters,
    AnnealingParameters,
    EvaluationBudget,
    GeneticParameters,
    GradientAscentParameters,
    SimplexParameters,
    algorithm_names,
    default_parameters,
    evaluation_budget,
    parameters_from_mapping,
)
from .strategies import (
    AnnealingStrategy,
    GeneticStrategy,
    GradientAscentStrategy,
    SimplexStrategy,
    strategy_for,
)
from .types import Chromosome, IterationStats, Solution

__all__ = [
    "Algorithm",
    "AlgorithmParameters",
    "AnnealingParameters",
    "AnnealingStrategy",
    "Chromosome",
    "EvaluationBudget",
    "GeneticParameters",
    "GeneticStrategy",
    "GradientAscentParameters",
    "GradientAscentStrategy",
    "IterationStats",
    "SimplexParameters",
    "SimplexStrategy",
    "Solution",
    "Strategy",
    "algorithm_names",
    "convergence_gap",
    "default_parameters",
    "evaluation_budget",
    "generate_random_axis",
    "maximize",
    "parameters_from_mapping",
    "strategy_for",
    "time_evaluation",
]
