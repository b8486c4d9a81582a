"""Configuration utilities.

A maximizer config names the algorithm, an optional seed and the algorithm's
parameters. It can be written as YAML or JSON::

    algorithm: genetic
    seed: 7
    parameters:
      population_size: 30
      max_generations: 50
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

from hicupp.engine.parameters import (
    Algorithm,
    AlgorithmParameters,
    default_parameters,
    parameters_from_mapping,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MaximizerConfig:
    algorithm: Algorithm = Algorithm.SIMPLEX
    seed: int | None = None
    parameters: AlgorithmParameters | None = None

    def resolved_parameters(self) -> AlgorithmParameters:
        if self.parameters is not None:
            return self.parameters
        return default_parameters(self.algorithm)

    def as_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm.name.lower(),
            "seed": self.seed if self.seed is not None else -1,
            "parameters": asdict(self.resolved_parameters()),
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MaximizerConfig:
        unknown = sorted(set(data) - {"algorithm", "seed", "parameters"})
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        algorithm = Algorithm.resolve(data.get("algorithm", Algorithm.SIMPLEX))
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"seed must be an integer, got {seed!r}")
        raw_parameters = data.get("parameters")
        parameters = (
            parameters_from_mapping(algorithm, raw_parameters) if raw_parameters is not None else None
        )
        return cls(algorithm=algorithm, seed=seed, parameters=parameters)


def load_config(path: str | Path) -> MaximizerConfig:
    """Load a :class:`MaximizerConfig` from a YAML or JSON file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file does not hold a mapping or names unknown keys.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")

    config = MaximizerConfig.from_mapping(data)
    _LOGGER.info("Loaded maximizer config from %s (algorithm=%s)", path, config.algorithm.display_name)
    return config


__all__ = ["MaximizerConfig", "load_config"]
