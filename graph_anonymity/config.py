"""Loading and validating anonymisation run settings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .kdegree import DEFAULT_MAX_ATTEMPTS, NOISE_ADDITION

ALGORITHM_NAMES = ("kdegree", "ksymmetry")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DegreeConfig:
    noise_addition: int = NOISE_ADDITION
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None


@dataclass(frozen=True)
class AnonymizationConfig:
    k: int = 2
    algorithm: str = "kdegree"
    degree: DegreeConfig = field(default_factory=DegreeConfig)
    log_level: str = "INFO"

    def with_overrides(self, **overrides: Any) -> "AnonymizationConfig":
        degree_keys = {"noise_addition", "max_attempts", "seed"}
        degree = {key: value for key, value in overrides.items() if key in degree_keys and value is not None}
        top = {key: value for key, value in overrides.items() if key not in degree_keys and value is not None}
        return validate_config(replace(self, degree=replace(self.degree, **degree), **top))


def _optional_int(value: Any, *, name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{name}` must be an integer or null.")
    return value


def validate_config(config: AnonymizationConfig) -> AnonymizationConfig:
    if isinstance(config.k, bool) or not isinstance(config.k, int) or config.k < 1:
        raise ValueError("`k` must be a positive integer.")
    if config.algorithm not in ALGORITHM_NAMES:
        raise ValueError(f"`algorithm` must be one of {ALGORITHM_NAMES}.")
    if config.log_level.upper() not in LOG_LEVELS:
        raise ValueError(f"`log_level` must be one of {LOG_LEVELS}.")
    if config.degree.noise_addition < 1:
        raise ValueError("`degree.noise_addition` must be at least 1.")
    if config.degree.max_attempts is not None and config.degree.max_attempts < 1:
        raise ValueError("`degree.max_attempts` must be at least 1 or null.")
    return config


def config_from_dict(data: Dict[str, Any]) -> AnonymizationConfig:
    degree_data = data.get("degree", {})
    degree_cfg = DegreeConfig(
        noise_addition=int(degree_data.get("noise_addition", NOISE_ADDITION)),
        max_attempts=_optional_int(degree_data.get("max_attempts", DEFAULT_MAX_ATTEMPTS), name="degree.max_attempts"),
        seed=_optional_int(degree_data.get("seed"), name="degree.seed"),
    )
    return validate_config(
        AnonymizationConfig(
            k=data.get("k", 2),
            algorithm=str(data.get("algorithm", "kdegree")),
            degree=degree_cfg,
            log_level=str(data.get("log_level", "INFO")),
        )
    )


def load_config(path: Path) -> AnonymizationConfig:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("configuration file must hold a JSON object.")
    return config_from_dict(data)
