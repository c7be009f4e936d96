"""
Experiment configuration.

An experiment is a YAML file:

    experiment_name: varying_range
    output_dir: experiments/results
    seed: 42
    repeats: 5
    warmup: true
    disable_gc: true
    timeout_seconds: 10.0
    algorithms:
      - counting_sort_stable
      - name: bucket_sort          # dict form is accepted too
    cases:
      - label: "[0, 100]"
        n: 1000
        dataset: {dist: uniform, params: {range: [0, 100]}}

An optional free-text `description` (what the experiment measures and what to
expect) is echoed to the console ahead of the summary table.

Instead of `cases`, a scaling sweep may give one `dataset` plus a list of
`sizes`; each size becomes a case labelled "n=<size>".

Public API (stable):
    CaseSpec, ExperimentConfig
    load_config(path) -> ExperimentConfig
    parse_config(cfg: dict) -> ExperimentConfig
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from distsort.algorithms import ALGORITHMS
from distsort.datasets import SUPPORTED_DISTS

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "algorithms",
)

__all__ = ["CaseSpec", "ExperimentConfig", "REQUIRED_KEYS", "load_config", "parse_config"]


@dataclass(frozen=True)
class CaseSpec:
    label: str
    n: int
    dataset: Dict[str, Any] = field(hash=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "n": self.n, "dataset": self.dataset}


@dataclass(frozen=True)
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    algorithms: Tuple[str, ...]
    cases: Tuple[CaseSpec, ...]
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form, written next to the results as config_resolved.yaml."""
        return {
            "experiment_name": self.experiment_name,
            "output_dir": str(self.output_dir),
            "seed": self.seed,
            "repeats": self.repeats,
            "warmup": self.warmup,
            "disable_gc": self.disable_gc,
            "timeout_seconds": self.timeout_seconds,
            "algorithms": list(self.algorithms),
            "cases": [c.to_dict() for c in self.cases],
            "description": self.description,
        }


def load_config(path: Path) -> ExperimentConfig:
    with Path(path).open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    return parse_config(cfg)


def parse_config(cfg: Any) -> ExperimentConfig:
    """Validate a raw config mapping; raises ValueError on any problem."""
    if not isinstance(cfg, dict):
        raise ValueError("Config must be a YAML mapping")

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    repeats = int(cfg["repeats"])
    if repeats < 1:
        raise ValueError("Config 'repeats' must be >= 1")
    timeout_seconds = float(cfg["timeout_seconds"])
    if timeout_seconds <= 0:
        raise ValueError("Config 'timeout_seconds' must be positive")

    return ExperimentConfig(
        experiment_name=str(cfg["experiment_name"]),
        output_dir=Path(cfg["output_dir"]),
        seed=int(cfg["seed"]),
        repeats=repeats,
        warmup=bool(cfg["warmup"]),
        disable_gc=bool(cfg["disable_gc"]),
        timeout_seconds=timeout_seconds,
        algorithms=_parse_algorithms(cfg["algorithms"]),
        cases=_parse_cases(cfg),
        description=str(cfg.get("description") or "").strip(),
    )


# ------------------------- helpers ------------------------- #


def _parse_algorithms(entries: Any) -> Tuple[str, ...]:
    if not isinstance(entries, list) or not entries:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    names: List[str] = []
    for entry in entries:
        name = entry.get("name") if isinstance(entry, dict) else entry
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must be a name or a mapping with a string 'name' field")
        if name in names:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        if name not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {name!r}. Known: {list(ALGORITHMS)}")
        names.append(name)
    return tuple(names)


def _parse_cases(cfg: Dict[str, Any]) -> Tuple[CaseSpec, ...]:
    if "cases" in cfg:
        raw_cases = cfg["cases"]
        if not isinstance(raw_cases, list) or not raw_cases:
            raise ValueError("Config 'cases' must be a non-empty list")
    elif "sizes" in cfg and "dataset" in cfg:
        sizes = cfg["sizes"]
        if not isinstance(sizes, list) or not sizes:
            raise ValueError("Config 'sizes' must be a non-empty list of positive integers")
        raw_cases = [{"label": f"n={n}", "n": n, "dataset": cfg["dataset"]} for n in sizes]
    else:
        raise ValueError("Config needs either 'cases' or both 'sizes' and 'dataset'")

    cases: List[CaseSpec] = []
    labels = set()
    for i, raw in enumerate(raw_cases):
        if not isinstance(raw, dict):
            raise ValueError(f"cases[{i}] must be a mapping")
        for key in ("n", "dataset"):
            if key not in raw:
                raise ValueError(f"cases[{i}] is missing {key!r}")
        n = raw["n"]
        if not isinstance(n, int) or isinstance(n, bool) or n < 0:
            raise ValueError(f"cases[{i}].n must be a nonnegative integer; got {n!r}")
        dataset = raw["dataset"]
        if not isinstance(dataset, dict) or dataset.get("dist") not in SUPPORTED_DISTS:
            raise ValueError(
                f"cases[{i}].dataset.dist must be one of {sorted(SUPPORTED_DISTS)}"
            )
        label = str(raw.get("label", f"case{i}"))
        if label in labels:
            raise ValueError(f"Duplicate case label in config: {label}")
        labels.add(label)
        cases.append(CaseSpec(label=label, n=n, dataset=dict(dataset)))
    return tuple(cases)
