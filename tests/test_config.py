"""
Tests for experiment config loading and validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from distsort.bench.config import REQUIRED_KEYS, CaseSpec, load_config, parse_config

CONFIG_DIR = Path(__file__).resolve().parents[1] / "experiments" / "configs"


def _base_cfg(**overrides):
    cfg = {
        "experiment_name": "unit",
        "output_dir": "out",
        "seed": 1,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 5,
        "algorithms": ["counting_sort_stable", {"name": "bucket_sort"}],
        "cases": [
            {"label": "small", "n": 10, "dataset": {"dist": "uniform", "params": {"range": [0, 9]}}},
        ],
    }
    cfg.update(overrides)
    return cfg


def test_parse_minimal_config() -> None:
    cfg = parse_config(_base_cfg())
    assert cfg.experiment_name == "unit"
    assert cfg.output_dir == Path("out")
    assert cfg.algorithms == ("counting_sort_stable", "bucket_sort")
    assert cfg.cases == (
        CaseSpec(label="small", n=10, dataset={"dist": "uniform", "params": {"range": [0, 9]}}),
    )
    assert cfg.timeout_seconds == 5.0
    assert cfg.description == ""


def test_description_is_kept_and_trimmed() -> None:
    cfg = parse_config(_base_cfg(description="Purpose: x\nExpected: y\n"))
    assert cfg.description == "Purpose: x\nExpected: y"
    assert cfg.to_dict()["description"] == cfg.description


def test_sizes_expand_into_cases() -> None:
    raw = _base_cfg(sizes=[100, 200], dataset={"dist": "normal"})
    del raw["cases"]
    cfg = parse_config(raw)
    assert [c.label for c in cfg.cases] == ["n=100", "n=200"]
    assert [c.n for c in cfg.cases] == [100, 200]
    assert all(c.dataset == {"dist": "normal"} for c in cfg.cases)


def test_to_dict_round_trips_through_parse() -> None:
    cfg = parse_config(_base_cfg())
    assert parse_config(cfg.to_dict()) == cfg


@pytest.mark.parametrize("key", REQUIRED_KEYS)
def test_missing_required_key(key: str) -> None:
    raw = _base_cfg()
    del raw[key]
    with pytest.raises(ValueError, match="Missing required config keys"):
        parse_config(raw)


@pytest.mark.parametrize(
    "overrides, match",
    [
        ({"algorithms": []}, "non-empty"),
        ({"algorithms": ["quick_sort"]}, "Unknown algorithm"),
        ({"algorithms": ["bucket_sort", "bucket_sort"]}, "Duplicate algorithm"),
        ({"algorithms": [{"config": {}}]}, "name"),
        ({"repeats": 0}, "repeats"),
        ({"timeout_seconds": 0}, "timeout_seconds"),
        ({"cases": []}, "cases"),
        ({"cases": [{"n": 5}]}, "dataset"),
        ({"cases": [{"n": -1, "dataset": {"dist": "normal"}}]}, "nonnegative"),
        ({"cases": [{"n": 5, "dataset": {"dist": "zipf"}}]}, "dist"),
        (
            {
                "cases": [
                    {"label": "x", "n": 1, "dataset": {"dist": "normal"}},
                    {"label": "x", "n": 2, "dataset": {"dist": "normal"}},
                ]
            },
            "Duplicate case label",
        ),
    ],
)
def test_invalid_configs(overrides, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        parse_config(_base_cfg(**overrides))


def test_no_cases_and_no_sizes() -> None:
    raw = _base_cfg()
    del raw["cases"]
    with pytest.raises(ValueError, match="either 'cases'"):
        parse_config(raw)


def test_non_mapping_config() -> None:
    with pytest.raises(ValueError, match="mapping"):
        parse_config(["not", "a", "mapping"])


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "exp.yaml"
    path.write_text(yaml.safe_dump(_base_cfg()), encoding="utf-8")
    assert load_config(path) == parse_config(_base_cfg())


@pytest.mark.parametrize("path", sorted(CONFIG_DIR.glob("*.yaml")), ids=lambda p: p.name)
def test_shipped_configs_are_valid(path: Path) -> None:
    cfg = load_config(path)
    assert cfg.cases
    assert "bucket_sort" in cfg.algorithms
    assert cfg.description.startswith("Purpose:")
    assert "\nExpected:" in cfg.description
