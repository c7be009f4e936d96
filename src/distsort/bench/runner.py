"""
Experiment runner: orchestrates a benchmarking sweep from a YAML config.

Usage (from repo root):
    distsort run experiments/configs/01_varying_range.yaml
    distsort demo
    python -m distsort.bench.runner run experiments/configs/02_distributions.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used (sizes expanded to cases)
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample, plus status lines
    - summary.csv             # median + IQR per (algo, case)
    - (console) rich summary table

Design notes:
- For each case we generate ONE dataset and give a copy of it to every algorithm.
- The harness handles warmup/GC/verification; we keep timing clean.
- On timeout/error for an algorithm, we skip that algorithm for the remaining cases.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.text import Text
from tqdm import tqdm

from distsort.algorithms import get_algorithm
from distsort.bench.config import ExperimentConfig, load_config
from distsort.bench.logging_utils import configure_logging
from distsort.bench.measure import time_sort_call
from distsort.bench.report import print_summary_table, run_demo
from distsort.datasets import make_dataset

logger = logging.getLogger(__name__)

_console = Console()

SUMMARY_COLUMNS = [
    "algo", "case", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "median_ms", "verified",
]


# ------------------------- helpers: IO & meta ------------------------- #

def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _iqr(s: pd.Series) -> float:
    return s.quantile(0.75) - s.quantile(0.25)


def aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    """Median/IQR/min/max of the successful samples per (algo, case)."""
    empty = pd.DataFrame(columns=SUMMARY_COLUMNS)
    if not jsonl_path.exists():
        return empty
    # Labels like "1000" must stay strings to match the config
    df = pd.read_json(jsonl_path, lines=True, dtype={"case": str})
    if "time_ns" not in df.columns:
        return empty
    df = df[df["time_ns"].notna()]
    if df.empty:
        return empty

    out = (
        df.groupby(["algo", "case", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
            verified=("verified", "all"),
        )
    )
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    out["median_ms"] = out["median_ns"] / 1e6
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n", "case"], ignore_index=True)


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg: ExperimentConfig = load_config(config_path)

    run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg.to_dict(), cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    algos = {name: get_algorithm(name) for name in cfg.algorithms}
    rng = np.random.default_rng(cfg.seed)

    # Set on timeout/error
    skipped = {name: False for name in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(algos)}")
    _console.print()

    for case in tqdm(cfg.cases, desc="Cases", unit="case"):
        base_a = make_dataset(case.n, case.dataset, rng)
        logger.debug("case %s: generated %d values", case.label, len(base_a))

        for name, fn in algos.items():
            if skipped[name]:
                continue

            res = time_sort_call(
                algo_name=name,
                algo_fn=fn,
                a=base_a,
                repeats=cfg.repeats,
                warmup=cfg.warmup,
                disable_gc=cfg.disable_gc,
                timeout_seconds=cfg.timeout_seconds,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": name,
                        "case": case.label,
                        "n": case.n,
                        "dataset": case.dataset,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "verified": res["verified"],
                    },
                    results_path,
                )

            status = res["status"]
            if status in ("timeout", "error"):
                skipped[name] = True
                logger.warning("%s: %s on case %s; skipping remaining cases", name, status, case.label)
                _append_jsonl(
                    {
                        "algo": name,
                        "case": case.label,
                        "n": case.n,
                        "status": status,
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "error": res["error"],
                    },
                    results_path,
                )

    summary_df = aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    if cfg.description:
        _console.print(Text(cfg.description, style="italic"))
    print_summary_table(_console, summary_df, [c.label for c in cfg.cases], list(algos))

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for p in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {p}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="distsort", description="Benchmark distribution sorts on synthetic integer data.")
    p.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    sub = p.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Run a benchmark experiment from a YAML config")
    run_p.add_argument("config", type=str, help="Path to YAML experiment config")

    sub.add_parser("demo", help="Sort the fixed demo array with every algorithm")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.log_level, console=_console)

    if args.command == "demo":
        run_demo(_console)
        return

    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
