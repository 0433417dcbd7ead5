"""
Scaling sweep for the stooge sort entry points, driven by a YAML config.

Usage (from repo root):
    python -m stoogesort.bench.runner experiments/configs/stooge_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or non-ok status
    - summary.csv             # median + IQR per (variant, n)

Design notes:
- For each size n, ONE dataset is generated and every variant sorts a copy of it.
- After a timed run finishes within the timeout, one extra untimed sort checks
  that (variant, n) produces an ordered permutation under the variant's
  comparator. A wrong result is recorded as status "invalid" (its samples are
  dropped); an exception there is recorded as status "error".
- On timeout/error/invalid at size n, larger sizes are skipped for that variant.
  Stooge sort is O(n^2.71); keep sizes modest and rely on the timeout.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

import stoogesort
from stoogesort.bench.measure import time_sort_call
from stoogesort.core import (
    key_order,
    natural_order,
    reverse_order,
    stooge_sort,
    stooge_sort_by,
    stooge_sort_by_key,
)
from stoogesort.datasets import make_dataset
from stoogesort.validate import assert_sorted_in_place

_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "variants",
]

KEY_FUNCS: Dict[str, Callable[[Any], Any]] = {
    "identity": lambda x: x,
    "abs": abs,
    "neg": lambda x: -x,
}


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class VariantSpec:
    label: str
    entry: str
    sort_fn: Callable[[List[Any]], None]
    cmp: Callable[[Any, Any], int]
    config: Dict[str, Any] = field(default_factory=dict)


# ------------------------- variants ------------------------- #

def _make_natural(config: Dict[str, Any]) -> Tuple[Callable[[List[Any]], None], Callable[[Any, Any], int]]:
    if config:
        raise ValueError(f"Variant 'natural' takes no config; got keys {sorted(config)}")
    return stooge_sort, natural_order


def _reject_unknown_keys(variant: str, config: Dict[str, Any], allowed: Tuple[str, ...]) -> None:
    unknown = sorted(set(config) - set(allowed))
    if unknown:
        raise ValueError(f"Variant '{variant}': unknown config keys {unknown}. Supported: {list(allowed)}")


def _make_by(config: Dict[str, Any]) -> Tuple[Callable[[List[Any]], None], Callable[[Any, Any], int]]:
    _reject_unknown_keys("by", config, ("descending",))
    cmp = natural_order
    if config.get("descending", False):
        cmp = reverse_order(natural_order)

    def _sort(seq: List[Any]) -> None:
        stooge_sort_by(seq, cmp)

    return _sort, cmp


def _make_by_key(config: Dict[str, Any]) -> Tuple[Callable[[List[Any]], None], Callable[[Any, Any], int]]:
    _reject_unknown_keys("by_key", config, ("key",))
    key_name = config.get("key", "identity")
    if key_name not in KEY_FUNCS:
        raise ValueError(f"Variant 'by_key': unknown key {key_name!r}. Supported: {sorted(KEY_FUNCS)}")
    key = KEY_FUNCS[key_name]

    def _sort(seq: List[Any]) -> None:
        stooge_sort_by_key(seq, key)

    return _sort, key_order(key)


ENTRY_POINTS = {
    "natural": _make_natural,
    "by": _make_by,
    "by_key": _make_by_key,
}


def resolve_variants(cfg_variants: List[Dict[str, Any]]) -> List[VariantSpec]:
    """Turn the config's `variants` list into callables, validating as we go."""
    specs: List[VariantSpec] = []
    seen = set()
    for entry in cfg_variants:
        if not isinstance(entry, dict):
            raise ValueError(f"Each variant must be a mapping; got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each variant must have a string 'name' field")
        if name not in ENTRY_POINTS:
            raise ValueError(f"Unknown variant {name!r}. Supported: {sorted(ENTRY_POINTS)}")

        label = entry.get("label", name)
        if label in seen:
            raise ValueError(f"Duplicate variant label in config: {label}")
        seen.add(label)

        config = entry.get("config", {})
        if config is None:
            config = {}
        elif not isinstance(config, dict):
            raise ValueError(f"Variant '{label}': 'config' must be a dict if provided")

        sort_fn, cmp = ENTRY_POINTS[name](config)
        specs.append(VariantSpec(label=label, entry=name, sort_fn=sort_fn, cmp=cmp, config=config))
    return specs


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
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
        "stoogesort": stoogesort.__version__,
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
    }


# ------------------------- summary ------------------------- #

SUMMARY_COLUMNS = ["variant", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


def aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    """Median / IQR / min / max of sample times per (variant, n)."""
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    times = df.groupby(["variant", "n"])["time_ns"]
    out = times.agg(samples_ok="count", median_ns="median", min_ns="min", max_ns="max")
    quartiles = times.quantile([0.25, 0.75]).unstack()
    out["iqr_ns"] = quartiles[0.75] - quartiles[0.25]
    out = out.reset_index()

    int_cols = ["n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]
    out[int_cols] = out[int_cols].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["variant", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Stooge Sort Scaling (median ± IQR in ms)")
    table.add_column("Variant", style="bold")
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for variant in summary["variant"].unique():
        row = [variant]
        for n in picks:
            s = summary[(summary["variant"] == variant) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                median_ms = int(s["median_ns"].iloc[0]) / 1e6
                iqr_ms = int(s["iqr_ns"].iloc[0]) / 1e6
                row.append(f"{median_ms:.2f} ± {iqr_ms:.2f}")
        table.add_row(*row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def _check_output(spec: VariantSpec, base_a: List[Any]) -> Optional[Tuple[str, str]]:
    """Sort a fresh copy and return (status, message) if it is not a sorted permutation."""
    out = list(base_a)
    try:
        spec.sort_fn(out)
    except Exception as e:
        return "error", f"validation failed: {e!r}"
    try:
        assert_sorted_in_place(base_a, out, spec.cmp)
    except AssertionError as e:
        return "invalid", str(e)
    return None


def run_experiment(config_path: Path) -> Path:
    cfg = _load_yaml(config_path)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a YAML mapping: {config_path}")

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    validate = bool(cfg.get("validate", True))
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

    # Variants are resolved before the run directory is created.
    variants = resolve_variants(list(cfg["variants"]))
    if not variants:
        raise ValueError("Config 'variants' must list at least one variant")

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = {v.label: False for v in variants}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Variants:[/bold] {', '.join(v.label for v in variants)}")
    _console.print()

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for spec in variants:
            if skipped[spec.label]:
                continue

            record = {"variant": spec.label, "entry": spec.entry, "n": n, "config": spec.config}

            res = time_sort_call(
                variant=spec.label,
                sort_fn=spec.sort_fn,
                a=base_a,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
            )

            status = res["status"]
            if status == "error":
                skipped[spec.label] = True
                _append_jsonl({**record, "status": "error", "error": res["error"]}, results_path)
                continue

            # Only sizes that finished within the timeout are checked.
            if validate and status == "ok":
                problem = _check_output(spec, base_a)
                if problem is not None:
                    skipped[spec.label] = True
                    bad_status, message = problem
                    _append_jsonl({**record, "status": bad_status, "error": message}, results_path)
                    _console.print(f"[bold red]{spec.label} {bad_status} at n={n}:[/bold red] {message}")
                    continue

            for trial, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {**record, "dataset": dataset_spec, "trial": trial, "time_ns": int(t_ns)},
                    results_path,
                )

            if status == "timeout":
                skipped[spec.label] = True
                _append_jsonl(
                    {**record, "status": "timeout", "timed_out_on_repeat": res["timed_out_on_repeat"]},
                    results_path,
                )

    summary_df = aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a stooge sort scaling sweep from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args()


def main() -> None:
    args = _parse_args()
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
