"""
CLI to run batches of shortest-path searches.

Reads a YAML job file, loads each job's grid map or edge list, runs A* or
Dijkstra, prints the rendered result and optionally writes a results CSV.

Example jobs file:

    jobs:
      - name: sample_graph
        kind: dijkstra
        input: graph.txt
        source: 0
      - name: sample_map
        kind: astar
        input: map.txt
        start: [0, 0]        # optional, defaults to the top-left cell
        goal: [4, 4]         # optional, defaults to the bottom-right cell
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence
import argparse
import csv
import logging
import time

import yaml

from astar_engine import SimpleAStarEngine
from config import DEFAULT_JOBS_FILE, DEFAULT_UNDIRECTED, LOG_LEVEL, configure_logging
from dijkstra_engine import SimpleDijkstraEngine
from errors import SearchError
from loaders import load_edge_list, load_grid
from nodes import Cell, as_cell
from rendering import format_distances, format_path, render_path

logger = logging.getLogger(__name__)

JOB_KINDS = ("dijkstra", "astar")

RESULT_FIELDS = [
    "job",
    "kind",
    "status",
    "reachable",
    "path_length",
    "expanded",
    "duration_sec",
    "error",
]


@dataclass(frozen=True)
class JobConfig:
    name: str
    kind: str
    input: Path
    source: Optional[int] = None
    start: Optional[Cell] = None
    goal: Optional[Cell] = None
    undirected: bool = DEFAULT_UNDIRECTED


@dataclass(frozen=True)
class RunnerConfig:
    jobs: Sequence[JobConfig]


def load_config(path: Path) -> RunnerConfig:
    """
    Parse a jobs file. Relative input paths resolve against the file's folder.

    Raises:
        ValueError: missing fields or an unknown job kind.
    """
    data = yaml.safe_load(Path(path).read_text()) or {}
    raw_jobs = data.get("jobs")
    if not raw_jobs:
        raise ValueError(f"{path}: no jobs defined")

    base = Path(path).parent
    jobs = []
    for i, job in enumerate(raw_jobs):
        try:
            name = str(job["name"])
            kind = str(job["kind"]).lower()
            input_path = Path(job["input"])
        except KeyError as exc:
            raise ValueError(f"{path}: job #{i} is missing field {exc.args[0]!r}") from exc
        if kind not in JOB_KINDS:
            raise ValueError(f"{path}: job {name!r} has unknown kind {kind!r}")
        if not input_path.is_absolute():
            input_path = base / input_path
        undirected = job.get("undirected", DEFAULT_UNDIRECTED)
        if not isinstance(undirected, bool):
            raise ValueError(f"{path}: job {name!r} has non-boolean undirected {undirected!r}")
        source = job.get("source")
        if source is not None and (isinstance(source, bool) or not isinstance(source, int)):
            raise ValueError(f"{path}: job {name!r} has non-integer source {source!r}")
        try:
            start = as_cell(job["start"]) if job.get("start") is not None else None
            goal = as_cell(job["goal"]) if job.get("goal") is not None else None
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{path}: job {name!r}: {exc}") from exc
        jobs.append(
            JobConfig(
                name=name,
                kind=kind,
                input=input_path,
                source=source,
                start=start,
                goal=goal,
                undirected=undirected,
            )
        )
    return RunnerConfig(jobs=jobs)


def run_jobs(config_path: Path, results_csv: Path | None = None) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()
    logger.info("queued %d jobs from %s", len(cfg.jobs), config_path)

    results: List[Dict[str, object]] = []
    for job in cfg.jobs:
        res = run_job(job)
        results.append(res)
        if res["status"] == "error":
            logger.warning("job=%s kind=%s failed: %s", job.name, job.kind, res["error"])
        else:
            logger.info(
                "job=%s kind=%s status=%s duration=%.4fs",
                job.name, job.kind, res["status"], res["duration_sec"],
            )

    if results_csv:
        write_results_csv(results, results_csv)

    logger.info("completed %d jobs in %.2fs", len(results), time.time() - start)
    return results


def run_job(job: JobConfig) -> Dict[str, object]:
    """
    Run one job. Input errors are recorded on the result instead of raised,
    so one bad job does not abort the batch.
    """
    res: Dict[str, object] = {
        "job": job.name,
        "kind": job.kind,
        "status": "ok",
        "reachable": None,
        "path_length": None,
        "expanded": 0,
        "error": "",
        "output": "",
    }
    start_run = time.time()
    try:
        if job.kind == "dijkstra":
            _run_dijkstra(job, res)
        else:
            _run_astar(job, res)
    except SearchError as exc:
        res["status"] = "error"
        res["error"] = f"{type(exc).__name__}: {exc}"
    res["duration_sec"] = time.time() - start_run
    return res


def _run_dijkstra(job: JobConfig, res: Dict[str, object]) -> None:
    data = load_edge_list(job.input, undirected=job.undirected)
    # A source set on the job overrides the one stored in the file.
    source = job.source if job.source is not None else data.source
    result = SimpleDijkstraEngine().search(data.graph, source)
    res["reachable"] = result.reachable
    res["expanded"] = result.expanded
    res["output"] = format_distances(result.dist, source)


def _run_astar(job: JobConfig, res: Dict[str, object]) -> None:
    grid = load_grid(job.input)
    start = job.start if job.start is not None else (0, 0)
    goal = job.goal if job.goal is not None else (grid.rows - 1, grid.cols - 1)
    result = SimpleAStarEngine().search(grid, start, goal)
    res["expanded"] = result.expanded
    if result.found:
        res["path_length"] = len(result.path) - 1
        res["output"] = format_path(result.path) + "\n" + render_path(grid, result.path, start, goal)
    else:
        res["status"] = "no_path"
        res["output"] = format_path(result.path)


def write_results_csv(results: Iterable[Dict[str, object]], path: Path) -> None:
    """
    Write per-job results to CSV for downstream analysis.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key, "") for key in RESULT_FIELDS})


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run batches of Dijkstra / A* searches.")
    parser.add_argument("config", nargs="?", type=Path, default=DEFAULT_JOBS_FILE)
    parser.add_argument("--csv", type=Path, default=None, help="write per-job results here")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    results = run_jobs(args.config, results_csv=args.csv)
    for res in results:
        print(f"== {res['job']} ({res['kind']}) ==")
        print(res["output"] or res["error"])
    if args.csv:
        print(f"Wrote results to {args.csv}")
    return 1 if any(res["status"] == "error" for res in results) else 0


if __name__ == "__main__":
    raise SystemExit(main())
