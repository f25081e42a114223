"""
Tests for the YAML-driven batch runner.
"""

from pathlib import Path
import csv

import pytest

from search_runner import load_config, main, run_jobs

GRAPH = "5 6\n0 1 4\n0 2 2\n1 2 3\n1 3 2\n2 3 4\n3 4 1\n0\n"
MAP = "3 3\n0 0 0\n0 1 0\n0 0 0\n"


def _write_inputs(tmp_path: Path) -> None:
    (tmp_path / "graph.txt").write_text(GRAPH)
    (tmp_path / "map.txt").write_text(MAP)
    (tmp_path / "walled.txt").write_text("2 2\n0 1\n1 0\n")


def test_runs_small_batch(tmp_path: Path):
    """Smoke-test: one job of each kind, plus a goal that cannot be reached."""
    _write_inputs(tmp_path)
    cfg = tmp_path / "jobs.yml"
    cfg.write_text(
        """
jobs:
  - name: graph
    kind: dijkstra
    input: graph.txt
  - name: grid
    kind: astar
    input: map.txt
  - name: walled
    kind: astar
    input: walled.txt
"""
    )

    results = run_jobs(cfg)
    by_name = {res["job"]: res for res in results}

    assert by_name["graph"]["status"] == "ok"
    assert by_name["graph"]["reachable"] == 5
    assert "Vertex 4: 7" in by_name["graph"]["output"]

    assert by_name["grid"]["status"] == "ok"
    assert by_name["grid"]["path_length"] == 4
    assert by_name["grid"]["output"].startswith("Path found (5 steps):")

    assert by_name["walled"]["status"] == "no_path"
    assert by_name["walled"]["path_length"] is None


def test_bad_job_does_not_abort_batch(tmp_path: Path):
    _write_inputs(tmp_path)
    cfg = tmp_path / "jobs.yml"
    cfg.write_text(
        """
jobs:
  - name: blocked_goal
    kind: astar
    input: map.txt
    goal: [1, 1]
  - name: bad_source
    kind: dijkstra
    input: graph.txt
    source: 9
  - name: directed
    kind: dijkstra
    input: graph.txt
    source: 4
    undirected: false
"""
    )

    results = run_jobs(cfg)
    assert [res["status"] for res in results] == ["error", "error", "ok"]
    assert results[0]["error"].startswith("InvalidInputError")
    # Edges only leave lower-numbered vertices, so vertex 4 reaches nothing else.
    assert results[2]["reachable"] == 1
    assert results[2]["expanded"] == 1


def test_writes_results_csv(tmp_path: Path):
    _write_inputs(tmp_path)
    cfg = tmp_path / "jobs.yml"
    cfg.write_text("jobs:\n  - {name: grid, kind: astar, input: map.txt, start: [2, 0]}\n")
    out = tmp_path / "out" / "results.csv"

    run_jobs(cfg, results_csv=out)

    with out.open() as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert rows[0]["job"] == "grid"
    assert rows[0]["path_length"] == "2"


def test_load_config_resolves_paths_and_validates(tmp_path: Path):
    cfg = tmp_path / "jobs.yml"
    cfg.write_text("jobs:\n  - {name: a, kind: ASTAR, input: m.txt, start: [1, 2]}\n")
    job = load_config(cfg).jobs[0]
    assert job.kind == "astar"
    assert job.input == tmp_path / "m.txt"
    assert job.start == (1, 2)
    assert job.goal is None
    assert job.source is None

    cfg.write_text("jobs:\n  - {name: a, kind: bfs, input: m.txt}\n")
    with pytest.raises(ValueError):
        load_config(cfg)

    cfg.write_text("jobs:\n  - {name: a, input: m.txt}\n")
    with pytest.raises(ValueError):
        load_config(cfg)

    cfg.write_text("jobs: []\n")
    with pytest.raises(ValueError):
        load_config(cfg)


def test_main_prints_results(tmp_path: Path, capsys):
    _write_inputs(tmp_path)
    cfg = tmp_path / "jobs.yml"
    cfg.write_text("jobs:\n  - {name: graph, kind: dijkstra, input: graph.txt}\n")

    assert main([str(cfg), "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "== graph (dijkstra) ==" in out
    assert "Shortest distances from vertex 0:" in out


@pytest.mark.parametrize(
    "extra",
    [
        'undirected: "false"',
        "undirected: 0",
        "source: 2.5",
        'source: "1"',
        "start: [0.5, 0]",
        "goal: [1]",
    ],
)
def test_load_config_rejects_mistyped_fields(tmp_path: Path, extra: str):
    cfg = tmp_path / "jobs.yml"
    cfg.write_text(f"jobs:\n  - name: a\n    kind: dijkstra\n    input: g.txt\n    {extra}\n")
    with pytest.raises(ValueError):
        load_config(cfg)


def test_expanded_counts_come_from_the_engines(tmp_path: Path):
    _write_inputs(tmp_path)
    (tmp_path / "split.txt").write_text("4 1\n0 1 3\n0\n")
    cfg = tmp_path / "jobs.yml"
    cfg.write_text(
        "jobs:\n"
        "  - {name: split, kind: dijkstra, input: split.txt}\n"
        "  - {name: grid, kind: astar, input: map.txt}\n"
    )

    split, grid = run_jobs(cfg)
    assert split["reachable"] == 2
    assert split["expanded"] == 2
    assert 5 <= grid["expanded"] <= 8
