import csv
import os

from kruskal_maze.metrics_simulator import aggregate_results, main, run_single, write_csv


def test_run_single_reports_carving_counters():
    row = run_single(5, seed=1)
    assert row["size"] == 5
    assert row["walls_removed"] == 24
    assert row["samples"] == row["walls_removed"] + row["discarded"]
    assert 0 < row["acceptance_rate"] <= 1
    assert row["path_length"] >= 9
    assert row["elapsed_sec"] >= 0


def test_run_single_is_reproducible():
    a, b = run_single(7, seed=4), run_single(7, seed=4)
    assert a["samples"] == b["samples"]
    assert a["path_length"] == b["path_length"]


def test_run_single_empty_maze():
    row = run_single(0, seed=0)
    assert row["samples"] == 0
    assert row["acceptance_rate"] == 0
    assert row["path_length"] == 0


def test_aggregate_groups_by_size():
    rows = [run_single(3, seed=i) for i in range(3)] + [run_single(4, seed=i) for i in range(2)]
    summary = aggregate_results(rows)
    assert [(s["size"], s["count"]) for s in summary] == [(3, 3), (4, 2)]
    assert summary[0]["walls_removed_avg"] == 8
    assert summary[0]["walls_removed_stdev"] == 0
    assert summary[1]["path_length_min"] <= summary[1]["path_length_max"]


def test_write_csv_skips_empty(tmp_path):
    target = tmp_path / "nothing.csv"
    write_csv(str(target), [])
    assert not target.exists()


def test_main_writes_results(tmp_path, capsys):
    out_dir = tmp_path / "metrics"
    assert main(["--runs", "2", "--sizes", "2", "3", "--seed", "7", "--out_dir", str(out_dir)]) == 0
    assert "Wrote results to" in capsys.readouterr().out

    with open(os.path.join(out_dir, "raw_results.csv"), newline="") as f:
        raw = list(csv.DictReader(f))
    assert len(raw) == 4
    assert [r["seed"] for r in raw] == ["7", "8", "7", "8"]
    with open(os.path.join(out_dir, "summary.csv"), newline="") as f:
        assert len(list(csv.DictReader(f))) == 2
