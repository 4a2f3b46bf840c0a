import argparse
import csv
import os
import random
import statistics
import time

# Optional plotting
try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    HAS_MPL = True
except Exception:
    HAS_MPL = False

from .maze import Maze


DEFAULT_SIZES = [5, 10, 25, 50]

METRICS = [
    "elapsed_sec",
    "samples",
    "discarded",
    "walls_removed",
    "acceptance_rate",
    "path_length",
]


def run_single(size, seed=None):
    """Builds one maze and returns its timing and carving counters as a flat row."""
    t0 = time.perf_counter()
    maze = Maze(size, rng=random.Random(seed))
    elapsed = time.perf_counter() - t0

    stats = maze.carve_stats
    return {
        "size": size,
        "seed": seed,
        "elapsed_sec": elapsed,
        "samples": stats["samples"],
        "discarded": stats["discarded"],
        "walls_removed": stats["walls_removed"],
        "acceptance_rate": stats["walls_removed"] / stats["samples"] if stats["samples"] else 0,
        "path_length": len(maze.path),
    }


def aggregate_results(rows, group_by=("size",)):
    grouped = {}
    for r in rows:
        key = tuple(r[k] for k in group_by)
        grouped.setdefault(key, []).append(r)

    def agg_stat(values):
        if not values:
            return {"avg": 0, "min": 0, "max": 0, "stdev": 0}
        return {
            "avg": statistics.mean(values),
            "min": min(values),
            "max": max(values),
            "stdev": statistics.pstdev(values) if len(values) > 1 else 0,
        }

    summary = []
    for key, items in grouped.items():
        entry = dict(zip(group_by, key))
        entry["count"] = len(items)
        for m in METRICS:
            stats = agg_stat([it[m] for it in items])
            for stat_name, value in stats.items():
                entry[f"{m}_{stat_name}"] = value
        summary.append(entry)
    return summary


def write_csv(path, rows):
    if not rows:
        return
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for r in rows:
            writer.writerow(r)


def plot_metric(summary, metric_key, out_path):
    if not HAS_MPL:
        return
    sizes = [row["size"] for row in summary]
    values = [row.get(metric_key, 0) for row in summary]
    plt.figure(figsize=(8, 5))
    plt.plot(sizes, values, marker="o")
    plt.xlabel("size")
    plt.ylabel(metric_key)
    plt.tight_layout()
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    plt.savefig(out_path)
    plt.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build many mazes and record carving metrics.")
    parser.add_argument("--runs", type=int, default=10, help="Mazes built per size")
    parser.add_argument("--sizes", type=int, nargs="*", default=DEFAULT_SIZES)
    parser.add_argument("--seed", type=int, default=None, help="Base seed; run i uses seed + i")
    parser.add_argument("--out_dir", default="metrics_output")
    args = parser.parse_args(argv)

    if any(size < 0 for size in args.sizes):
        parser.error("sizes must be non-negative integers")

    all_rows = []
    seed_base = args.seed if args.seed is not None else int(time.time())

    for size in args.sizes:
        for i in range(args.runs):
            all_rows.append(run_single(size, seed=seed_base + i))

    os.makedirs(args.out_dir, exist_ok=True)
    write_csv(os.path.join(args.out_dir, "raw_results.csv"), all_rows)

    summary = aggregate_results(all_rows)
    write_csv(os.path.join(args.out_dir, "summary.csv"), summary)

    if HAS_MPL:
        for metric in ["elapsed_sec_avg", "samples_avg", "acceptance_rate_avg", "path_length_avg"]:
            plot_metric(summary, metric, os.path.join(args.out_dir, f"{metric}.png"))

    print(f"Wrote results to {args.out_dir}")
    return 0


if __name__ == "__main__":
    main()
