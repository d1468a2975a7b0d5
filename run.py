"""CLI entrypoint: load puzzle(s), run solver, and report metrics."""

import argparse
import csv
import os
from pathlib import Path

from solver import solve_puzzle
from src.utils.trace import enable_tracing, get_tracer, reset_tracer
from src.hills.loader import load_puzzles

SUPPORTED_SUFFIXES = [".txt", ".json", ".jsonl", ".parquet", ".csv"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Find the shortest climbs on hill-climbing height maps")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=os.environ.get("HILLS_DATA_PATH"),
        help="Path to a puzzle file or directory of puzzles (default: $HILLS_DATA_PATH)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    parser.add_argument(
        "--trace-dir",
        type=Path,
        default=None,
        help="Optional directory to write one trace CSV per puzzle.",
    )
    parser.add_argument(
        "--no-trace",
        action="store_true",
        help="Disable step tracing (expansion counts are reported as 0).",
    )
    args = parser.parse_args(argv)
    if args.input is None:
        parser.error("input is required when HILLS_DATA_PATH is not set")
    args.input = Path(args.input)
    return args


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "summit", "trailhead", "expansions"])

        for r in results:
            writer.writerow([
                r["id"],
                r["summit"],
                r["trailhead"],
                r["expansions"],
            ])


def main(argv=None):
    args = parse_args(argv)
    puzzles = []
    results = []

    if args.input.is_file():
        puzzles = load_puzzles(str(args.input))
    elif args.input.is_dir():
        for file_path in sorted(args.input.iterdir()):
            if file_path.suffix in SUPPORTED_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
    else:
        raise ValueError(f"Input path {args.input} is neither file nor directory")

    for puzzle in puzzles:
        reset_tracer()
        enable_tracing(not args.no_trace)
        tracer = get_tracer()
        puzzle_id = puzzle.get("id", "unknown")

        try:
            answers = solve_puzzle(puzzle, tracer=tracer)
            summary = tracer.summary()

            results.append({
                "id": puzzle_id,
                "summit": answers["summit"],
                "trailhead": answers["trailhead"],
                "expansions": summary["num_expansions"],
            })
        except Exception as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            results.append({
                "id": puzzle_id,
                "summit": -1,
                "trailhead": -1,
                "expansions": -1,
            })

        if args.trace_dir:
            tracer.to_csv(args.trace_dir / f"{puzzle_id}.csv")

    if args.output:
        write_results_csv(results, args.output)
    else:
        print(results)
    return results


if __name__ == "__main__":
    main()
