import json
import sys
from pathlib import Path

import pytest

from run import main, parse_args, write_results_csv

SAMPLE = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi\n"


def build_demo_answers(puzzle, tracer=None):
    return {"summit": 1, "trailhead": 2}


def test_main_single_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE)

    results = main([str(path)])

    assert results == [{"id": "sample", "summit": 31, "trailhead": 29, "expansions": results[0]["expansions"]}]
    assert results[0]["expansions"] > 0


def test_main_reads_sys_argv(monkeypatch, tmp_path):
    monkeypatch.setattr("run.solve_puzzle", build_demo_answers)
    path = tmp_path / "p.json"
    path.write_text(json.dumps({"id": "puzzle1", "grid": SAMPLE}))

    monkeypatch.setattr(sys, "argv", ["run.py", str(path)])
    results = main()

    assert results[0]["id"] == "puzzle1"
    assert results[0]["summit"] == 1


def test_main_directory_input(tmp_path):
    for i in range(3):
        (tmp_path / f"puzzle{i}.json").write_text(json.dumps({"id": f"puzzle{i}", "grid": SAMPLE}))
    (tmp_path / "notes.md").write_text("ignored")

    results = main([str(tmp_path)])

    assert [r["id"] for r in results] == ["puzzle0", "puzzle1", "puzzle2"]
    assert all(r["summit"] == 31 for r in results)


def test_main_reports_failures_and_continues(tmp_path):
    path = tmp_path / "mixed.jsonl"
    path.write_text(
        json.dumps({"id": "bad", "grid": "SazE"}) + "\n" + json.dumps({"id": "good", "grid": SAMPLE}) + "\n"
    )

    results = main([str(path)])

    assert results[0] == {"id": "bad", "summit": -1, "trailhead": -1, "expansions": -1}
    assert results[1]["summit"] == 31


def test_no_trace_reports_zero_expansions(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE)

    results = main([str(path), "--no-trace"])

    assert results[0]["expansions"] == 0


def test_csv_and_trace_output(tmp_path):
    path = tmp_path / "puzzle_csv.txt"
    path.write_text(SAMPLE)
    output_path = tmp_path / "out" / "results.csv"
    output_path.parent.mkdir()
    trace_dir = tmp_path / "traces"

    main([str(path), "--output", str(output_path), "--trace-dir", str(trace_dir)])

    content = output_path.read_text()
    assert "id,summit,trailhead,expansions" in content
    assert "puzzle_csv,31,29," in content
    trace = (trace_dir / "puzzle_csv.csv").read_text()
    assert trace.startswith("timestamp,step_number,action_type")
    assert "goal" in trace


def test_input_defaults_to_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HILLS_DATA_PATH", str(tmp_path))
    args = parse_args([])
    assert args.input == Path(tmp_path)


def test_missing_input_is_an_error(monkeypatch):
    monkeypatch.delenv("HILLS_DATA_PATH", raising=False)
    with pytest.raises(SystemExit):
        parse_args([])


def test_write_results_csv(tmp_path):
    output_path = tmp_path / "r.csv"
    write_results_csv([{"id": "a", "summit": 3, "trailhead": 2, "expansions": 9}], output_path)
    assert output_path.read_text().splitlines() == ["id,summit,trailhead,expansions", "a,3,2,9"]
