import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

GRID_KEYS = ("grid", "puzzle", "input", "text")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads height map puzzles from a file. Handles .txt, .json, .jsonl, .csv
    and .parquet formats.
    Returns a list of puzzle records, each with an "id" and a "grid".
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    stem = Path(file_path).stem

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _extract_grid_text(record: Dict[str, Any]) -> Optional[str]:
        for key in GRID_KEYS:
            if _is_nonempty_str(record.get(key)):
                return record[key].strip("\r\n")
        return None

    def _normalize_record(record: Dict[str, Any], index: int) -> Dict[str, Any]:
        grid = _extract_grid_text(record)
        if grid:
            record["grid"] = grid
        raw_id = record.get("id")
        if raw_id is None or (isinstance(raw_id, float) and pd.isna(raw_id)) or str(raw_id).strip() == "":
            record["id"] = f"{stem}-{index}"
        else:
            # Numeric ids from JSON or parquet are kept, as text.
            record["id"] = str(raw_id)
        return record

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        return [
            _normalize_record(r, i) for i, r in enumerate(records) if isinstance(r, dict)
        ]

    # Case 1: raw grid text
    if file_path.endswith(".txt"):
        with open(file_path, "r", encoding="utf-8") as f:
            return [{"id": stem, "grid": f.read().strip("\r\n")}]

    # Case 2: tabular files (Binary or CSV)
    if file_path.endswith(".parquet") or file_path.endswith(".csv"):
        try:
            if file_path.endswith(".parquet"):
                df = pd.read_parquet(file_path)
            else:
                df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
            return _normalize_all(df.to_dict(orient="records"))
        except Exception as e:
            print(f"Error reading {file_path}: {e}")
            return []

    # Case 3: JSON File (Text; array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            if isinstance(payload, list):
                return _normalize_all(payload)
            if isinstance(payload, dict):
                return _normalize_all([payload])
            return []
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            pass

    # Case 4: JSONL File (Text)
    data = []
    with open(file_path, 'r', encoding='utf-8') as f:
        for line in f:
            if line.strip():
                try:
                    obj = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if isinstance(obj, dict):
                    data.append(obj)
    return _normalize_all(data)
