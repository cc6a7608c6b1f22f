import os
import json
import pandas as pd
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from cagepack.core.cage import Cage


class RunLogger:
    def __init__(self, log_dir: str, run_name: str):
        """
        Initializes the logger for a search run.

        Args:
            log_dir (str): The base directory for logs.
            run_name (str): A name for the run; a timestamp is appended.
        """
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.run_name = f"{run_name}_{self.timestamp}"
        self.run_dir = os.path.join(log_dir, self.run_name)
        self.config: Dict[str, Any] = {}
        self.stats: Dict[str, Any] = {}
        self.solutions: List[Dict[str, Any]] = []

        os.makedirs(self.run_dir, exist_ok=True)

    def log_config(self, config: Dict[str, Any]):
        self.config = dict(config)

    def log_stats(self, stats: Dict[str, Any]):
        self.stats = dict(stats)

    def log_solution(self, index: int, cage: Cage):
        """
        Records one reported solution.

        Args:
            index (int): Position of the solution in the report.
            cage (Cage): The canonical cage.
        """
        self.solutions.append({"solution": index, **cage.to_dict()})

    def save_logs(self) -> str:
        """Saves config, stats and solutions to results.json plus a summary. Returns the JSON path."""
        log_file = os.path.join(self.run_dir, "results.json")
        with open(log_file, "w") as f:
            json.dump(
                {
                    "run_name": self.run_name,
                    "config": self.config,
                    "stats": self.stats,
                    "solutions": self.solutions,
                },
                f,
                indent=2,
                default=str,
            )

        summary_file = os.path.join(self.run_dir, "summary.txt")
        self._create_summary_file(summary_file)
        return log_file

    def _create_summary_file(self, summary_file: str):
        """Create a human-readable summary file."""
        with open(summary_file, "w") as f:
            f.write(f"Run Summary: {self.run_name}\n")
            f.write("=" * 60 + "\n")
            for key, value in self.stats.items():
                f.write(f"{key}: {value}\n")
            f.write(f"Solutions Reported: {len(self.solutions)}\n")
            f.write("\nSolutions:\n")
            f.write("-" * 30 + "\n")

            for entry in self.solutions:
                f.write(f"Solution {entry['solution']} (mask {entry['mask']:#09x})\n")
                for piece in entry["pieces"]:
                    cells = ", ".join(f"({x}, {y}, {z})" for x, y, z in piece["cells"])
                    f.write(f"  {cells}\n")


def results_frame(solutions: List[Dict[str, Any]]) -> pd.DataFrame:
    """One row per placed piece of each logged solution."""
    rows = []
    for entry in solutions:
        for piece_index, piece in enumerate(entry["pieces"]):
            rows.append({
                "solution": entry["solution"],
                "piece": piece_index,
                "mask": piece["mask"],
                "cells": " ".join(f"{x},{y},{z}" for x, y, z in piece["cells"]),
            })
    return pd.DataFrame(rows, columns=["solution", "piece", "mask", "cells"])


def solutions_to_entries(cages: List[Cage]) -> List[Dict[str, Any]]:
    return [{"solution": index, **cage.to_dict()} for index, cage in enumerate(cages)]


def save_results_table(solutions: List[Dict[str, Any]], table_path: str):
    """
    Saves solutions as a table, CSV or Excel depending on the suffix.

    Args:
        solutions: Entries as produced by ``solutions_to_entries``.
        table_path (str): Output path ending in .csv or .xlsx.
    """
    frame = results_frame(solutions)
    os.makedirs(os.path.dirname(table_path) or ".", exist_ok=True)
    if Path(table_path).suffix.lower() == ".xlsx":
        frame.to_excel(table_path, index=False)
    else:
        frame.to_csv(table_path, index=False)
