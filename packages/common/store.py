"""Persistence helpers for script runs and their event logs."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Any

from packages.common.io import append_jsonl, read_json, read_jsonl, write_json
from packages.common.models import ScriptRunResult
from packages.common.paths import RUNS_DIR


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class RunStore:
    def __init__(self, runs_dir: Path | None = None) -> None:
        self.runs_dir = runs_dir or RUNS_DIR
        self.runs_dir.mkdir(parents=True, exist_ok=True)

    def run_dir(self, run_id: str) -> Path:
        return self.runs_dir / run_id

    def state_path(self, run_id: str) -> Path:
        return self.run_dir(run_id) / "state.json"

    def log_path(self, run_id: str) -> Path:
        return self.run_dir(run_id) / "run-log.jsonl"

    def save_result(self, result: ScriptRunResult) -> None:
        write_json(self.state_path(result.run_id), result.model_dump(mode="json"))

    def load_result(self, run_id: str) -> ScriptRunResult:
        payload = read_json(self.state_path(run_id))
        return ScriptRunResult.model_validate(payload)

    def append_log(self, run_id: str, event: dict[str, Any]) -> None:
        append_jsonl(self.log_path(run_id), event)

    def read_log(self, run_id: str) -> list[dict[str, Any]]:
        if not self.state_path(run_id).exists():
            raise FileNotFoundError(run_id)
        return read_jsonl(self.log_path(run_id))

    def list_results(self, script: str | None = None, limit: int = 50) -> list[ScriptRunResult]:
        """Return stored runs, newest first, skipping unreadable state files."""
        results: list[ScriptRunResult] = []
        for run_dir in self.runs_dir.glob("run_*"):
            try:
                result = self.load_result(run_dir.name)
            except (OSError, ValueError):
                continue
            if script and result.script != script.lower():
                continue
            results.append(result)
        results.sort(key=lambda item: item.started_at, reverse=True)
        return results[:limit]
