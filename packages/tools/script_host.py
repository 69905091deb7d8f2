"""Hosting environment that runs flow scripts against a fresh output sink."""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import Any

from packages.common.io import utcnow_iso
from packages.common.models import ScriptRunResult, ScriptStatus
from packages.common.paths import persist_runs_default
from packages.common.schemas import SchemaValidationError
from packages.common.store import RunStore, new_id
from packages.flows.console import Console
from packages.flows.registry import get_script, get_validator


class ScriptHost:
    """Supplies the output sink and console, then records what a script published."""

    def __init__(self, run_store: RunStore, persist: bool | None = None) -> None:
        self.run_store = run_store
        self.persist = persist_runs_default() if persist is None else persist

    def run(
        self,
        name: str,
        output: dict[str, Any] | None = None,
        persist: bool | None = None,
    ) -> ScriptRunResult:
        script = get_script(name)
        validator = get_validator(name)
        script_name = name.lower()
        sink: dict[str, Any] = dict(output or {})
        console = Console()

        started_at = datetime.now(UTC)
        start = time.perf_counter()
        status = ScriptStatus.COMPLETED
        error: str | None = None
        try:
            script(sink, console)
            if validator is not None:
                validator(sink)
        except SchemaValidationError as exc:
            status = ScriptStatus.FAILED
            error = exc.message
        except Exception as exc:
            status = ScriptStatus.FAILED
            error = str(exc) or exc.__class__.__name__
        duration_ms = int((time.perf_counter() - start) * 1000)

        result = ScriptRunResult(
            run_id=new_id("run"),
            script=script_name,
            status=status,
            output=sink,
            logs=list(console.lines),
            started_at=started_at,
            completed_at=datetime.now(UTC),
            duration_ms=duration_ms,
            error=error,
        )
        if persist is None:
            persist = self.persist
        if persist:
            self._record(result)
        return result

    def _event(
        self,
        result: ScriptRunResult,
        action: str,
        outcome: str,
        message: str | None = None,
        latency_ms: int = 0,
        error: str | None = None,
    ) -> None:
        payload = {
            "timestamp": utcnow_iso(),
            "script": result.script,
            "component": "script_host",
            "action": action,
            "outcome": outcome,
            "latency_ms": latency_ms,
            "message": message,
            "error": error,
        }
        self.run_store.append_log(result.run_id, payload)

    def _record(self, result: ScriptRunResult) -> None:
        self.run_store.save_result(result)
        for line in result.logs:
            self._event(result, "console_log", "info", message=line)
        self._event(
            result,
            "script_end",
            result.status.value,
            latency_ms=result.duration_ms,
            error=result.error,
        )
