"""FastAPI application exposing flow scripts and their recorded runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

from packages.common.models import ScriptRunRequest, ScriptRunResult
from packages.common.store import RunStore
from packages.flows.registry import UnknownScriptError, list_scripts
from packages.tools.script_host import ScriptHost


run_store = RunStore()
script_host = ScriptHost(run_store=run_store)

app = FastAPI(title="Flowscripts API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/scripts")
def get_scripts() -> dict[str, list[dict[str, Any]]]:
    return {"scripts": [info.model_dump() for info in list_scripts()]}


@app.post("/scripts/{name}/run", response_model=ScriptRunResult)
def run_script(name: str, request: ScriptRunRequest | None = None) -> ScriptRunResult:
    request = request or ScriptRunRequest()
    try:
        return script_host.run(name, output=request.output, persist=request.persist)
    except UnknownScriptError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/runs")
def list_runs(script: str | None = None, limit: int = Query(50, ge=1)) -> dict[str, list[dict[str, Any]]]:
    """List recorded runs, newest first, optionally filtered by script name."""
    results = run_store.list_results(script=script, limit=limit)
    return {"runs": [result.model_dump(mode="json") for result in results]}


@app.get("/runs/{run_id}", response_model=ScriptRunResult)
def get_run(run_id: str) -> ScriptRunResult:
    try:
        return run_store.load_result(run_id)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"Run not found: {run_id}") from exc


@app.get("/runs/{run_id}/log")
def get_run_log(run_id: str) -> dict[str, list[dict[str, Any]]]:
    try:
        events = run_store.read_log(run_id)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"Run not found: {run_id}") from exc
    return {"events": events}
