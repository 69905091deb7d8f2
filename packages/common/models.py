"""Shared pydantic models and enums for Flowscripts."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScriptStatus(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"


class DiscoveryOutput(BaseModel):
    """Record published by the discover_items flow script."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_item_index: int = Field(alias="maxItemIndex")
    has_first_item: bool = Field(alias="hasFirstItem")
    has_middle_items: bool = Field(alias="hasMiddleItems")
    has_last_items: bool = Field(alias="hasLastItems")


class ScriptRunRequest(BaseModel):
    output: dict[str, Any] = Field(default_factory=dict)
    persist: bool | None = None


class ScriptRunResult(BaseModel):
    run_id: str
    script: str
    status: ScriptStatus
    output: dict[str, Any] = Field(default_factory=dict)
    logs: list[str] = Field(default_factory=list)
    started_at: datetime
    completed_at: datetime
    duration_ms: int = 0
    error: str | None = None


class ScriptInfo(BaseModel):
    name: str
    description: str = ""
