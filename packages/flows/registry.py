"""Registry of flow scripts the host can run."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from packages.common.models import ScriptInfo
from packages.common.schemas import validate_discovery_output
from packages.flows.console import Console
from packages.flows.discover_items import discover_items

FlowScript = Callable[[MutableMapping[str, Any], Console], None]
OutputValidator = Callable[[Mapping[str, Any]], object]

SCRIPTS: dict[str, FlowScript] = {
    "discover_items": discover_items,
}

VALIDATORS: dict[str, OutputValidator] = {
    "discover_items": validate_discovery_output,
}


class UnknownScriptError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown flow script: {self.name}"


def get_script(name: str) -> FlowScript:
    script = SCRIPTS.get(name.lower())
    if script is None:
        raise UnknownScriptError(name)
    return script


def get_validator(name: str) -> OutputValidator | None:
    return VALIDATORS.get(name.lower())


def list_scripts() -> list[ScriptInfo]:
    infos = []
    for name in sorted(SCRIPTS):
        doc = (SCRIPTS[name].__doc__ or "").strip()
        infos.append(ScriptInfo(name=name, description=doc.splitlines()[0] if doc else ""))
    return infos
