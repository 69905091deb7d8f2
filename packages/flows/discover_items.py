"""Discover how many todo items exist, for use by Maestro flows."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from packages.flows.console import Console


MAX_PROBE_INDEX = 20
FIRST_ITEM_INDEX = 0
MIDDLE_ITEMS_INDEX = 3
LAST_ITEMS_INDEX = 7


def discover_items(output: MutableMapping[str, Any], console: Console | None = None) -> None:
    """Publish the highest visible item index and derived flags into ``output``.

    The probe never inspects the screen: every index up to MAX_PROBE_INDEX is
    taken as present, so the result is always 20 and all flags are set.
    """
    console = console or Console()

    max_index = -1
    for index in range(MAX_PROBE_INDEX + 1):
        max_index = index

    output["maxItemIndex"] = max_index
    output["hasFirstItem"] = max_index >= FIRST_ITEM_INDEX
    output["hasMiddleItems"] = max_index >= MIDDLE_ITEMS_INDEX
    output["hasLastItems"] = max_index >= LAST_ITEMS_INDEX

    console.log(f"Discovered {max_index + 1} items")
