"""Schema validation for output sinks published by flow scripts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from packages.common.models import DiscoveryOutput
from packages.flows.discover_items import FIRST_ITEM_INDEX, LAST_ITEMS_INDEX, MIDDLE_ITEMS_INDEX


class SchemaValidationError(Exception):
    """Raised when schema validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


# flag -> minimum maxItemIndex for the flag to be set
DISCOVERY_FLAG_THRESHOLDS = {
    "hasFirstItem": FIRST_ITEM_INDEX,
    "hasMiddleItems": MIDDLE_ITEMS_INDEX,
    "hasLastItems": LAST_ITEMS_INDEX,
}


def validate_discovery_output(payload: Mapping[str, Any]) -> DiscoveryOutput:
    """Validate the sink populated by discover_items and return it as a record.

    Raises SchemaValidationError if validation fails.
    """
    if not isinstance(payload, Mapping):
        raise SchemaValidationError("Output sink must be a mapping")

    required_fields = {"maxItemIndex", *DISCOVERY_FLAG_THRESHOLDS}
    missing = required_fields - set(payload.keys())
    if missing:
        raise SchemaValidationError(f"Output sink missing required fields: {sorted(missing)}")

    # bool is an int subclass; reject it explicitly
    max_index = payload["maxItemIndex"]
    if isinstance(max_index, bool) or not isinstance(max_index, int):
        raise SchemaValidationError("maxItemIndex must be an integer", field="maxItemIndex")

    for flag, threshold in DISCOVERY_FLAG_THRESHOLDS.items():
        value = payload[flag]
        if not isinstance(value, bool):
            raise SchemaValidationError(f"{flag} must be a boolean", field=flag)
        expected = max_index >= threshold
        if value is not expected:
            raise SchemaValidationError(
                f"{flag} is {value} but maxItemIndex={max_index} implies {expected}",
                field=flag,
            )

    return DiscoveryOutput.model_validate(payload)
