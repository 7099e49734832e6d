"""Token tree merging."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def is_plain_mapping(value: object) -> bool:
    """Only mappings are merged key by key; everything else is a leaf."""
    return isinstance(value, Mapping)


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``overrides`` laid on top.

    Nested mappings present on both sides are merged recursively. Any other
    override value, lists included, replaces the base value whole. The result
    is a new tree; neither argument is modified.
    """
    result: dict[Any, Any] = {key: _copy_value(value) for key, value in base.items()}
    for key, override_value in overrides.items():
        base_value = base.get(key)
        if is_plain_mapping(override_value) and is_plain_mapping(base_value):
            result[key] = deep_merge(base_value, override_value)
        else:
            result[key] = _copy_value(override_value)
    return result


def _copy_value(value: Any) -> Any:
    if is_plain_mapping(value):
        return {key: _copy_value(item) for key, item in value.items()}
    return copy.deepcopy(value)
