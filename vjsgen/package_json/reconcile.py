"""Merge generated fields with an existing package.json."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping

from ..models import Manifest

MERGED_MAPS: tuple[str, ...] = ("scripts", "dependencies", "devDependencies")
MERGED_LISTS: tuple[str, ...] = ("keywords",)


def reconcile(current: Mapping[str, Any] | None, generated: Mapping[str, Any]) -> Manifest:
    """Lay ``generated`` over ``current`` without touching either input.

    Top-level fields are replaced wholesale. Script and dependency maps keep
    hand-added entries while tool-managed keys take the generated value, and
    keywords are unioned.
    """
    base = copy.deepcopy(dict(current)) if isinstance(current, Mapping) else {}
    result: Manifest = dict(base)
    result.update(copy.deepcopy(dict(generated)))

    for field_name in MERGED_MAPS:
        if field_name in generated:
            result[field_name] = _merge_maps(base.get(field_name), generated[field_name])

    for field_name in MERGED_LISTS:
        if field_name in generated:
            result[field_name] = _union(base.get(field_name), generated[field_name])

    return result


def _merge_maps(existing: Any, generated: Mapping[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(existing) if isinstance(existing, Mapping) else {}
    merged.update(copy.deepcopy(dict(generated)))
    return merged


def _union(existing: Any, generated: Any) -> List[Any]:
    combined: List[Any] = []
    for source in (existing, generated):
        if not isinstance(source, (list, tuple)):
            continue
        for item in source:
            if item not in combined:
                combined.append(item)
    return combined


__all__ = ["MERGED_LISTS", "MERGED_MAPS", "reconcile"]
