"""Canonical key ordering for generated package.json documents."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from ..models import Manifest

SORTED_MAPS: tuple[str, ...] = ("dependencies", "devDependencies")
SORTED_LISTS: tuple[str, ...] = ("keywords", "files")

_LIFECYCLE_PREFIXES: tuple[str, ...] = ("pre", "post")


def key_order(source: Mapping[str, Any]) -> List[str]:
    """Return the keys of ``source`` in ascending lexical order."""
    return sorted(source)


def script_order(names: Iterable[str]) -> List[str]:
    """Return script names sorted with lifecycle scripts next to their core script.

    Core scripts are sorted lexically. ``pre<name>`` is placed directly before
    ``<name>`` and ``post<name>`` directly after it. A ``pre``/``post``
    script whose suffix is not a core script (including a bare ``pre`` or
    ``post``) is an orphan and is appended in its original order.
    """
    names = list(dict.fromkeys(names))
    lifecycle = [name for name in names if name.startswith(_LIFECYCLE_PREFIXES)]
    core = sorted(name for name in names if name not in lifecycle)
    core_names = set(core)

    attached: Dict[str, str] = {}
    orphans: List[str] = []
    for name in lifecycle:
        prefix = "pre" if name.startswith("pre") else "post"
        target = name[len(prefix):]
        if target in core_names:
            attached[name] = target
        else:
            orphans.append(name)

    order: List[str] = []
    for name in core:
        if f"pre{name}" in attached:
            order.append(f"pre{name}")
        order.append(name)
        if f"post{name}" in attached:
            order.append(f"post{name}")
    order.extend(orphans)
    return order


def alphabetize(source: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: source[key] for key in key_order(source)}


def alphabetize_scripts(source: Mapping[str, Any]) -> Dict[str, Any]:
    """Identical to :func:`alphabetize` but keeps pre/post scripts beside their core script."""
    return {name: source[name] for name in script_order(source)}


def normalize(manifest: Mapping[str, Any]) -> Manifest:
    """Return a copy of ``manifest`` with order-significant fields in canonical order.

    Values are never changed; fields that are missing or have an unexpected
    type are passed through untouched.
    """
    result: Manifest = dict(manifest)

    scripts = result.get("scripts")
    if isinstance(scripts, Mapping):
        result["scripts"] = alphabetize_scripts(scripts)

    for field_name in SORTED_MAPS:
        value = result.get(field_name)
        if isinstance(value, Mapping):
            result[field_name] = alphabetize(value)

    for field_name in SORTED_LISTS:
        value = result.get(field_name)
        if isinstance(value, list):
            result[field_name] = sorted(value, key=str)

    return result


__all__ = [
    "alphabetize",
    "alphabetize_scripts",
    "key_order",
    "normalize",
    "script_order",
]
