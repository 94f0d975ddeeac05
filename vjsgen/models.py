"""Core data models shared across vjsgen components."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

Manifest = Dict[str, Any]

_OPTION_ALIASES = {
    "pluginName": "plugin_name",
    "packageName": "package_name",
    "licenseName": "license_name",
}


@dataclass(frozen=True)
class GenerationContext:
    """Options describing the plugin project a manifest is generated for."""

    plugin_name: str
    package_name: str
    version: str = "1.0.0"
    description: Optional[str] = None
    author: Optional[str] = None
    license_name: Optional[str] = None
    docs: bool = False
    css: bool = False
    lang: bool = False
    precommit: bool = False
    prepush: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "GenerationContext":
        """Build a context from generator options, accepting camelCase names."""
        known = {item.name for item in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                values[name] = value
        if "package_name" not in values and "plugin_name" in values:
            values["package_name"] = f"videojs-{values['plugin_name']}"
        return cls(**values)

    @property
    def hooks_enabled(self) -> bool:
        """True when at least one git hook is requested."""
        return self.precommit or self.prepush
