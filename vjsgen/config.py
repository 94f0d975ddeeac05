"""Configuration loading for vjsgen (.vjsgen.yml)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .models import GenerationContext
from .registry import VersionRegistry

CONFIG_FILENAME = ".vjsgen.yml"
_BUNDLED_REGISTRY = "generator-package.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file or registry source cannot be parsed."""


@dataclass
class PluginConfig:
    """Identity of the plugin project from .vjsgen.yml."""

    name: Optional[str] = None
    package_name: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    license: Optional[str] = None


@dataclass
class FeatureConfig:
    """Optional tooling switched on for the generated manifest."""

    docs: bool = False
    css: bool = False
    lang: bool = False
    precommit: bool = False
    prepush: bool = False


@dataclass
class VjsGenConfig:
    """Represents the settings defined in .vjsgen.yml."""

    root: Path
    plugin: PluginConfig = field(default_factory=PluginConfig)
    features: FeatureConfig = field(default_factory=FeatureConfig)
    registry_path: Optional[Path] = None

    def context_options(self) -> Dict[str, Any]:
        """Return generator options (camelCase) derived from the configuration."""
        options: Dict[str, Any] = {
            "pluginName": self.plugin.name,
            "packageName": self.plugin.package_name,
            "description": self.plugin.description,
            "author": self.plugin.author,
            "licenseName": self.plugin.license,
            "docs": self.features.docs,
            "css": self.features.css,
            "lang": self.features.lang,
            "precommit": self.features.precommit,
            "prepush": self.features.prepush,
        }
        return {key: value for key, value in options.items() if value is not None}


def load_config(config_path: Path) -> VjsGenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return VjsGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    plugin_data = _as_dict(data.get("plugin"))
    plugin = PluginConfig(
        name=_as_str(plugin_data.get("name")),
        package_name=_as_str(plugin_data.get("package_name")),
        description=_as_str(plugin_data.get("description")),
        author=_as_str(plugin_data.get("author")),
        license=_as_str(plugin_data.get("license")),
    )

    feature_data = _as_dict(data.get("features"))
    features = FeatureConfig(
        docs=_as_bool(feature_data.get("docs")) or False,
        css=_as_bool(feature_data.get("css")) or False,
        lang=_as_bool(feature_data.get("lang")) or False,
        precommit=_as_bool(feature_data.get("precommit")) or False,
        prepush=_as_bool(feature_data.get("prepush")) or False,
    )

    registry_str = _as_str(data.get("registry"))
    registry_path = root / registry_str if registry_str else None

    return VjsGenConfig(
        root=root,
        plugin=plugin,
        features=features,
        registry_path=registry_path,
    )


def load_registry(config: VjsGenConfig | None = None) -> VersionRegistry:
    """Build the version registry from the configured file or the bundled metadata."""
    if config is not None and config.registry_path is not None:
        path = config.registry_path
        if not path.exists():
            raise ConfigError(f"Registry file not found: {path}")
        text = path.read_text(encoding="utf-8")
        source = path.name
    else:
        text = resources.files("vjsgen.data").joinpath(_BUNDLED_REGISTRY).read_text(
            encoding="utf-8"
        )
        source = _BUNDLED_REGISTRY

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {source}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{source} must contain a JSON object")
    return VersionRegistry.from_package_json(data)


def build_context(
    config: VjsGenConfig, overrides: Mapping[str, Any] | None = None
) -> GenerationContext:
    """Combine configured options with explicit overrides into a context."""
    options = config.context_options()
    options.update({key: value for key, value in (overrides or {}).items() if value is not None})
    if not options.get("pluginName") and not options.get("plugin_name"):
        raise ConfigError("A plugin name is required (plugin.name in .vjsgen.yml or --name)")
    return GenerationContext.from_options(options)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
