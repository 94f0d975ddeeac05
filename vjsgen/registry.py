"""Version registry backing the dependency sets written into generated manifests."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping

# Later groups win when a package is declared in more than one of them.
_DEPENDENCY_GROUPS = ("dependencies", "devDependencies", "optionalDependencies")


class UnresolvedDependencyError(RuntimeError):
    """Raised when a package requested for a generated manifest has no known version."""

    def __init__(self, package_name: str) -> None:
        self.package_name = package_name
        super().__init__(
            f"{package_name} is not in the dependencies declared for the generator"
        )


class VersionRegistry(Mapping[str, str]):
    """Immutable lookup from package name to version constraint."""

    def __init__(self, versions: Mapping[str, str] | None = None) -> None:
        self._versions: Mapping[str, str] = MappingProxyType(dict(versions or {}))

    @classmethod
    def from_package_json(cls, data: Mapping[str, Any]) -> "VersionRegistry":
        """Collect versions from the dependency groups of a package.json document."""
        versions: Dict[str, str] = {}
        for group in _DEPENDENCY_GROUPS:
            declared = data.get(group)
            if not isinstance(declared, Mapping):
                continue
            for name, version in declared.items():
                if isinstance(version, str) and version:
                    versions[str(name)] = version
        return cls(versions)

    def resolve(self, package_name: str) -> str:
        version = self._versions.get(package_name)
        if not version:
            raise UnresolvedDependencyError(package_name)
        return version

    def resolve_many(self, package_names: Iterable[str]) -> Dict[str, str]:
        """Resolve every name, failing on the first one that is unknown."""
        return {name: self.resolve(name) for name in package_names}

    def __getitem__(self, package_name: str) -> str:
        return self._versions[package_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._versions)

    def __len__(self) -> int:
        return len(self._versions)

    def __repr__(self) -> str:
        return f"VersionRegistry({len(self._versions)} packages)"


__all__ = ["UnresolvedDependencyError", "VersionRegistry"]
