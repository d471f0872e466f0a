# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Hierarchical configuration with YAML/TOML files, env vars, and model binding."""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

from causeway.kernel.exceptions import ConfigurationException

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

_CONFIG_PROPERTIES_ATTR = "__causeway_config_prefix__"

_ENV_PREFIX = "CAUSEWAY_"

_MAX_PLACEHOLDER_DEPTH = 10


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a pydantic model or dataclass as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="causeway.build")
        class BuildProperties(BaseModel):
            git_hash: str | None = None
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def env_key_for(key: str) -> str:
    """Map a dotted key to its overriding environment variable.

    ``causeway.build.git_hash`` -> ``CAUSEWAY_BUILD_GIT_HASH``
    """
    base = key.removeprefix("causeway.")
    return _ENV_PREFIX + base.upper().replace(".", "_").replace("-", "_")


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (CAUSEWAY_SECTION_KEY format)
    2. causeway.yaml / causeway.toml in the base directory
    3. Packaged defaults (causeway-defaults.yaml)
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """Config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    @classmethod
    def from_sources(cls, base_dir: str | Path, load_defaults: bool = True) -> Config:
        """Load packaged defaults, then overlay ``causeway.{yaml,toml}`` from *base_dir*."""
        base_dir = Path(base_dir)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_defaults()
            sources.append("causeway-defaults.yaml (defaults)")

        for ext in (".yaml", ".toml"):
            candidate = base_dir / f"causeway{ext}"
            if candidate.is_file():
                data = cls._deep_merge(data, cls._load_config_data(candidate))
                sources.append(str(candidate))

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load one explicit YAML or TOML file on top of the packaged defaults."""
        path = Path(path)
        if not path.is_file():
            raise ConfigurationException(f"Configuration file not found: {path}", context={"path": str(path)})

        data = cls._load_defaults() if load_defaults else {}
        instance = cls(cls._deep_merge(data, cls._load_config_data(path)))
        instance._loaded_sources = (["causeway-defaults.yaml (defaults)"] if load_defaults else []) + [str(path)]
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        try:
            if path.suffix == ".toml":
                with open(path, "rb") as f:
                    return tomllib.load(f) or {}
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
            raise ConfigurationException(
                f"Failed to parse configuration file {path}: {exc}",
                help="Check the file for syntax errors.",
                context={"path": str(path)},
            ) from exc

    @staticmethod
    def _load_defaults() -> dict[str, Any]:
        defaults_file = importlib.resources.files("causeway.resources").joinpath("causeway-defaults.yaml")
        return yaml.safe_load(defaults_file.read_text(encoding="utf-8")) or {}

    def merged(self, override: dict[str, Any]) -> Config:
        """Return a new Config with *override* deep-merged over this one."""
        instance = Config(self._deep_merge(self._data, override))
        instance._loaded_sources = [*self._loaded_sources, "(overrides)"]
        return instance

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _lookup(self, key: str) -> Any:
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
            if current is None:
                return None
        return current

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        String values containing ``${...}`` placeholders are resolved:
        - ``${ENV_VAR}`` — resolved from environment variables
        - ``${config.key}`` — resolved from other config values
        - ``${key:default}`` — uses default if key/env not found
        """
        env_val = os.environ.get(env_key_for(key))
        if env_val is not None:
            return env_val

        current = self._lookup(key)
        if current is None:
            return default

        if isinstance(current, str) and "${" in current:
            return self._resolve_placeholders(current)
        return current

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        if _depth > _MAX_PLACEHOLDER_DEPTH:
            raise ConfigurationException(
                f"Max recursion depth exceeded resolving placeholders in '{value}'",
                help="Check for circular references between configuration keys.",
            )

        def _replace(match: re.Match[str]) -> str:
            inner = match.group(1)
            ref_key, sep, default_val = inner.partition(":")

            env_val = os.environ.get(ref_key)
            if env_val is not None:
                return env_val

            current = self._lookup(ref_key)
            if current is not None:
                resolved = str(current)
                if "${" in resolved:
                    resolved = self._resolve_placeholders(resolved, _depth + 1)
                return resolved

            if sep:
                return default_val

            raise ConfigurationException(
                f"Cannot resolve placeholder '${{{inner}}}': not found in environment or config",
                context={"placeholder": inner},
            )

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        section = self._lookup(prefix)
        return section if isinstance(section, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Bind configuration to a @config_properties pydantic model or dataclass.

        Each declared field is read through :meth:`get`, so environment
        variables override file values field by field.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ConfigurationException(f"{config_cls.__name__} is not decorated with @config_properties")

        if isinstance(config_cls, type) and issubclass(config_cls, BaseModel):
            values = self._collect(prefix, config_cls.model_fields)
            try:
                return config_cls.model_validate(values)
            except ValidationError as exc:
                raise ConfigurationException(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}",
                    context={"prefix": prefix},
                ) from exc

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for name, value in self._collect(prefix, [f.name for f in dataclasses.fields(config_cls)]).items():  # type: ignore[arg-type]
            expected_type = hints.get(name)
            if expected_type is int and isinstance(value, str):
                value = int(value)
            elif expected_type is bool and isinstance(value, str):
                value = value.lower() in ("true", "1", "yes")
            kwargs[name] = value
        return config_cls(**kwargs)

    def _collect(self, prefix: str, names: Any) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for name in names:
            value = self.get(f"{prefix}.{name}")
            if value is not None:
                values[name] = value
        return values
