"""
bladetags configuration management (YAML + environment overrides).

Configuration sources (highest to lowest priority):
1. Environment variables: BLADETAGS_*
2. Project config: an explicit path, or ``bladetags.yaml`` / ``bladetags.yml``
   in the project root
3. Bundled defaults: bladetags.data/config/defaults.yaml

The merged result is validated against bladetags.data/schemas/config.yaml.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator

from bladetags.data import read_yaml
from bladetags.exceptions import ComponentRegistrationError, ConfigError

from .compiler import Compiler, DirectiveSyntax
from .components import ComponentRegistry
from .utils.merge import deep_merge

logger = logging.getLogger(__name__)

ENV_PREFIX = "BLADETAGS_"
PROJECT_CONFIG_NAMES = ("bladetags.yaml", "bladetags.yml")


class ConfigManager:
    """Load, merge, and validate bladetags configuration."""

    def __init__(
        self,
        project_root: Optional[Path] = None,
        *,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.config_path = Path(config_path) if config_path else None
        self.environ = os.environ if environ is None else environ
        self._config: Optional[Dict[str, Any]] = None

    # ---------- Loading ----------

    def find_project_config(self) -> Optional[Path]:
        """Return the project config file to load, if any.

        Raises:
            ConfigError: If an explicit config path does not exist.
        """
        if self.config_path is not None:
            if not self.config_path.exists():
                raise ConfigError(
                    f"Config file not found: {self.config_path}",
                    context={"path": str(self.config_path)},
                )
            return self.config_path
        for name in PROJECT_CONFIG_NAMES:
            candidate = self.project_root / name
            if candidate.exists():
                return candidate
        return None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Invalid YAML is an error, never an empty config.
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}", context={"path": str(path)}) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    def load_config(self, *, validate: bool = True) -> Dict[str, Any]:
        """Load the merged configuration (cached per manager)."""
        if self._config is not None:
            return copy.deepcopy(self._config)

        cfg = copy.deepcopy(read_yaml("config", "defaults.yaml"))

        project_file = self.find_project_config()
        if project_file is not None:
            logger.debug("Loading project config %s", project_file)
            cfg = deep_merge(cfg, self.load_yaml(project_file))

        self.apply_env_overrides(cfg)

        if validate:
            self.validate(cfg)

        self._config = cfg
        return copy.deepcopy(cfg)

    # ---------- Environment overrides ----------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return value
        return value

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any, str]]:
        for key in sorted(self.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            path = [seg.lower() for seg in raw.split("__")]
            if not raw or any(seg == "" for seg in path):
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: {key!r}", context={"key": key})
            yield path, self._coerce_type(self.environ[key]), key

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value, key in self._iter_env_overrides():
            cursor = cfg
            for part in path[:-1]:
                nxt = cursor.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    cursor[part] = nxt
                cursor = nxt
            cursor[path[-1]] = value
            logger.debug("Applied env override %s", key)

    # ---------- Validation ----------

    def validate(self, cfg: Dict[str, Any]) -> None:
        """Validate ``cfg`` against the bundled JSON schema.

        Raises:
            ConfigError: Listing every schema violation with its path.
        """
        schema = read_yaml("schemas", "config.yaml")
        validator = Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(cfg), key=lambda e: [str(p) for p in e.path])
        if not errors:
            return
        issues = []
        for err in errors:
            location = ".".join(str(p) for p in err.path) or "<root>"
            issues.append(f"{location}: {err.message}")
        raise ConfigError(
            "Invalid bladetags configuration:\n  - " + "\n  - ".join(issues),
            context={"issues": issues},
        )

    # ---------- Builders ----------

    def directive_syntax(self) -> DirectiveSyntax:
        context = self.load_config().get("context") or {}
        defaults = DirectiveSyntax()
        return DirectiveSyntax(
            context_view=context.get("view", defaults.context_view),
            context_stack=context.get("stack", defaults.context_stack),
        )

    def build_registry(self, *, prefix: Optional[str] = None) -> ComponentRegistry:
        """Build a ComponentRegistry from the configured components.

        Raises:
            ConfigError: If a configured component is invalid.
        """
        cfg = self.load_config()
        context = cfg.get("context") or {}
        syntax = self.directive_syntax()
        registry = ComponentRegistry(
            prefix=cfg.get("prefix", "") if prefix is None else prefix,
            register_context=bool(context.get("enabled", True)),
            context_view=syntax.context_view,
        )
        for index, entry in enumerate(cfg.get("components") or []):
            try:
                registry.component(entry["view"], tag=entry.get("tag"), data_model=entry.get("data_model"))
            except ComponentRegistrationError as exc:
                raise ConfigError(
                    f"Invalid component at components.{index}: {exc}",
                    context={"index": index, **exc.context},
                ) from exc
        return registry

    def build_compiler(self, *, prefix: Optional[str] = None) -> Compiler:
        registry = self.build_registry(prefix=prefix)
        return Compiler(registry, syntax=self.directive_syntax())


def load_config(
    project_root: Optional[Path] = None,
    *,
    config_path: Optional[Path] = None,
    validate: bool = True,
) -> Dict[str, Any]:
    """Load merged configuration for ``project_root``."""
    return ConfigManager(project_root, config_path=config_path).load_config(validate=validate)


__all__ = ["ConfigManager", "load_config", "ENV_PREFIX", "PROJECT_CONFIG_NAMES"]
