"""
Unified configuration loader for EcoFit.

Configurations can be provided as dictionaries, JSON/YAML files, YAML strings
or OmegaConf objects and are merged on top of the defaults declared in the
configuration schema.  Keys that the schema does not declare are rejected so
typos surface immediately instead of being silently ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional, Union

import yaml
from omegaconf import DictConfig, OmegaConf

from ..exceptions import EcoFitConfigError
from .config_reference import CONFIG_SCHEMA, defaults

ConfigLike = Union[str, Path, Mapping[str, Any], DictConfig]


@dataclass
class LoadedConfig:
    """Container that exposes both OmegaConf and plain-dict views."""

    data: DictConfig

    def to_dict(self) -> Dict[str, Any]:
        return OmegaConf.to_container(self.data, resolve=True)  # type: ignore[return-value]

    def __getitem__(self, item: str) -> Any:
        return self.data[item]

    def get(self, section: str, key: str, default: Any = None) -> Any:
        return OmegaConf.select(self.data, f"{section}.{key}", default=default)


class ConfigLoader:
    """
    Load and merge EcoFit configuration sources.

    Parameters
    ----------
    global_config : Optional[ConfigLike]
        Optional path or mapping layered over the schema defaults.
    """

    def __init__(self, global_config: Optional[ConfigLike] = None) -> None:
        self._global_conf = OmegaConf.create(defaults())
        if global_config is not None:
            self._global_conf = self._merge(self._global_conf, self._coerce(global_config))

    def _coerce(self, source: ConfigLike) -> DictConfig:
        """Convert arbitrary config-like inputs into an OmegaConf instance."""
        if isinstance(source, DictConfig):
            return source
        if isinstance(source, Mapping):
            return OmegaConf.create(dict(source))
        if isinstance(source, Path):
            return self._load_path(source)
        if isinstance(source, str):
            potential_path = Path(source)
            if potential_path.suffix and potential_path.exists():
                return self._load_path(potential_path)
            try:
                parsed = yaml.safe_load(source)
            except yaml.YAMLError as exc:
                raise EcoFitConfigError(f"Failed to parse configuration string: {exc}") from exc
            if not isinstance(parsed, MutableMapping):
                raise EcoFitConfigError("Configuration string must evaluate to a mapping.")
            return OmegaConf.create(dict(parsed))
        raise TypeError(f"Unsupported configuration source: {type(source)!r}")

    def _load_path(self, path: Path) -> DictConfig:
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        suffix = path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return OmegaConf.load(path)  # type: ignore[return-value]
        if suffix == ".json":
            return OmegaConf.create(yaml.safe_load(path.read_text(encoding="utf-8")))
        raise EcoFitConfigError(f"Unsupported configuration file format: '{suffix}'. Expected YAML or JSON.")

    @staticmethod
    def _validate(conf: DictConfig) -> None:
        for section, entries in conf.items():
            if section not in CONFIG_SCHEMA:
                raise EcoFitConfigError(
                    f"Unknown configuration section '{section}'. Options: {list(CONFIG_SCHEMA)}",
                    context={"section": section},
                )
            if not isinstance(entries, Mapping):
                raise EcoFitConfigError(
                    f"Configuration section '{section}' must be a mapping.",
                    context={"section": section},
                )
            for key in entries:
                if key not in CONFIG_SCHEMA[section]:
                    raise EcoFitConfigError(
                        f"Unknown configuration key '{section}.{key}'.",
                        context={"section": section, "key": key},
                    )

    def _merge(self, base: DictConfig, other: DictConfig) -> DictConfig:
        self._validate(other)
        return OmegaConf.merge(base, other)  # type: ignore[return-value]

    def load(
        self,
        config: Optional[ConfigLike] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> LoadedConfig:
        """Merge defaults with optional additional configuration and overrides."""

        merged = self._global_conf.copy()

        if config is not None:
            merged = self._merge(merged, self._coerce(config))

        if overrides:
            merged = self._merge(merged, OmegaConf.create(dict(overrides)))

        return LoadedConfig(merged)
