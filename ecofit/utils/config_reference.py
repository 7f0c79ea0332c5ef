"""
Configuration schema metadata for EcoFit and the reference documents built from it.

The schema ships as ``ecofit/configs/config_default.yaml``; every key declares
its type, default and a description.  The loader takes its defaults from here,
while the CLI and ``EcoFit.describe_config`` render the descriptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

import yaml

from ..exceptions import EcoFitConfigError

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "configs" / "config_default.yaml"

Schema = Dict[str, Dict[str, "ConfigField"]]


@dataclass(frozen=True)
class ConfigField:
    """One documented configuration key."""

    section: str
    name: str
    type: str
    default: object
    description: str

    @property
    def dotted(self) -> str:
        return f"{self.section}.{self.name}"

    def as_dict(self) -> Dict[str, object]:
        return {
            "section": self.section,
            "key": self.name,
            "type": self.type,
            "default": self.default,
            "description": self.description,
        }

    def explain(self) -> str:
        default_repr = "None" if self.default is None else repr(self.default)
        description = self.description or "No description available."
        return f"{self.dotted} (type={self.type}, default={default_repr}) -> {description}"


def load_schema(path: Path = SCHEMA_PATH) -> Schema:
    if not path.exists():
        raise FileNotFoundError(f"Configuration schema file not found: {path}")
    raw: Mapping[str, Mapping[str, Mapping[str, object]]] = yaml.safe_load(path.read_text(encoding="utf-8"))
    return {
        section: {
            key: ConfigField(
                section=section,
                name=key,
                type=str(meta.get("type", "Any")),
                default=meta.get("default"),
                description=" ".join(str(meta.get("description", "")).split()),
            )
            for key, meta in entries.items()
        }
        for section, entries in raw.items()
    }


CONFIG_SCHEMA: Schema = load_schema()


def _sections(section: Optional[str]) -> Schema:
    if section is None:
        return CONFIG_SCHEMA
    if section not in CONFIG_SCHEMA:
        raise EcoFitConfigError(
            f"Unknown config section '{section}'. Options: {list(CONFIG_SCHEMA)}",
            context={"section": section},
        )
    return {section: CONFIG_SCHEMA[section]}


def defaults() -> Dict[str, Dict[str, object]]:
    """Return the default value of every key, grouped by section."""

    return {
        section: {name: field.default for name, field in fields.items()}
        for section, fields in CONFIG_SCHEMA.items()
    }


def iter_fields(section: Optional[str] = None) -> Iterable[ConfigField]:
    for fields in _sections(section).values():
        yield from fields.values()


def find_field(key: str) -> ConfigField:
    """Look up a key either as ``section.key`` or by its bare name."""

    normalized = key.strip().lower().replace("-", "_")
    for field in iter_fields():
        if normalized in (field.dotted, field.name):
            return field
    raise EcoFitConfigError(f"Unknown configuration key '{key}'.", context={"key": key})


def as_dict(section: Optional[str] = None) -> Dict[str, Dict[str, Dict[str, object]]]:
    return {
        name: {field.name: field.as_dict() for field in fields.values()}
        for name, fields in _sections(section).items()
    }


def to_markdown(section: Optional[str] = None) -> str:
    """Render the configuration reference as markdown tables, one per section."""

    title = "# EcoFit Configuration Reference"
    if section:
        title += f" - {section.title()}"
    lines = [title, ""]
    for name, fields in _sections(section).items():
        lines += [f"## {name.title()}", "", "| Key | Type | Default | Description |", "| --- | --- | --- | --- |"]
        for field in fields.values():
            default_repr = "`None`" if field.default is None else f"`{field.default}`"
            description = field.description.replace("|", "\\|")
            lines.append(f"| `{field.name}` | `{field.type}` | {default_repr} | {description} |")
        lines.append("")
    return "\n".join(lines)


def write_markdown(path: Path, section: Optional[str] = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_markdown(section=section), encoding="utf-8")
    return path
