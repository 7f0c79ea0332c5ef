"""
High level entrypoint bundling configuration and evaluation helpers.

``EcoFit`` wires a configuration (schema defaults, optional file, overrides)
into an :class:`~ecofit.context.EvaluationContext` and scores adaptatypes with
it.  It also exposes the configuration reference used by the CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from loguru import logger

from .context import EvaluationContext
from .genetics.adaptation import Adaptatype, Environment, EvaluationOutcome
from .genetics.fitness import Fitness
from .utils.config_loader import ConfigLike, ConfigLoader, LoadedConfig
from .utils.config_reference import (
    as_dict as _config_schema_dict,
    find_field,
    iter_fields,
    to_markdown as _config_schema_markdown,
    write_markdown as _config_write_markdown,
)
from .utils.logger import configure_logging


def _config_schema_console(section: Optional[str] = None) -> str:
    lines = []
    for field in iter_fields(section):
        default_repr = "None" if field.default is None else repr(field.default)
        lines.append(f"{field.dotted:<22} {field.type:<6} {default_repr:<12} {field.description}")
    return "\n".join(lines)


class EcoFit:
    """Configured evaluator for adaptatypes."""

    @classmethod
    def describe_config(
        cls,
        section: Optional[str] = None,
        *,
        as_markdown: bool = False,
        to_console: bool = False,
    ) -> Union[str, Dict[str, Dict[str, Dict[str, object]]]]:
        """Return metadata describing EcoFit configuration keys.

        Parameters
        ----------
        section : str, optional
            Restrict the output to one section (for example ``"audit"``).
        as_markdown : bool, default False
            Return Markdown text instead of a nested dictionary.
        to_console : bool, default False
            Also print the result to stdout.
        """

        if as_markdown:
            markdown = _config_schema_markdown(section=section)
            if to_console:
                print(markdown)
            return markdown

        if to_console:
            print(_config_schema_console(section=section))
        return _config_schema_dict(section)

    @classmethod
    def explain(cls, key: str) -> str:
        """Return a human readable description for a configuration key."""
        return find_field(key).explain()

    @classmethod
    def generate_config_docs(cls, path: Union[str, Path] = Path("CONFIG.md")) -> Path:
        return _config_write_markdown(Path(path))

    def __init__(
        self,
        config: Optional[ConfigLike] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        *,
        configure_logs: bool = False,
    ) -> None:
        """Create an evaluator.

        Parameters
        ----------
        config : path, mapping or YAML string, optional
            Configuration layered over the schema defaults.
        overrides : mapping, optional
            Final overrides, e.g. ``{"audit": {"sink": "stdout"}}``.
        configure_logs : bool, default False
            Reset Loguru handlers to the configured ``logging.level``.
        """

        self.config: LoadedConfig = ConfigLoader().load(config, overrides=overrides)
        if configure_logs:
            configure_logging(str(self.config.get("logging", "level")))
        self.context = EvaluationContext.from_config(self.config)
        logger.debug("EcoFit configured: {}", self.config.to_dict())

    def fitness(self, adaptatype: Adaptatype[Any], environment: Environment) -> Fitness:
        return adaptatype.fitness(environment, context=self.context)

    def evaluate(self, adaptatype: Adaptatype[Any], environment: Environment) -> EvaluationOutcome:
        return adaptatype.evaluate(environment, context=self.context)
