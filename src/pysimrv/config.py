"""
Random variable definitions read from YAML.

A file maps each variable name to its family tag and any parameters that
differ from the family defaults::

    interarrival:
      type: Exponential
      parameters:
        mean: 2.0
    batch_size:
      type: DUniform
      parameters: {min: 1, max: 4}

Parameter names are the ``Controls`` keys of ``pysimrv.factory``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from pysimrv.exceptions import ControlsError
from pysimrv.factory import Controls, get_random_variable
from pysimrv.rng import RNStreamFactory, get_default_factory
from pysimrv.rvariable import RVariable

logger = logging.getLogger(__name__)


def read_yaml(path: Path | str) -> Any:
    """Parse a YAML file with ``yaml.safe_load``."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def controls_from_mapping(data: Mapping[str, Any]) -> dict[str, Controls]:
    """Build named controls from an already parsed mapping."""
    if not isinstance(data, Mapping):
        raise ControlsError(f"expected a mapping of variable names, got {type(data).__name__}")
    result: dict[str, Controls] = {}
    for name, entry in data.items():
        if not isinstance(entry, Mapping) or "type" not in entry:
            raise ControlsError(f"variable '{name}' needs a 'type' entry")
        unknown = set(entry) - {"type", "parameters"}
        if unknown:
            raise ControlsError(f"variable '{name}' has unknown entries {sorted(unknown)}")
        parameters = entry.get("parameters") or {}
        result[str(name)] = Controls.from_dict(entry["type"], parameters)
    return result


def load_controls(path: Path | str) -> dict[str, Controls]:
    """Read named controls from a YAML file, preserving file order."""
    data = read_yaml(path)
    if data is None:
        return {}
    controls = controls_from_mapping(data)
    logger.debug("Loaded %d variable definitions from %s", len(controls), path)
    return controls


def load_random_variables(
    path: Path | str, factory: RNStreamFactory | None = None
) -> dict[str, RVariable]:
    """
    Build every variable defined in a YAML file.

    Each variable gets its own stream from ``factory`` (the default factory
    when None), named after the variable and handed out in file order.
    """
    if factory is None:
        factory = get_default_factory()
    return {
        name: get_random_variable(controls, factory.get_stream(name))
        for name, controls in load_controls(path).items()
    }
