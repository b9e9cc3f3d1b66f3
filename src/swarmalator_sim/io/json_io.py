# MIT License (see LICENSE)
"""
JSON scenario files for swarmalator runs.

A scenario file describes the initial conditions and parameters of one
session (a SwarmConfig). It is not a snapshot of a running engine.

JSON Schema Overview:
---------------------
{
  "agents": int,                       # Required
  "positions": [[x, y], ...] | [x0, y0, x1, y1, ...],   # Required
  "phases": [float, ...],              # Default: evenly spread over [0, 2π)
  "natural_frequencies": [float, ...], # Default: all 0
  "K": float,                          # Default: 1.0
  "J": float,                          # Default: 0.0
  "chirality": [float, ...] | null,    # Optional
  "target": [x, y] | null,             # Optional
  "dt": float,                         # Default: 0.05
  "strict": bool                       # Default: false
}
"""
from __future__ import annotations
import json
import logging
from typing import Any

import numpy as np

from ..config import SwarmConfig, linspace_phases

logger = logging.getLogger(__name__)


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a scenario file without building a config.

    Args:
        path: Path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def config_from_json(d: dict[str, Any]) -> SwarmConfig:
    """
    Build a SwarmConfig from a parsed scenario dictionary.

    Lengths are not checked here; SwarmConfig.build() raises LengthMismatch
    when the engine is constructed.

    Raises:
        ValueError: If a required field is missing or has the wrong shape.
    """
    if "agents" not in d:
        raise ValueError("Scenario missing required 'agents' field.")
    agents = d["agents"]
    if isinstance(agents, bool) or not isinstance(agents, int) or agents < 0:
        raise ValueError(f"'agents' must be a non-negative integer, got {agents!r}")

    if "positions" not in d:
        raise ValueError("Scenario missing required 'positions' field.")
    positions = np.array(d["positions"], dtype=np.float64)
    if positions.ndim == 2 and positions.shape[1] != 2:
        raise ValueError(f"'positions' rows must be [x, y] pairs, got shape {positions.shape}")
    if positions.ndim > 2:
        raise ValueError(f"'positions' must be a flat list or a list of pairs, got shape {positions.shape}")

    phases = d.get("phases")
    natural_frequencies = d.get("natural_frequencies")
    chirality = d.get("chirality")
    target = d.get("target")
    if target is not None and (not isinstance(target, list) or len(target) != 2):
        raise ValueError(f"'target' must be [x, y], got {target!r}")

    return SwarmConfig(
        agents=agents,
        positions=positions,
        phases=linspace_phases(agents) if phases is None else phases,
        natural_frequencies=np.zeros(agents) if natural_frequencies is None else natural_frequencies,
        K=float(d.get("K", 1.0)),
        J=float(d.get("J", 0.0)),
        chirality=chirality,
        target=None if target is None else tuple(target),
        dt=float(d.get("dt", 0.05)),
        strict=bool(d.get("strict", False)),
    )


def load_config(path: str) -> SwarmConfig:
    """
    Load a scenario file into a SwarmConfig.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If required fields are missing or malformed.
    """
    config = config_from_json(load_config_raw(path))
    logger.info(f"Loaded scenario with {config.agents} agents from {path}")
    return config


def config_to_json(config: SwarmConfig) -> dict[str, Any]:
    """
    Serialize a SwarmConfig to a dictionary (round-trip compatible).

    Positions are written as [x, y] pairs. Optional fields are omitted when
    they hold their defaults.
    """
    result: dict[str, Any] = {
        "agents": config.agents,
        "positions": config.positions.reshape(-1, 2).tolist(),
        "phases": config.phases.tolist(),
        "natural_frequencies": config.natural_frequencies.tolist(),
        "K": config.K,
        "J": config.J,
    }
    if config.chirality is not None:
        result["chirality"] = config.chirality.tolist()
    if config.target is not None:
        result["target"] = list(config.target)
    if config.dt != 0.05:
        result["dt"] = config.dt
    if config.strict:
        result["strict"] = True
    return result


def save_config(config: SwarmConfig, path: str, indent: int = 2) -> None:
    """Write a SwarmConfig to a JSON scenario file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)
    logger.info(f"Saved scenario with {config.agents} agents to {path}")
