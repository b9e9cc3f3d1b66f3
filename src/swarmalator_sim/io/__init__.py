# MIT License (see LICENSE)
"""
Input/Output utilities for swarmalator scenarios.

This subpackage provides:
    - JSON scenario files: load and save SwarmConfig initial conditions.
    - Round-trip support: saved scenarios load back to equal configs.

Typical usage:
    from swarmalator_sim.io import load_config, save_config

    config = load_config("ring.json")
    engine = config.build()
    save_config(config, "ring_copy.json")
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_to_json,
    config_from_json,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    # Saving
    "save_config",
    # Serialization
    "config_to_json",
    "config_from_json",
]
