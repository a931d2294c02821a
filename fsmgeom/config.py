"""Engine configuration: interaction tolerances and drawing proportions."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Tunable constants shared by link resolution, hit testing and labels.

    Self-loop and arrow proportions are expressed relative to the node radius
    or to ``pi`` so they scale with the node they are attached to.
    """

    snap_to_padding: float = 6.0
    hit_target_padding: float = 6.0
    self_loop_distance: float = 1.5
    self_loop_radius: float = 0.75
    self_loop_sweep: float = 0.8
    self_loop_arrow_turn: float = 0.4
    self_link_snap_angle: float = 0.1
    arrow_length: float = 8.0
    arrow_half_width: float = 5.0
    label_padding: float = 5.0
    label_half_height: float = 10.0
    label_baseline: float = 6.0
    accept_state_inset: float = 6.0


_ENGINE_CONFIG = EngineConfig()


def get_engine_config() -> EngineConfig:
    return copy.deepcopy(_ENGINE_CONFIG)


def set_engine_config(config: EngineConfig) -> None:
    global _ENGINE_CONFIG
    _ENGINE_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[EngineConfig]) -> EngineConfig:
    return config if config is not None else _ENGINE_CONFIG


__all__ = ["EngineConfig", "get_engine_config", "set_engine_config", "resolve_config"]
