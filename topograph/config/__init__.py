"""Configuration management for topograph runs."""

from topograph.config.schema import (
    Config,
    AnalysisConfig,
    RingParams,
    MeshParams,
    TorusParams,
    HypercubeParams,
    TopologyParams,
    TOPOLOGY_TYPES,
    clamp_int,
    parse_topology_params,
)
from topograph.config.loader import config_from_data, load_config, save_config

__all__ = [
    "Config",
    "AnalysisConfig",
    "RingParams",
    "MeshParams",
    "TorusParams",
    "HypercubeParams",
    "TopologyParams",
    "TOPOLOGY_TYPES",
    "clamp_int",
    "parse_topology_params",
    "config_from_data",
    "load_config",
    "save_config",
]
