"""Configuration schema using Pydantic."""

import logging
from typing import Annotated, Any, ClassVar, Dict, Literal, Mapping, Tuple, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationInfo, field_validator

logger = logging.getLogger(__name__)

# Input bounds enforced by the parameter form
RING_NODES_BOUNDS = (3, 100)
RING_SKIP_BOUNDS = (1, 50)
GRID_BOUNDS = (2, 20)
HYPERCUBE_DIMENSION_BOUNDS = (0, 10)


def clamp_int(value: Any, low: int, high: int, name: str = "value") -> int:
    """Coerce ``value`` to an int within ``[low, high]``.

    Numeric strings are truncated like numbers ("12.7" gives 12). Values that
    cannot be read as numbers fall back to ``low``. Both the fallback and any
    clamping are logged as warnings.
    """
    try:
        number = int(float(value)) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Invalid input for %s (%r), using fallback value: %d", name, value, low)
        return low

    clamped = max(low, min(number, high))
    if clamped != number:
        logger.warning("Provided %s %d adjusted to %d (allowed %d-%d)", name, number, clamped, low, high)
    return clamped


class _BoundedParams(BaseModel):
    """Base for parameter records whose integer fields are clamped, not rejected."""

    bounds: ClassVar[Dict[str, Tuple[int, int]]] = {}

    # The "type" discriminator must stay free of before-validators
    @field_validator("nodes", "skip", "rows", "cols", "dimension", mode="before", check_fields=False)
    @classmethod
    def _clamp_to_bounds(cls, value: Any, info: ValidationInfo) -> Any:
        bounds = cls.bounds.get(info.field_name)
        if bounds is None:
            return value
        return clamp_int(value, bounds[0], bounds[1], name=info.field_name)

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class RingParams(_BoundedParams):
    """Ring of ``nodes`` vertices with optional skip-distance chords."""
    bounds: ClassVar[Dict[str, Tuple[int, int]]] = {
        "nodes": RING_NODES_BOUNDS,
        "skip": RING_SKIP_BOUNDS,
    }

    type: Literal["ring"] = "ring"
    nodes: int = Field(default=12, description="Number of nodes on the ring")
    skip: int = Field(default=1, description="Chord skip distance (1 = plain cycle)")


class MeshParams(_BoundedParams):
    """2D grid without wraparound."""
    bounds: ClassVar[Dict[str, Tuple[int, int]]] = {"rows": GRID_BOUNDS, "cols": GRID_BOUNDS}

    type: Literal["mesh"] = "mesh"
    rows: int = Field(default=4, description="Number of grid rows")
    cols: int = Field(default=5, description="Number of grid columns")


class TorusParams(_BoundedParams):
    """2D grid with wraparound in both directions."""
    bounds: ClassVar[Dict[str, Tuple[int, int]]] = {"rows": GRID_BOUNDS, "cols": GRID_BOUNDS}

    type: Literal["torus"] = "torus"
    rows: int = Field(default=4, description="Number of grid rows")
    cols: int = Field(default=5, description="Number of grid columns")
    use_3d: bool = Field(default=False, description="Renderer hint: lay the torus out in 3D")


class HypercubeParams(_BoundedParams):
    """Binary hypercube of ``2**dimension`` nodes."""
    bounds: ClassVar[Dict[str, Tuple[int, int]]] = {"dimension": HYPERCUBE_DIMENSION_BOUNDS}

    type: Literal["hypercube"] = "hypercube"
    dimension: int = Field(default=3, description="Hypercube dimension")


TopologyParams = Annotated[
    Union[RingParams, MeshParams, TorusParams, HypercubeParams],
    Field(discriminator="type"),
]
"""Tagged union of all topology parameter records, keyed on ``type``"""

TOPOLOGY_TYPES = ("ring", "mesh", "torus", "hypercube")

_topology_adapter = TypeAdapter(TopologyParams)


def parse_topology_params(data: Mapping[str, Any]) -> Union[RingParams, MeshParams, TorusParams, HypercubeParams]:
    """Validate a plain mapping (e.g. ``{"type": "ring", "nodes": 8}``) into a params model."""
    return _topology_adapter.validate_python(dict(data))


class AnalysisConfig(BaseModel):
    """What to compute on top of the generated graph."""
    source: int = Field(default=0, ge=0, description="Source node for path highlighting")
    highlight_paths: bool = Field(
        default=True,
        description="Reconstruct the longest shortest paths from the source node"
    )
    verbose: bool = Field(default=False, description="Enable verbose logging")


class Config(BaseModel):
    """Main configuration object."""
    name: str = Field(default="topology", description="Run name")
    topology: TopologyParams
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

    class Config:
        """Pydantic configuration."""
        extra = "forbid"  # Raise error on unknown fields
