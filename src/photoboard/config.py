from dataclasses import dataclass, field


@dataclass(frozen=True)
class GridConfig:
    origin_x: float = 20.0
    origin_y: float = 20.0
    step_x: float = 260.0
    step_y: float = 260.0
    wrap_x: float = 1000.0  # wrap once x exceeds this


@dataclass(frozen=True)
class BoundsConfig:
    initial_width: float = 1200.0
    initial_height: float = 800.0
    edge_margin: float = 100.0  # grow when an edge comes this close
    growth_padding: float = 400.0  # room added past the edge on growth
    shift_padding: float = 200.0  # room added on the negative side on shift


@dataclass(frozen=True)
class BoardConfig:
    item_width: float = 240.0
    grid: GridConfig = field(default_factory=GridConfig)
    bounds: BoundsConfig = field(default_factory=BoundsConfig)
