"""Engine configuration: sampling densities used by each operation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Sampling densities and output precision for each engine operation."""

    # Sample count floor applied by the sampler
    min_segments: int = 4

    # Density when a caller asks for raw points without choosing one
    sample_segments: int = 256

    # Bounds are reduced over a fixed resample
    bounds_segments: int = 256

    # Shoelace area needs a denser polygon; error ~ (2π/N)² / 6
    area_segments: int = 1000

    # Default density for assembled SVG documents
    document_segments: int = 512

    # Decimal digits kept in path coordinates
    path_precision: int = 3

    # Largest accepted path precision (matches Number.prototype.toFixed)
    max_path_precision: int = 100


DEFAULT_CONFIG = EngineConfig()
