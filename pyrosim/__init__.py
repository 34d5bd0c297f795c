"""Building blocks for a particle simulation: vectors, containers, easing, statistics, concurrency and render layers."""

__version__ = "0.1.0"