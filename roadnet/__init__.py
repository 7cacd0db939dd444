"""Building blocks for road network data: containers, binary I/O, OD-pairs, categories and attributes."""

__version__ = "0.1.0"