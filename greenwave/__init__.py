"""Green-wave analysis and genetic offset optimisation for signalised junctions."""

__version__ = "0.1.0"