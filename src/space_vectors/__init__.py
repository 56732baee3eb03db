"""space-vectors: a calculator for 3-D analytic geometry."""

__version__ = "0.3.0"
